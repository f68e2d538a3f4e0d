# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools that every
# part of Clubbera uses, like database connections, security and logging.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package for configuration, infrastructure adapters and
# cross-cutting concerns used by the feature modules.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Database, storage and email infrastructure
- Security and authentication utilities
- Logging and helper functions
"""

__all__ = []
