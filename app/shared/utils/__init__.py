# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# A collection of helpful tools that other parts of the app use for logging,
# checking input, and formatting output.

# 🧪 Purpose (Technical Summary):
# Utilities package: structured logging, validators, formatters and helpers.

# 🔗 Dependencies:
# - logging, validators, formatters, helpers submodules

# 🔄 Connected Modules / Calls From:
# Used by: All application modules

"""
Shared Utilities Package
"""

from .logging import get_logger, setup_logging, log_context

__all__ = [
    "get_logger",
    "setup_logging",
    "log_context",
]
