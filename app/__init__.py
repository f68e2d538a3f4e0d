# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point that tells Python this 'app' folder contains the Clubbera
# application code and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the Clubbera FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - pyproject.toml (version metadata)

"""
Clubbera API - Clubs, Memberships and Events

A backend API where people create clubs, join them, moderate membership,
post events and hold threaded discussions.
"""

__version__ = "1.0.0"
__title__ = "Clubbera API"
__description__ = "Clubs, memberships, events and discussions"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
