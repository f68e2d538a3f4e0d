# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell Clubbera how to reach its database, mail server
# and file storage, and how to behave in each environment.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the pydantic-settings Settings class and
# its cached accessor.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Infrastructure components

"""
Configuration Management Package
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
