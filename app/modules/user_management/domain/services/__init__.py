# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that carry out sign-in and profile actions.
# 🧪 Purpose (Technical Summary):
# Domain services for authentication and user profiles.
# 🔗 Dependencies:
# auth_service.py, user_service.py
# 🔄 Connected Modules / Calls From:
# user management endpoints, auth gate

from .auth_service import AuthService
from .user_service import UserService

__all__ = ["AuthService", "UserService"]
