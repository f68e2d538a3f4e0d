# 📄 File: app/modules/user_management/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 user account endpoints.
# 🧪 Purpose (Technical Summary):
# Re-exports the v1 auth and users routers.
# 🔗 Dependencies:
# auth.py, users.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .auth import auth_router
from .users import users_router

__all__ = ["auth_router", "users_router"]
