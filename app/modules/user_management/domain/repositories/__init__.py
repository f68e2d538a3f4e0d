# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The list of ways user accounts can be saved and looked up.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the user management domain.
# 🔗 Dependencies:
# user_repository.py
# 🔄 Connected Modules / Calls From:
# domain services, app.main dependency overrides

from .user_repository import UserRepository

__all__ = ["UserRepository"]
