# 📄 File: app/modules/user_management/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables for people and their sign-in sessions.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and the UserRepository implementation.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# app.main, app.shared.infrastructure.database.models (table registry)

from .models import ModeratorInvitationModel, UserModel, UserTokenModel, user_interests
from .user_repository_impl import UserRepositoryImpl

__all__ = [
    "ModeratorInvitationModel",
    "UserModel",
    "UserTokenModel",
    "user_interests",
    "UserRepositoryImpl",
]
