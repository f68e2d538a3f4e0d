# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# The description of a Clubbera member and the small pieces that make up a profile.
# 🧪 Purpose (Technical Summary):
# Re-exports the User aggregate and its value objects.
# 🔗 Dependencies:
# user.py
# 🔄 Connected Modules / Calls From:
# services, repositories, schemas

from .user import Gender, ModeratorInvitation, User, UserLocation

__all__ = ["Gender", "ModeratorInvitation", "User", "UserLocation"]
