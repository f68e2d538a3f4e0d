# 📄 File: app/modules/groups/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The database tables for clubs and the code that reads and writes them.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy models and repository implementations for the groups module.
# 🔗 Dependencies:
# SQLAlchemy
# 🔄 Connected Modules / Calls From:
# app.main, app.shared.infrastructure.database.models (table registry), search module

from .activity_log_repository_impl import ActivityLogRepositoryImpl
from .group_repository_impl import GroupRepositoryImpl
from .membership_repository_impl import MembershipRepositoryImpl
from .models import ActivityLogModel, GroupMembershipModel, GroupModel, GroupTopicModel

__all__ = [
    "ActivityLogRepositoryImpl",
    "GroupRepositoryImpl",
    "MembershipRepositoryImpl",
    "ActivityLogModel",
    "GroupMembershipModel",
    "GroupModel",
    "GroupTopicModel",
]
