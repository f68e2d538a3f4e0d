# 📄 File: app/modules/groups/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# The ways clubs, memberships and the activity diary can be saved and read.
# 🧪 Purpose (Technical Summary):
# Repository interfaces for the groups domain.
# 🔗 Dependencies:
# group_repository.py, membership_repository.py, activity_log_repository.py
# 🔄 Connected Modules / Calls From:
# groups/comments/events services, app.main dependency overrides

from .activity_log_repository import ActivityLogRepository
from .group_repository import GroupRepository
from .membership_repository import MembershipRepository

__all__ = ["ActivityLogRepository", "GroupRepository", "MembershipRepository"]
