# 📄 File: app/modules/groups/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The workers that run clubs and their membership rules.
# 🧪 Purpose (Technical Summary):
# Domain services for groups and the membership lifecycle.
# 🔗 Dependencies:
# group_service.py, membership_service.py
# 🔄 Connected Modules / Calls From:
# groups endpoints, comments and events services

from .group_service import GroupDetail, GroupService, MemberEntry, RequestEntry
from .membership_service import MembershipService

__all__ = ["GroupDetail", "GroupService", "MemberEntry", "RequestEntry", "MembershipService"]
