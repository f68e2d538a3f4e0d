# 📄 File: app/modules/groups/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# What a club is, how people relate to it, and the diary of what happened in it.
# 🧪 Purpose (Technical Summary):
# Re-exports the Group aggregate, membership state and activity log models.
# 🔗 Dependencies:
# group.py, activity.py
# 🔄 Connected Modules / Calls From:
# groups services and repositories, comments and events modules

from .activity import ActivityAction, ActivityLog
from .group import (
    MEMBER_STATES,
    ButtonAction,
    Group,
    Membership,
    MembershipState,
    normalize_topics,
)

__all__ = [
    "ActivityAction",
    "ActivityLog",
    "MEMBER_STATES",
    "ButtonAction",
    "Group",
    "Membership",
    "MembershipState",
    "normalize_topics",
]
