# 📄 File: app/modules/groups/domain/models/activity.py
# 🧭 Purpose (Layman Explanation):
# A diary of what happened in each group (who joined, who left, who was banned) so the
# app can show things like "requested 3 h ago" or the date someone joined.
# 🧪 Purpose (Technical Summary):
# Append-only ActivityLog entries keyed by group and user, with the ActivityAction enum.
# 🔗 Dependencies:
# pydantic, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# membership_service.py, comment_service.py, group_service.py (member and request listings)

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.shared.utils.helpers import utcnow


class ActivityAction(str, Enum):
    REQUEST_SENT = "request_sent"
    RETRACTED_REQUEST = "retracted_request"
    JOINED = "joined"
    LEFT = "left"
    REQUEST_APPROVED = "request_approved"
    REQUEST_DENIED = "request_denied"
    REMOVED = "removed"
    BANNED = "banned"
    UNBANNED = "unbanned"
    MODERATOR_INVITED = "moderator_invited"
    MODERATOR_ADDED = "moderator_added"
    MODERATOR_DECLINED = "moderator_declined"
    MODERATOR_REMOVED = "moderator_removed"
    COMMENTED = "commented"
    EDITED_GROUP = "edited_group"


class ActivityLog(BaseModel):
    """One immutable audit entry."""
    log_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    group_id: uuid.UUID
    user_id: uuid.UUID
    action: ActivityAction
    comment_id: Optional[uuid.UUID] = None
    event_id: Optional[uuid.UUID] = None
    timestamp: datetime = Field(default_factory=utcnow)
