# 📄 File: app/modules/groups/domain/models/group.py
# 🧭 Purpose (Layman Explanation):
# Defines what a club ("group") is in Clubbera and the different relationships a person
# can have with it: asked to join, member, moderator or banned.
# 🧪 Purpose (Technical Summary):
# Domain models for the Group aggregate and the per-(group, user) MembershipState, the
# single tagged state that replaces parallel member/request/moderator/banned lists.
# 🔗 Dependencies:
# pydantic, app.shared.core.value_objects, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# membership_service.py, group_service.py, group repositories, group schemas

import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from app.shared.core.value_objects import ImageRef, Place
from app.shared.utils.helpers import generate_unique_url, utcnow

TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500


class MembershipState(str, Enum):
    """
    Relationship between one user and one group.

    NONE is never stored: it is the absence of a membership row.
    MODERATOR implies membership.
    """
    NONE = "none"
    REQUESTED = "requested"
    MEMBER = "member"
    MODERATOR = "moderator"
    BANNED = "banned"

    @property
    def is_member(self) -> bool:
        return self in (MembershipState.MEMBER, MembershipState.MODERATOR)


MEMBER_STATES = (MembershipState.MEMBER, MembershipState.MODERATOR)


class ButtonAction(str, Enum):
    """Label of the membership button shown on a group page."""
    JOIN = "Join group"
    LEAVE = "Leave group"
    REQUESTED = "Requested"
    BANNED = "Banned"

    @classmethod
    def for_state(cls, state: MembershipState) -> "ButtonAction":
        if state == MembershipState.BANNED:
            return cls.BANNED
        if state.is_member:
            return cls.LEAVE
        if state == MembershipState.REQUESTED:
            return cls.REQUESTED
        return cls.JOIN


class Membership(BaseModel):
    group_id: uuid.UUID
    user_id: uuid.UUID
    state: MembershipState
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Group(BaseModel):
    """
    Group domain model.

    Membership is not held on the aggregate; it lives in the membership
    relation and is reached through MembershipRepository.
    """

    group_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    unique_url: str
    owner_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    tagline: Optional[str] = Field(None, max_length=150)
    description: Optional[str] = Field(None, max_length=DESCRIPTION_MAX_LENGTH)
    banner: Optional[ImageRef] = None
    location: Optional[Place] = None
    topics: List[str] = Field(default_factory=list)
    permission_required: bool = False
    deactivated: bool = False
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @classmethod
    def create_new_group(
        cls,
        owner_id: uuid.UUID,
        title: str,
        tagline: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[Place] = None,
        topics: Optional[List[str]] = None,
        permission_required: bool = False,
    ) -> "Group":
        now = utcnow()
        title = title.strip()
        return cls(
            unique_url=generate_unique_url(title, now),
            owner_id=owner_id,
            title=title,
            tagline=tagline,
            description=description,
            location=location,
            topics=normalize_topics(topics or []),
            permission_required=permission_required,
            created_at=now,
            updated_at=now,
        )

    def is_owner(self, user_id: uuid.UUID) -> bool:
        return self.owner_id == user_id

    def touch(self) -> None:
        self.updated_at = utcnow()


def normalize_topics(topics: List[str]) -> List[str]:
    """Trim, drop blanks and de-duplicate topic tags, keeping first-seen order."""
    seen = []
    for topic in topics:
        tag = topic.strip()
        if tag and tag.lower() not in (t.lower() for t in seen):
            seen.append(tag)
    return seen
