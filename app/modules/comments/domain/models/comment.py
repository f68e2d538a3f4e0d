# 📄 File: app/modules/comments/domain/models/comment.py
# 🧭 Purpose (Layman Explanation):
# Defines a comment on a club's page and a reply to another comment.
# 🧪 Purpose (Technical Summary):
# Comment domain model with a tagged target: GroupTarget for top-level comments and
# ParentCommentTarget for replies, discriminated on ``kind``.
# 🔗 Dependencies:
# pydantic, app.shared.utils.helpers
# 🔄 Connected Modules / Calls From:
# comment_service.py, comment repositories, comment schemas

import uuid
from datetime import datetime
from typing import Literal, Union

from pydantic import BaseModel, Field

from app.shared.utils.helpers import utcnow

CONTENT_MAX_LENGTH = 2000


class GroupTarget(BaseModel):
    kind: Literal["Group"] = "Group"
    group_id: uuid.UUID

    @property
    def target_id(self) -> uuid.UUID:
        return self.group_id


class ParentCommentTarget(BaseModel):
    kind: Literal["Comment"] = "Comment"
    comment_id: uuid.UUID

    @property
    def target_id(self) -> uuid.UUID:
        return self.comment_id


CommentTarget = Union[GroupTarget, ParentCommentTarget]


def make_target(kind: str, target_id: uuid.UUID) -> CommentTarget:
    if kind == "Group":
        return GroupTarget(group_id=target_id)
    if kind == "Comment":
        return ParentCommentTarget(comment_id=target_id)
    raise ValueError(f"Unknown comment target type: {kind}")


class Comment(BaseModel):
    """
    A comment on a group or a reply to another comment.

    ``group_id`` is the group that owns the whole thread.
    """

    comment_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)
    author_id: uuid.UUID
    target: CommentTarget = Field(..., discriminator="kind")
    group_id: uuid.UUID
    created_at: datetime = Field(default_factory=utcnow)
