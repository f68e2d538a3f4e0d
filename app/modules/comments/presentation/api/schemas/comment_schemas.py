# 📄 File: app/modules/comments/presentation/api/schemas/comment_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of a new comment and of the comment lists the app shows.
#
# 🧪 Purpose (Technical Summary):
# Pydantic v2 request/response schemas for comment endpoints, serialized in camelCase.
#
# 🔗 Dependencies:
# - pydantic, app.shared.core.schemas, comments domain
#
# 🔄 Connected Modules / Calls From:
# - app.modules.comments.presentation.api.v1.comments

from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.modules.comments.domain.models.comment import CONTENT_MAX_LENGTH, Comment
from app.modules.comments.domain.services.comment_service import CommentPage
from app.modules.user_management.presentation.api.schemas.user_schemas import UserSummaryResponse
from app.shared.core.schemas import CamelModel


class CommentRequest(CamelModel):
    content: str = Field(..., min_length=1, max_length=CONTENT_MAX_LENGTH)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Comment cannot be empty")
        return v.strip()


class CommentResponse(CamelModel):
    id: UUID
    content: str
    author_id: UUID
    author: Optional[UserSummaryResponse] = None
    target_type: Literal["Group", "Comment"]
    target_id: UUID
    group_id: UUID
    reply_count: int = 0
    created_at: datetime

    @classmethod
    def from_domain(
        cls,
        comment: Comment,
        reply_count: int = 0,
        author: Optional[UserSummaryResponse] = None,
    ) -> "CommentResponse":
        return cls(
            id=comment.comment_id,
            content=comment.content,
            author_id=comment.author_id,
            author=author,
            target_type=comment.target.kind,
            target_id=comment.target.target_id,
            group_id=comment.group_id,
            reply_count=reply_count,
            created_at=comment.created_at,
        )


class CommentListResponse(CamelModel):
    comments: List[CommentResponse]
    page: int
    total_pages: int
    total: int

    @classmethod
    def from_page(cls, page: CommentPage) -> "CommentListResponse":
        comments = []
        for comment in page.comments:
            author = page.authors.get(comment.author_id)
            comments.append(CommentResponse.from_domain(
                comment,
                reply_count=page.reply_counts.get(comment.comment_id, 0),
                author=UserSummaryResponse.from_domain(author) if author else None,
            ))
        return cls(comments=comments, page=page.page, total_pages=page.total_pages, total=page.total)


class DeleteThreadResponse(CamelModel):
    message: str
    deleted_count: int
