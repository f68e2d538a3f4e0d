# 📄 File: app/modules/comments/presentation/api/schemas/__init__.py
# 🧪 Purpose (Technical Summary):
# Comment request/response schemas.

from .comment_schemas import (
    CommentListResponse,
    CommentRequest,
    CommentResponse,
    DeleteThreadResponse,
)

__all__ = ["CommentListResponse", "CommentRequest", "CommentResponse", "DeleteThreadResponse"]
