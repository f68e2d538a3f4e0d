# 📄 File: app/modules/comments/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# What a comment is and what it can be attached to.
# 🧪 Purpose (Technical Summary):
# Re-exports the Comment model and its target variants.

from .comment import (
    CONTENT_MAX_LENGTH,
    Comment,
    CommentTarget,
    GroupTarget,
    ParentCommentTarget,
    make_target,
)

__all__ = [
    "CONTENT_MAX_LENGTH",
    "Comment",
    "CommentTarget",
    "GroupTarget",
    "ParentCommentTarget",
    "make_target",
]
