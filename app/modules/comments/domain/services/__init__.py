# 📄 File: app/modules/comments/domain/services/__init__.py
# 🧪 Purpose (Technical Summary):
# Comment thread service.

from .comment_service import MAX_THREAD_DEPTH, CommentPage, CommentService

__all__ = ["MAX_THREAD_DEPTH", "CommentPage", "CommentService"]
