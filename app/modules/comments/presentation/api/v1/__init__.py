# 📄 File: app/modules/comments/presentation/api/v1/__init__.py
# 🧪 Purpose (Technical Summary):
# Re-exports the v1 comments router.

from .comments import comments_router

__all__ = ["comments_router"]
