# 📄 File: app/modules/comments/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# The comments table and the code that reads and writes it.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy model and repository implementation for comments.
# 🔄 Connected Modules / Calls From:
# app.main, app.shared.infrastructure.database.models (table registry)

from .comment_repository_impl import CommentRepositoryImpl
from .models import CommentModel

__all__ = ["CommentRepositoryImpl", "CommentModel"]
