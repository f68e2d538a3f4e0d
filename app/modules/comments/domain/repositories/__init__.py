from .comment_repository import CommentRepository

__all__ = ["CommentRepository"]
