# 📄 File: app/modules/comments/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How comments and replies are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for comments. The target is polymorphic (target_type, target_id);
# group_id names the group owning the whole thread so deleting a group removes it.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, shared declarative Base
#
# 🔄 Connected Modules / Calls From:
# - comment_repository_impl.py, shared models registry, migrations

from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text, Uuid

from app.shared.infrastructure.database.connection import Base
from app.shared.utils.helpers import utcnow


class CommentModel(Base):
    __tablename__ = "comments"

    comment_id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    content = Column(Text, nullable=False)
    author_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    target_type = Column(String(20), nullable=False, comment="Group | Comment")
    target_id = Column(Uuid, nullable=False)
    group_id = Column(
        Uuid,
        ForeignKey("groups.group_id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_comments_target_created", "target_type", "target_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<CommentModel(comment_id={self.comment_id}, target={self.target_type}:{self.target_id})>"
