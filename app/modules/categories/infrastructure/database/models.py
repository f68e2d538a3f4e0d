# 📄 File: app/modules/categories/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# How interest categories are stored in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for categories, referenced by user_interests.
# 🔄 Connected Modules / Calls From:
# category_repository_impl.py, shared models registry, migrations

from uuid import uuid4

from sqlalchemy import Column, ForeignKey, String, Uuid

from app.shared.infrastructure.database.connection import Base


class CategoryModel(Base):
    __tablename__ = "categories"

    category_id = Column(Uuid, primary_key=True, default=uuid4, nullable=False)
    name = Column(String(60), unique=True, nullable=False)
    creator_id = Column(
        Uuid,
        ForeignKey("users.user_id", ondelete="SET NULL"),
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<CategoryModel(category_id={self.category_id}, name={self.name})>"
