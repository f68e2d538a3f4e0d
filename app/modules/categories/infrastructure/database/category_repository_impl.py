# 📄 File: app/modules/categories/infrastructure/database/category_repository_impl.py
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CategoryRepository. The unique name constraint
# surfaces as a 409 when two admins race on the same name.
# 🔄 Connected Modules / Calls From:
# app.main dependency override for CategoryRepository

from typing import List, Optional
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.categories.domain.models.category import Category
from app.modules.categories.domain.repositories.category_repository import CategoryRepository
from app.modules.categories.infrastructure.database.models import CategoryModel
from app.shared.core.exceptions import ConflictError
from app.shared.infrastructure.database.session import get_db_session


def _to_domain(model: CategoryModel) -> Category:
    return Category(category_id=model.category_id, name=model.name, creator_id=model.creator_id)


class CategoryRepositoryImpl(CategoryRepository):

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        self._session = session

    async def create(self, category: Category) -> Category:
        model = CategoryModel(
            category_id=category.category_id,
            name=category.name,
            creator_id=category.creator_id,
        )
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise ConflictError("A category with this name already exists", "CATEGORY_EXISTS") from e
        return _to_domain(model)

    async def get_by_id(self, category_id: UUID) -> Optional[Category]:
        model = await self._session.get(CategoryModel, category_id)
        return _to_domain(model) if model else None

    async def get_by_name(self, name: str) -> Optional[Category]:
        stmt = select(CategoryModel).where(func.lower(CategoryModel.name) == name.lower())
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return _to_domain(model) if model else None

    async def list_all(self) -> List[Category]:
        stmt = select(CategoryModel).order_by(func.lower(CategoryModel.name), CategoryModel.category_id)
        return [_to_domain(m) for m in (await self._session.execute(stmt)).scalars().all()]

    async def delete(self, category_id: UUID) -> bool:
        result = await self._session.execute(
            delete(CategoryModel).where(CategoryModel.category_id == category_id)
        )
        return result.rowcount > 0
