# 📄 File: app/modules/categories/domain/services/category_service.py
# 🧭 Purpose (Layman Explanation):
# Lets site admins add and remove interest categories, and lets anyone list them.
# 🧪 Purpose (Technical Summary):
# Domain service for categories. Admin checks happen in the route dependency.
# 🔗 Dependencies:
# CategoryRepository
# 🔄 Connected Modules / Calls From:
# categories API endpoints

from typing import List
from uuid import UUID

from fastapi import Depends

from app.modules.categories.domain.models.category import Category
from app.modules.categories.domain.repositories.category_repository import CategoryRepository
from app.modules.user_management.domain.models.user import User
from app.shared.core.exceptions import ConflictError, NotFoundError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class CategoryService:

    def __init__(self, category_repository: CategoryRepository = Depends()):
        self.categories = category_repository

    async def create_category(self, creator: User, name: str) -> Category:
        name = name.strip()
        if await self.categories.get_by_name(name):
            raise ConflictError("A category with this name already exists", "CATEGORY_EXISTS")
        category = await self.categories.create(Category(name=name, creator_id=creator.user_id))
        logger.log_user_action("category.create", str(creator.user_id), resource=str(category.category_id))
        return category

    async def delete_category(self, actor: User, category_id: UUID) -> Category:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", str(category_id))
        await self.categories.delete(category_id)
        logger.log_user_action("category.delete", str(actor.user_id), resource=str(category_id))
        return category

    async def list_categories(self) -> List[Category]:
        return await self.categories.list_all()
