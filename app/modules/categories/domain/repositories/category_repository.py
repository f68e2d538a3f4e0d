# 📄 File: app/modules/categories/domain/repositories/category_repository.py
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for categories.
# 🔄 Connected Modules / Calls From:
# category_service.py, category_repository_impl.py

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.modules.categories.domain.models.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    async def create(self, category: Category) -> Category:
        """
        Raises:
            ConflictError: If a category with the same name exists
        """

    @abstractmethod
    async def get_by_id(self, category_id: UUID) -> Optional[Category]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Category]:
        """All categories ordered by name."""

    @abstractmethod
    async def delete(self, category_id: UUID) -> bool:
        pass
