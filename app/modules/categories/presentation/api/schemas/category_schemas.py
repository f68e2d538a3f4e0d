# 📄 File: app/modules/categories/presentation/api/schemas/category_schemas.py
# 🧪 Purpose (Technical Summary):
# Request/response schemas for category endpoints.

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from app.modules.categories.domain.models.category import NAME_MAX_LENGTH, Category
from app.shared.core.schemas import CamelModel


class CreateCategoryRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name cannot be blank")
        return v.strip()


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    creator_id: Optional[UUID] = None

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.category_id, name=category.name, creator_id=category.creator_id)
