# 📄 File: app/modules/categories/presentation/api/v1/categories.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for interest categories: anyone can list them, admins manage them.
# 🧪 Purpose (Technical Summary):
# FastAPI category endpoints delegating to CategoryService; writes require an admin.
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted at / and /api/v1)

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from app.modules.categories.domain.services.category_service import CategoryService
from app.modules.categories.presentation.api.schemas.category_schemas import (
    CategoryResponse,
    CreateCategoryRequest,
)
from app.modules.user_management.domain.models.user import User
from app.modules.user_management.presentation.dependencies import require_admin

categories_router = APIRouter(tags=["Categories"])


@categories_router.post("/category", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    payload: CreateCategoryRequest,
    admin: User = Depends(require_admin),
    category_service: CategoryService = Depends(),
) -> CategoryResponse:
    return CategoryResponse.from_domain(await category_service.create_category(admin, payload.name))


@categories_router.delete("/category/{category_id}", response_model=CategoryResponse)
async def delete_category(
    category_id: UUID,
    admin: User = Depends(require_admin),
    category_service: CategoryService = Depends(),
) -> CategoryResponse:
    return CategoryResponse.from_domain(await category_service.delete_category(admin, category_id))


@categories_router.get("/category", response_model=List[CategoryResponse])
async def list_categories(category_service: CategoryService = Depends()) -> List[CategoryResponse]:
    return [CategoryResponse.from_domain(c) for c in await category_service.list_categories()]
