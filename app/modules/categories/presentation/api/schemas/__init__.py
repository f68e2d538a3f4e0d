from .category_schemas import CategoryResponse, CreateCategoryRequest

__all__ = ["CategoryResponse", "CreateCategoryRequest"]
