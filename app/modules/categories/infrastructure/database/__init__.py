from .category_repository_impl import CategoryRepositoryImpl
from .models import CategoryModel

__all__ = ["CategoryRepositoryImpl", "CategoryModel"]
