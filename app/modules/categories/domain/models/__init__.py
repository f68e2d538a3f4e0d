from .category import NAME_MAX_LENGTH, Category

__all__ = ["NAME_MAX_LENGTH", "Category"]
