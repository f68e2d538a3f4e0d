from .categories import categories_router

__all__ = ["categories_router"]
