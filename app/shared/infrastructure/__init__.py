"""
Infrastructure layer package for the Clubbera API.
Provides database connections, object storage and outbound email adapters.
"""

__all__ = []
