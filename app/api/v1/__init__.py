# 📄 File: app/api/v1/__init__.py
# 🧪 Purpose (Technical Summary):
# API version 1: aggregated feature router and health endpoints.

from .health import health_router
from .router import api_v1_router

__all__ = ["api_v1_router", "health_router"]
