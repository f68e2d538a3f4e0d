# 📄 File: app/modules/groups/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# The version 1 club endpoints.
# 🧪 Purpose (Technical Summary):
# Re-exports the v1 groups router.
# 🔗 Dependencies:
# groups.py
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

from .groups import groups_router

__all__ = ["groups_router"]
