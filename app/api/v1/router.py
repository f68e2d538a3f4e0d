# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The switchboard that connects every feature's web addresses (accounts, clubs,
# comments, events, categories and search) into one API.
# 🧪 Purpose (Technical Summary):
# Aggregates all module routers into api_v1_router. app.main mounts it both at the root
# and under /api/v1.
# 🔗 Dependencies:
# FastAPI, module presentation routers
# 🔄 Connected Modules / Calls From:
# app.main

from fastapi import APIRouter

from app.modules.categories.presentation.api.v1.categories import categories_router
from app.modules.comments.presentation.api.v1.comments import comments_router
from app.modules.events.presentation.api.v1.events import events_router
from app.modules.groups.presentation.api.v1.groups import groups_router
from app.modules.search.presentation.api.v1.search import search_router
from app.modules.user_management.presentation.api.v1.auth import auth_router
from app.modules.user_management.presentation.api.v1.users import users_router

api_v1_router = APIRouter()

for module_router in (
    auth_router,
    users_router,
    groups_router,
    comments_router,
    events_router,
    categories_router,
    search_router,
):
    api_v1_router.include_router(module_router)
