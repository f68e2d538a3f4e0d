# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A quick checkup for the app: is it running, and can it reach its database?
# 🧪 Purpose (Technical Summary):
# Liveness and readiness endpoints for load balancers and orchestration probes.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# app.main (mounted at the root)

from datetime import datetime, timezone

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import db_manager
from app.shared.utils.logging import SERVICE_NAME

health_router = APIRouter(tags=["Health Check"])


@health_router.get("/health", summary="Liveness check")
async def health_check() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        },
    )


@health_router.get("/health/ready", summary="Readiness check")
async def readiness_check() -> JSONResponse:
    """Ready once the database answers; 503 otherwise."""
    database = await db_manager.health_check()
    ready = database["status"] == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if ready else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "status": "ready" if ready else "not_ready",
            "components": {"database": database},
        },
    )
