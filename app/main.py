# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Clubbera app, connects all the different parts
# together and makes sure everything is ready to handle requests from the web and mobile apps.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan (logging, database engine and
# session factory), middleware stack, exception handlers rendering {"error", "code"},
# repository dependency overrides and router registration at / and /api/v1.
#
# 🔗 Dependencies:
# - FastAPI framework, slowapi, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection, session)
# - All module routers and repository implementations
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - tests (httpx ASGITransport)

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import API_PREFIX, CURRENT_VERSION
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.middleware.rate_limiting import limiter, rate_limit_exceeded_handler
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.modules.categories.domain.repositories.category_repository import CategoryRepository
from app.modules.categories.infrastructure.database.category_repository_impl import CategoryRepositoryImpl
from app.modules.comments.domain.repositories.comment_repository import CommentRepository
from app.modules.comments.infrastructure.database.comment_repository_impl import CommentRepositoryImpl
from app.modules.events.domain.repositories.event_repository import EventRepository
from app.modules.events.infrastructure.database.event_repository_impl import EventRepositoryImpl
from app.modules.groups.domain.repositories.activity_log_repository import ActivityLogRepository
from app.modules.groups.domain.repositories.group_repository import GroupRepository
from app.modules.groups.domain.repositories.membership_repository import MembershipRepository
from app.modules.groups.infrastructure.database.activity_log_repository_impl import ActivityLogRepositoryImpl
from app.modules.groups.infrastructure.database.group_repository_impl import GroupRepositoryImpl
from app.modules.groups.infrastructure.database.membership_repository_impl import MembershipRepositoryImpl
from app.modules.search.domain.repositories.search_repository import SearchRepository
from app.modules.search.infrastructure.database.search_repository_impl import SearchRepositoryImpl
from app.modules.user_management.domain.repositories.user_repository import UserRepository
from app.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import ClubberaException
from app.shared.infrastructure.database.connection import close_database, init_database
from app.shared.infrastructure.database.session import session_manager
from app.shared.utils.logging import (
    SERVICE_NAME,
    get_logger,
    log_shutdown_event,
    log_startup_event,
    setup_logging,
)

# Get application settings
settings = get_settings()

logger = get_logger(__name__)

# Whenever a service asks for a repository interface, FastAPI builds the SQLAlchemy implementation
REPOSITORY_BINDINGS = {
    UserRepository: UserRepositoryImpl,
    GroupRepository: GroupRepositoryImpl,
    MembershipRepository: MembershipRepositoryImpl,
    ActivityLogRepository: ActivityLogRepositoryImpl,
    CommentRepository: CommentRepositoryImpl,
    EventRepository: EventRepositoryImpl,
    CategoryRepository: CategoryRepositoryImpl,
    SearchRepository: SearchRepositoryImpl,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup: logging, database engine, session factory. Shutdown: dispose the engine.
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    log_startup_event(SERVICE_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})

    try:
        await init_database(settings)
        session_manager.initialize()
        logger.info("✅ Clubbera API startup complete")
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}", exc_info=True)
        raise

    yield  # Application is running

    session_manager.reset()
    await close_database()
    log_shutdown_event(SERVICE_NAME)


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(ClubberaException)
    async def clubbera_exception_handler(request: Request, exc: ClubberaException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{exc.error_code}: {exc.message}", path=request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = [
            {"field": ".".join(str(p) for p in err["loc"] if p != "body"), "message": err["msg"]}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request", "code": "VALIDATION_ERROR", "details": {"errors": errors}},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail), "code": code},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
        return await rate_limit_exceeded_handler(request, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "code": "INTERNAL_SERVER_ERROR"},
        )


def create_application() -> FastAPI:
    """
    Application factory function.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)

    for interface, implementation in REPOSITORY_BINDINGS.items():
        app.dependency_overrides[interface] = implementation

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)
    app.include_router(api_v1_router)
    app.include_router(api_v1_router, prefix=f"{API_PREFIX}/{CURRENT_VERSION}", include_in_schema=False)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "message": f"Welcome to the {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "health_check": "/health",
            "api_base": f"{API_PREFIX}/{CURRENT_VERSION}",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """Run the development server (``python -m app.main`` or the ``clubbera-api`` script)."""
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
