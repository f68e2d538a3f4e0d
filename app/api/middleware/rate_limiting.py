# 📄 File: app/api/middleware/rate_limiting.py
# 🧭 Purpose (Layman Explanation):
# Stops anyone from hammering the sign-up and log-in pages with too many attempts in a
# short time, like a doorman who only lets a few people through each minute.
# 🧪 Purpose (Technical Summary):
# Shared slowapi Limiter keyed on the client address, configured from settings, plus the
# 429 handler that renders the standard error body.
# 🔗 Dependencies:
# slowapi, FastAPI, app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.main (state and exception handler registration), auth/user endpoints (@limiter.limit)

from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.shared.config.settings import get_settings
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

_settings = get_settings()

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[_settings.DEFAULT_RATE_LIMIT],
    enabled=_settings.RATE_LIMIT_ENABLED,
)

# Limit applied to signup, login and password endpoints
AUTH_RATE_LIMIT = _settings.AUTH_RATE_LIMIT


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Render a slowapi breach with the standard error body."""
    logger.warning(
        f"Rate limit exceeded: {request.method} {request.url.path}",
        client=get_remote_address(request),
        limit=str(exc.detail),
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": f"Rate limit exceeded: {exc.detail}",
            "code": "RATE_LIMIT_EXCEEDED",
        },
    )
