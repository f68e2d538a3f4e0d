# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to Clubbera: what was asked for, how long it took
# and how it ended, with a tracking number so one request can be followed in the logs.
# 🧪 Purpose (Technical Summary):
# Request logging middleware. Assigns or propagates X-Request-ID, binds it into the
# logging ContextVars for the duration of the request and logs method, path, status
# and duration with sensitive query values redacted.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main (middleware registration)

import time
import uuid
from typing import Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SENSITIVE_PARAMS = {"password", "token", "code", "secret", "api_key"}

EXCLUDED_PATHS = {"/health", "/health/ready", "/favicon.ico"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line per request and tags the response with its request id.

    Requests slower than ``slow_request_threshold`` seconds are logged at warning level.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id

        with log_context(request_id=request_id):
            if request.url.path in EXCLUDED_PATHS:
                response = await call_next(request)
                response.headers[REQUEST_ID_HEADER] = request_id
                return response

            start = time.perf_counter()
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"HTTP Error: {request.method} {request.url.path} -> {type(e).__name__}",
                    method=request.method,
                    path=request.url.path,
                    duration_ms=_elapsed_ms(start),
                    exc_info=True,
                )
                raise

            duration_ms = _elapsed_ms(start)
            self._log_response(request, response.status_code, duration_ms)
            response.headers[REQUEST_ID_HEADER] = request_id
            return response

    def _log_response(self, request: Request, status_code: int, duration_ms: float) -> None:
        if status_code >= 500:
            log = logger.error
        elif status_code >= 400 or duration_ms > self.slow_request_threshold * 1000:
            log = logger.warning
        else:
            log = logger.info

        log(
            f"HTTP {request.method} {request.url.path} -> {status_code} ({duration_ms}ms)",
            method=request.method,
            path=request.url.path,
            status_code=status_code,
            duration_ms=duration_ms,
            query=_filter_params(dict(request.query_params)),
            client_ip=_client_ip(request),
        )


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _filter_params(params: Dict[str, str]) -> Dict[str, str]:
    return {k: ("[REDACTED]" if k.lower() in SENSITIVE_PARAMS else v) for k, v in params.items()}


def _client_ip(request: Request) -> Optional[str]:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else None


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
