# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# The helpers that sit in front of every request: one keeps a log of requests and one
# stops people from trying to log in too many times.
# 🧪 Purpose (Technical Summary):
# Request logging middleware and the shared slowapi limiter.
# 🔄 Connected Modules / Calls From:
# app.main, auth endpoints

from .logging import REQUEST_ID_HEADER, RequestLoggingMiddleware, get_request_id
from .rate_limiting import AUTH_RATE_LIMIT, limiter, rate_limit_exceeded_handler

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "get_request_id",
    "AUTH_RATE_LIMIT",
    "limiter",
    "rate_limit_exceeded_handler",
]
