# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a logging system that records what happens in the app in a structured way,
# so it is easy to follow a single request or a single club's membership history in the logs.

# 🧪 Purpose (Technical Summary):
# Implements structured logging with JSON formatting (python-json-logger), request/user context
# propagated through ContextVars, and helpers for audit-style user actions and business events.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: All application modules for consistent logging, the request logging middleware,
# the membership engine (business events), the email adapter (swallowed failures)

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'clubbera-api'

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


def _hostname() -> str:
    return os.uname().nodename if hasattr(os, 'uname') else 'unknown'


class ContextualFormatter(logging.Formatter):
    """
    Text formatter that adds request ID, user ID and service data
    to every log record for local development.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = _hostname()

    def format(self, record):
        record.request_id = request_id_var.get('')
        record.user_id = user_id_var.get('')
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()

        if getattr(record, 'extra_fields', None):
            for key, value in record.extra_fields.items():
                setattr(record, key, value)

        return super().format(record)


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Emits one JSON object per record with a consistent set of keys so
    log aggregation tools can index request and user context.
    """

    def __init__(self):
        super().__init__(
            '%(levelname)s %(name)s %(message)s',
            rename_fields={'levelname': 'level', 'name': 'logger'},
            json_ensure_ascii=False,
        )
        self.hostname = _hostname()

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno

        if request_id_var.get():
            log_record['request_id'] = request_id_var.get()
        if user_id_var.get():
            log_record['user_id'] = user_id_var.get()

        # extra_fields is flattened into an "extra" object
        extra_fields = log_record.pop('extra_fields', None)
        if extra_fields:
            log_record['extra'] = extra_fields


class StructuredLogger:
    """
    Logger wrapper with structured logging capabilities.

    Keyword arguments passed to the level methods become structured
    fields under ``extra_fields`` on the emitted record.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Dict = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Dict = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Dict = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})
        passthrough = ('exc_info', 'stack_info', 'stacklevel')

        for key, value in kwargs.items():
            if key not in passthrough:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items() if k in passthrough}
        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)

    def log_user_action(
        self,
        action: str,
        user_id: str,
        resource: str = None,
        result: str = 'success',
        extra: Dict = None
    ):
        """Log user action for audit trail."""
        extra_fields = {
            'event_type': 'user_action',
            'action': action,
            'user_id': str(user_id),
            'result': result,
            **(extra or {})
        }
        if resource:
            extra_fields['resource'] = resource

        self.info(
            f"User {user_id} performed {action}" +
            (f" on {resource}" if resource else ""),
            extra=extra_fields
        )

    def log_business_event(
        self,
        event_type: str,
        description: str,
        entity_id: str = None,
        entity_type: str = None,
        extra: Dict = None
    ):
        """Log business events (membership transitions, moderation, content)."""
        extra_fields = {
            'event_type': 'business_event',
            'business_event_type': event_type,
            **(extra or {})
        }
        if entity_id:
            extra_fields['entity_id'] = str(entity_id)
        if entity_type:
            extra_fields['entity_type'] = entity_type

        self.info(description, extra=extra_fields)


def setup_logging(
    log_level: str = 'INFO',
    log_format: str = 'json',
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Root log level name
        log_format: 'json' for production, 'text' for local development
        enable_console: Attach a stdout handler

    Returns:
        The startup logger
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter = JSONFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('aiosmtplib').setLevel(logging.WARNING)

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name not in _loggers_cache:
        _loggers_cache[name] = StructuredLogger(name)
    return _loggers_cache[name]


@contextmanager
def log_context(request_id: Optional[str] = None, user_id: Optional[str] = None):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        user_id: User identifier
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    user_token = user_id_var.set(user_id or '')

    try:
        yield {'request_id': request_id, 'user_id': user_id}
    finally:
        request_id_var.reset(request_token)
        user_id_var.reset(user_token)


def bind_user(user_id: str) -> None:
    """Attach the authenticated user to the current request's log context."""
    user_id_var.set(str(user_id))


def log_startup_event(service_name: str, version: str, extra: Dict = None):
    """Log application startup event."""
    get_logger('startup').info(
        f"🌱 Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )


def log_shutdown_event(service_name: str, extra: Dict = None):
    """Log application shutdown event."""
    get_logger('shutdown').info(
        f"Service {service_name} shutting down",
        extra={
            'event_type': 'service_shutdown',
            'service_name': service_name,
            **(extra or {})
        }
    )
