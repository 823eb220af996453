"""
Structured JSON logging with per-request correlation IDs and catalog audit events.
"""

import logging
import sys
import uuid
from typing import Optional
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger
from contextvars import ContextVar
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

AUDIT_LOGGER_NAME = "catalog.audit"

# Context variable for correlation ID (per request task)
correlation_id_var: ContextVar[Optional[str]] = ContextVar(
    "correlation_id", default=None
)


class CorrelationIdFilter(logging.Filter):
    """Add correlation ID to log records."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get() or "none"
        return True


class CatalogJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter with timestamp, level and source location fields."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = (
            datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
        )
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record.setdefault("correlation_id", getattr(record, "correlation_id", "none"))
        log_record["source"] = {
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
        }


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure JSON logging on the root and uvicorn loggers.

    Returns the catalog audit logger.
    """
    formatter = CatalogJsonFormatter("%(message)s")

    # Console handler with JSON formatting
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(CorrelationIdFilter())

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(console_handler)
        uvicorn_logger.propagate = False

    audit_logger = logging.getLogger(AUDIT_LOGGER_NAME)
    audit_logger.setLevel(logging.INFO)

    return audit_logger


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to add correlation IDs to requests."""

    async def dispatch(self, request: Request, call_next):
        # Generate or extract correlation ID
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

        token = correlation_id_var.set(correlation_id)
        request.state.correlation_id = correlation_id
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


def log_catalog_event(
    event_type: str,
    message: str,
    level: int = logging.INFO,
    entity: Optional[str] = None,
    entity_id: Optional[int] = None,
    ip_address: Optional[str] = None,
    **extra_fields,
):
    """
    Log a catalog mutation with structured data.

    Args:
        event_type: Type of event (e.g., "product.created")
        message: Human-readable message
        level: Logging level (default: INFO)
        entity: Entity name ("product" or "category")
        entity_id: Primary key of the affected row
        ip_address: Client IP address
        **extra_fields: Additional fields to include
    """
    logger = logging.getLogger(AUDIT_LOGGER_NAME)

    extra = {"event_type": event_type}
    if entity:
        extra["entity"] = entity
    if entity_id is not None:
        extra["entity_id"] = entity_id
    if ip_address:
        extra["ip_address"] = ip_address

    extra.update(extra_fields)

    logger.log(level, message, extra=extra)


def get_client_ip(request: Request) -> str:
    """Extract client IP address from request, considering proxies."""
    # Check X-Forwarded-For header (from proxy/load balancer)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # Take the first IP (original client)
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"
