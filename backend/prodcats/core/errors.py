"""
Domain error kinds and the HTTP boundary that translates them.

Services raise CatalogError tagged with an ErrorKind; the handlers registered
by register_error_handlers() are the only place kinds become status codes.
"""

import enum
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prodcats.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REFERENTIAL_INVALID = "referential_invalid"
    UNAUTHORIZED = "unauthorized"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.REFERENTIAL_INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

VALIDATION_MESSAGE = "One or more validation errors occurred."
UNAUTHORIZED_MESSAGE = "Unauthorized access."
INTERNAL_MESSAGE = "An error occurred while processing your request."


class CatalogError(Exception):
    """Domain-level failure, normalized by the error boundary."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        errors: Optional[Dict[str, List[str]]] = None,
        details: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = errors
        self.details = details

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    @classmethod
    def not_found(cls, entity: str, entity_id: int) -> "CatalogError":
        return cls(ErrorKind.NOT_FOUND, f"{entity} with id {entity_id} not found.")

    @classmethod
    def validation(cls, errors: Dict[str, List[str]]) -> "CatalogError":
        return cls(ErrorKind.VALIDATION, VALIDATION_MESSAGE, errors=errors)

    @classmethod
    def inactive_category(cls) -> "CatalogError":
        return cls(ErrorKind.REFERENTIAL_INVALID, "Category not found or inactive.")


def error_response(
    status_code: int,
    message: str,
    details: Optional[str] = None,
    errors: Optional[Dict[str, List[str]]] = None,
) -> JSONResponse:
    body = ErrorResponse(message=message, details=details, errors=errors)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(exclude_none=True)
    )


def validation_errors_to_map(raw_errors) -> Dict[str, List[str]]:
    """Group pydantic error entries by field name."""
    errors: Dict[str, List[str]] = {}
    for error in raw_errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = loc[-1] if loc else "request"
        message = error.get("msg", "Invalid value.")
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        errors.setdefault(field, []).append(message)
    return errors


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    if exc.kind == ErrorKind.UNAUTHORIZED:
        return error_response(exc.status_code, UNAUTHORIZED_MESSAGE)
    if exc.kind == ErrorKind.INTERNAL:
        logger.error(
            f"Internal error on {request.method} {request.url.path}: {exc.message}"
        )
        return error_response(
            exc.status_code, INTERNAL_MESSAGE, details=exc.details or exc.message
        )
    return error_response(
        exc.status_code, exc.message, details=exc.details, errors=exc.errors
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = validation_errors_to_map(exc.errors())
    logger.info(
        f"Rejected {request.method} {request.url.path}: invalid fields {sorted(errors)}"
    )
    return error_response(
        STATUS_BY_KIND[ErrorKind.VALIDATION], VALIDATION_MESSAGE, errors=errors
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return error_response(
        STATUS_BY_KIND[ErrorKind.INTERNAL], INTERNAL_MESSAGE, details=str(exc)
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
