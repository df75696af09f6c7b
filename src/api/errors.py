"""
API error handling - Maps domain exceptions onto HTTP responses.

Client faults (validation, expired or wrong code, duplicate identifier,
wrong credentials, failed delivery) return 400. Store failures return 500
with a generic body; the driver error is only logged. Every error body is
``{"detail": <str>}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.domain.exceptions import InvalidArgument, ServiceError, StoreError

logger = logging.getLogger(__name__)

MALFORMED_BODY_DETAIL = "malformed request body"


def status_for(exc: ServiceError) -> int:
    """HTTP status for a domain exception."""
    if isinstance(exc, StoreError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc.__cause__ or exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def _rejected_field(exc: RequestValidationError) -> str | None:
    """Name of the first body field that failed, if the error points at one."""
    for error in exc.errors():
        names = [part for part in error.get("loc", ()) if isinstance(part, str) and part != "body"]
        if names:
            return names[-1]
    return None


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Pydantic errors carry the submitted input (passwords included), so only
    # the field name is reported back.
    field = _rejected_field(exc)
    detail = str(InvalidArgument(field=field)) if field else MALFORMED_BODY_DETAIL
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": detail})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and request-validation handlers on an app."""
    app.add_exception_handler(ServiceError, service_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
