"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, infrastructure
and framework exceptions to the {success: false, message} envelope.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from guardian_gate.core.config import get_settings
from guardian_gate.domain.exceptions import GuardianGateException

logger = logging.getLogger(__name__)

# Map error_code to HTTP status; unknown codes fall back to 400
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "PASSWORD_MISMATCH": 400,
    "ALREADY_VERIFIED": 400,
    "INVALID_OR_EXPIRED_CODE": 400,
    "DUPLICATE_EMAIL": 400,
    "USER_NOT_FOUND": 404,
    "AUTHENTICATION_ERROR": 401,
    "INVALID_CREDENTIALS": 401,
    "EMAIL_NOT_VERIFIED": 401,
    "EMAIL_MISMATCH": 401,
    "STORE_UNAVAILABLE": 500,
    "NOTIFIER_FAILURE": 500,
}


def _guardian_gate_exception_handler(
    request: Request, exc: GuardianGateException
) -> JSONResponse:
    """Return JSON from GuardianGateException.to_dict() with the mapped status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error(
            "%s %s failed: error_code=%s details=%s",
            request.method,
            request.url.path,
            exc.error_code,
            exc.details,
            exc_info=exc.__cause__ or exc,
        )
    return JSONResponse(status_code=status, content=exc.to_dict())


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query")]
    msg = str(first.get("msg", "Invalid request"))
    return f"{'.'.join(loc)}: {msg}" if loc else msg


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with the first validation error as the message."""
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": _first_error_message(exc)},
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return the failure envelope for Starlette HTTP exceptions."""
    if exc.status_code == 404:
        message = "Route not found"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Server Error"
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: GuardianGateException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(GuardianGateException, _guardian_gate_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
