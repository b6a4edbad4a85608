"""Exception handlers: domain and framework errors to JSON responses.

Every error body has the shape {"error": CODE, "message": str, "details"?}.
Register with register_exception_handlers(app).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pinboard.core.config import get_settings
from pinboard.domain.exceptions import PinboardException

logger = logging.getLogger(__name__)

# Search unavailability is a dependency problem, not a client error.
ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "SEARCH_FAILED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "SEARCH_BACKEND_ERROR": status.HTTP_503_SERVICE_UNAVAILABLE,
    "SQL_NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def _error_body(code: str, message: Any, details: Any = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": code, "message": message}
    if details:
        body["details"] = details
    return body


def _pinboard_exception_handler(request: Request, exc: PinboardException) -> JSONResponse:
    status_code = ERROR_CODE_STATUS.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    if status_code >= 500:
        logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors reduced to loc/msg/type ('input' may echo user text)."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
        for err in exc.errors()
    ]


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=_error_body(
            "VALIDATION_ERROR", "Request validation failed", jsonable_errors(exc)
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body("HTTP_ERROR", exc.detail),
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when DEBUG is on."""
    logger.exception("Unhandled exception on %s", request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("INTERNAL_ERROR", message),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PinboardException, _pinboard_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
