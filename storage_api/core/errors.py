import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


log = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class ApplicationError(Exception):
    """Base class for application-specific errors."""
    status_code = 500


class DataAccessError(ApplicationError):
    """Raised when the persistence layer fails underneath a repository call."""
    def __init__(self, message="A database error occurred.", original_exception=None):
        super().__init__(message)
        self.original_exception = original_exception


def error_response(exc: Exception, status_code: int = 500, *, is_production: bool) -> JSONResponse:
    """
    Log the full error server-side and render the public error envelope.
    In production the message is replaced by a fixed generic string.
    """
    log.error("request failed: %s", exc, exc_info=exc)
    message = GENERIC_ERROR_MESSAGE if is_production else (str(exc) or GENERIC_ERROR_MESSAGE)
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    msg = first.get("msg", "Invalid request")
    return f"{loc}: {msg}" if loc else msg


def register_exception_handlers(app: FastAPI, *, is_production: bool) -> None:
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)

    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": _validation_message(exc)})

    async def _application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        return error_response(exc, exc.status_code, is_production=is_production)

    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        return error_response(exc, is_production=is_production)

    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(ApplicationError, _application_error)
    app.add_exception_handler(Exception, _unhandled_error)
