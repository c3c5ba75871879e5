from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.academics.errors import AcademicsError, RouteNotFoundError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Something went wrong"


def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Render any exception as ``{"error": <message>}``.

    The status comes from ``status_code`` (engine errors, HTTP exceptions) or
    ``status`` on the exception; anything else is an unexpected 500.
    """
    status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None) or 500
    if isinstance(exc, AcademicsError):
        message = exc.message
    elif isinstance(exc, StarletteHTTPException):
        message = str(exc.detail)
    else:
        message = str(exc)

    if status_code >= 500:
        logger.error("Unhandled error on %s: %s", _path(request), exc, exc_info=exc)
        message = DEFAULT_MESSAGE
    else:
        logger.info("Rejected %s with %s: %s", _path(request), status_code, message)
    return JSONResponse({"error": message or DEFAULT_MESSAGE}, status_code=status_code)


def _path(request: Request) -> str:
    try:
        return request.url.path
    except AttributeError:
        return "<unknown>"


async def _academics_error(request: Request, exc: AcademicsError) -> JSONResponse:
    return error_handler(request, exc)


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # A known path with the wrong method is still an unmatched route.
    if exc.status_code in (404, 405):
        return error_handler(request, RouteNotFoundError())
    return error_handler(request, exc)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_handler(request, ValidationError("Invalid request body"))


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    return error_handler(request, exc)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AcademicsError, _academics_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(Exception, _unexpected_error)
