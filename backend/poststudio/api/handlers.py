"""
Exception handlers: every error leaves the API as {"error": message}.
"""
import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from ..errors import PostStudioError

logger = logging.getLogger(__name__)

_VALUE_ERROR_PREFIX = "Value error, "


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Turn pydantic errors into the single message the web client shows."""
    missing = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if error.get("type") != "missing":
            continue
        if loc == ("body",):
            return "Request body is required"
        missing.append(str(loc[-1]))
    if missing:
        return f"Missing required parameters: {', '.join(missing)}"

    if not errors:
        return "Invalid request"

    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Request body must be valid JSON"

    message = str(error.get("msg", "Invalid request"))
    if message.startswith(_VALUE_ERROR_PREFIX):
        return message[len(_VALUE_ERROR_PREFIX):]

    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    if loc:
        return f"Invalid {'.'.join(loc)}: {message}"
    return message


async def post_studio_error_handler(request: Request, exc: PostStudioError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.info(f"{request.method} {request.url.path} invalid request: {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PostStudioError, post_studio_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
