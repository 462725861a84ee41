"""Translate short link errors into HTTP responses."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlinks.errors import (
    ShortLinkError,
    InvalidInputError,
    InvalidUrlFormatError,
    ShortcodeConflictError,
    ShortcodeNotFoundError,
    ShortcodeExpiredError,
)


STATUS_BY_ERROR = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    InvalidUrlFormatError: status.HTTP_400_BAD_REQUEST,
    ShortcodeConflictError: status.HTTP_409_CONFLICT,
    ShortcodeNotFoundError: status.HTTP_404_NOT_FOUND,
    ShortcodeExpiredError: status.HTTP_410_GONE,
}


def to_http_exception(error: ShortLinkError) -> HTTPException:
    """Map a short link error to an HTTPException with the matching status."""
    status_code = STATUS_BY_ERROR.get(type(error), status.HTTP_400_BAD_REQUEST)
    return HTTPException(status_code=status_code, detail=error.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies are caller input errors, reported like the core's InvalidInput
    messages = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{location}: {err.get('msg')}" if location else err.get("msg", "invalid"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "; ".join(messages) or "Invalid request"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
