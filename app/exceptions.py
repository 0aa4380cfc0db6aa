# =============================================================================
# app/exceptions.py - Custom Exceptions and Error Page Handlers
# =============================================================================
# Centralized exception handling for the web app.
# Every error raised by a route, a service or the router itself ends up in
# one of the handlers below and is rendered through templates/error.html.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.templating import render

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "Oh no, Something went wrong!"
PAGE_NOT_FOUND_MESSAGE = "Page Not Found!"


class CheckInnException(Exception):
    """
    Base exception for the CheckInn app.

    All custom exceptions inherit from this class and carry the HTTP
    status code the error page is rendered with.
    """

    def __init__(
        self,
        message: str,
        code: str = "CHECKINN_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a template context dict."""
        result = {
            "message": self.message or DEFAULT_ERROR_MESSAGE,
            "code": self.code,
            "status_code": self.status_code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class PayloadValidationError(CheckInnException):
    """Raised when a submitted form fails its schema."""

    def __init__(self, messages: list[str]):
        super().__init__(
            message=",".join(messages),
            code="VALIDATION_ERROR",
            status_code=400,
            details={"errors": messages},
        )
        self.messages = messages


# =============================================================================
# Not Found Exceptions
# =============================================================================

class HotelNotFoundError(CheckInnException):
    """Raised when a hotel ID doesn't exist or is malformed."""

    def __init__(self, hotel_id: str):
        super().__init__(
            message=f"Hotel not found: {hotel_id}",
            code="HOTEL_NOT_FOUND",
            status_code=404,
            details={"hotel_id": hotel_id},
        )


class ReviewNotFoundError(CheckInnException):
    """Raised when a review ID doesn't exist or is malformed."""

    def __init__(self, review_id: str):
        super().__init__(
            message=f"Review not found: {review_id}",
            code="REVIEW_NOT_FOUND",
            status_code=404,
            details={"review_id": review_id},
        )


class PageNotFoundError(CheckInnException):
    """Raised for any path that no route matches."""

    def __init__(self, path: str):
        super().__init__(
            message=PAGE_NOT_FOUND_MESSAGE,
            code="PAGE_NOT_FOUND",
            status_code=404,
            details={"path": path},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

def render_error(request: Request, exc: CheckInnException) -> HTMLResponse:
    """Render the single error view for any translated exception."""
    return render(
        request,
        "error.html",
        {"err": exc.to_dict()},
        status_code=exc.status_code or 500,
    )


async def checkinn_exception_handler(
    request: Request,
    exc: CheckInnException
) -> HTMLResponse:
    """
    Convert CheckInnException to the error page.

    Client errors are logged at warning, server errors with a traceback.
    """
    if exc.status_code >= 500:
        logger.error(f"Server error on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    return render_error(request, exc)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> HTMLResponse:
    """
    Handle errors raised by the router itself.

    A path no route matches, or a method no route on that path accepts,
    becomes PageNotFoundError; any other HTTP error keeps its status code.
    """
    if exc.status_code in (404, 405):
        return await checkinn_exception_handler(request, PageNotFoundError(request.url.path))

    message = exc.detail if isinstance(exc.detail, str) else ""
    return await checkinn_exception_handler(
        request,
        CheckInnException(message=message, code="HTTP_ERROR", status_code=exc.status_code),
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> HTMLResponse:
    """Handle malformed requests that FastAPI rejects before a route runs."""
    messages = [
        f'"{".".join(str(part) for part in error["loc"])}" {error["msg"]}'
        for error in exc.errors()
    ]
    return await checkinn_exception_handler(request, PayloadValidationError(messages))


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> HTMLResponse:
    """
    Handle anything else with a generic 500 page.

    Starlette re-raises the error after this response is sent and the
    server logs the traceback, so only a one-line record is written here.
    """
    logger.error(f"Unexpected error on {request.method} {request.url.path}: {exc!r}")
    return render_error(
        request,
        CheckInnException(message=DEFAULT_ERROR_MESSAGE, code="INTERNAL_ERROR", status_code=500),
    )
