"""Error handling: exception handlers and the catch-all middleware."""

import logging

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from shortlink.errors import ShortLinkError, InvalidInputError, NotFoundError

logger = logging.getLogger("short_link.web")


def error_response(status_code: int, error: str, **extra) -> JSONResponse:
    """Build the JSON error body used by every failure."""
    return JSONResponse(status_code=status_code, content={"error": error, **extra})


def internal_error_response(exc: Exception) -> JSONResponse:
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        message=str(exc) or exc.__class__.__name__,
    )


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "URL not found")


async def short_link_error_handler(request: Request, exc: ShortLinkError) -> JSONResponse:
    logger.error(f"Service error on {request.method} {request.url.path}: {exc}")
    return internal_error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors (404, 405) in the same shape as service errors."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "Method not allowed"
    elif exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Not found"
    else:
        message = str(exc.detail)

    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Map service exceptions to HTTP responses."""
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ShortLinkError, short_link_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)


class ErrorHandlingMiddleware:
    """Turn any unhandled exception into a logged JSON 500.

    Plain ASGI rather than BaseHTTPMiddleware, which re-raises the app's
    exception after the replacement response has been sent.
    """

    def __init__(self, app: ASGIApp, logger: logging.Logger = None):
        self.app = app
        self.logger = logger or logging.getLogger("short_link.web")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            # Too late to replace a response that is already on the wire
            if response_started:
                raise
            self.logger.exception(f"Unhandled error on {scope['method']} {scope['path']}: {e}")
            response = internal_error_response(e)
            await response(scope, receive, send)
