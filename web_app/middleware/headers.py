"""CORS headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable

from shortlink.common.headers import cors_headers


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Answer every OPTIONS request and stamp CORS headers on all responses.

    Browsers from any origin may call the API, so the headers are fixed
    rather than negotiated per request origin.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        """Short-circuit preflight requests, otherwise decorate the response."""
        if request.method == "OPTIONS":
            headers = cors_headers()
            headers["Content-Type"] = "application/json"
            return Response(status_code=204, headers=headers)

        response = await call_next(request)

        for name, value in cors_headers().items():
            response.headers[name] = value

        return response
