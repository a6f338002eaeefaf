"""Access logging for short-link requests."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request, tagged with the short code and owner it touched."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("short_link.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        # path_params is only filled in once the router has matched
        short_code = request.path_params.get("short_code")
        owner_id = request.query_params.get("userId")

        line = f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)"
        if short_code:
            line += f" code={short_code}"
        if owner_id is not None:
            line += f" owner={owner_id}"

        if response.status_code >= 500:
            self.logger.error(line)
        else:
            self.logger.info(line)

        return response
