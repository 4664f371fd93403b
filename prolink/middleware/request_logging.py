from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and exposes the handling time as a header"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        label = f"{request.method} {request.url.path}"
        if request.url.query:
            label = f"{label}?{request.url.query}"

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        # Store failures surface as 502s from the feed and notification routes
        if response.status_code >= 500:
            logger.error(f"{label} -> {response.status_code} in {elapsed:.4f}s")
        else:
            logger.info(f"{label} -> {response.status_code} in {elapsed:.4f}s")

        return response
