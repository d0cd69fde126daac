# rosterapp/middleware/request_log.py
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from rosterapp.core.logging_config import get_logger

logger = get_logger(__name__)

class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "[REQ] %s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
