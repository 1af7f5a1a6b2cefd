from fastapi import Request
import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("social_app")

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        client = request.client.host if request.client else "-"

        if request.url.query:
            logger.info(f"Request: {method} {path}?{request.url.query} from {client}")
        else:
            logger.info(f"Request: {method} {path} from {client}")

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        logger.log(level, f"Response: {response.status_code} for {method} {path} in {elapsed_ms:.1f}ms")

        return response
