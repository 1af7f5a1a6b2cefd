from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("social_app")

# Paths reachable without a token, relative to the API prefix
PUBLIC_PATHS = ("/register", "/login")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, api_prefix: str = ""):
        super().__init__(app)
        self.api_prefix = api_prefix

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        has_auth = bool(request.headers.get("x-auth-token") or request.headers.get("Authorization"))

        if not has_auth and path.startswith(self.api_prefix) and not path.endswith(PUBLIC_PATHS):
            logger.warning(f"Protected endpoint {path} accessed without auth header")

        response = await call_next(request)

        if response.status_code in [401, 403]:
            logger.warning(f"Auth error: {response.status_code} on {path}")

        return response
