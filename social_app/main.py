from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
import logging
from pathlib import Path

from social_app.core.config import settings
from social_app.db.init_db import create_all_tables
from social_app.middleware.request_logging import RequestLoggingMiddleware
from social_app.middleware.auth_logging import AuthLoggingMiddleware
from social_app.modules.auth.api.router import router as auth_router
from social_app.modules.user_management.api.router import router as user_router
from social_app.modules.posts.api.router import router as posts_router
from social_app.modules.posts.comments.api.router import (
    router as comments_router, comment_router
)
from social_app.modules.posts.likes.api.router import router as likes_router
from social_app.modules.search.api.router import router as search_router
from social_app.modules.trending.api.router import router as trending_router
from social_app.modules.media.router import router as media_router

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("social_app")

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or missing input is a 400"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error"},
    )

# Initialize the FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    exception_handlers={
        RequestValidationError: validation_exception_handler,
        Exception: unhandled_exception_handler,
    },
    debug=settings.DEBUG,
    description="Posts, likes, comments, profiles, search and trending tags",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")
    logger.info(f"BASE_URL: {settings.BASE_URL}")

    create_all_tables()

# Add middleware
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(AuthLoggingMiddleware, api_prefix=settings.API_PREFIX)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Uploaded media is served from here when no bucket is configured
Path(settings.UPLOAD_DIRECTORY, "post_media").mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIRECTORY), name="uploads")

# Register API routers
app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["authentication"])
app.include_router(user_router, prefix=settings.API_PREFIX, tags=["users"])
app.include_router(posts_router, prefix=f"{settings.API_PREFIX}/posts", tags=["posts"])
app.include_router(comments_router, prefix=f"{settings.API_PREFIX}/posts/{{post_id}}/comments", tags=["comments"])
app.include_router(comment_router, prefix=f"{settings.API_PREFIX}/comments", tags=["comments"])
app.include_router(likes_router, prefix=f"{settings.API_PREFIX}/posts/{{post_id}}/like", tags=["likes"])
app.include_router(search_router, prefix=f"{settings.API_PREFIX}/search", tags=["search"])
app.include_router(trending_router, prefix=f"{settings.API_PREFIX}/trending", tags=["trending"])
app.include_router(media_router, prefix=settings.API_PREFIX, tags=["media"])

@app.get("/health")
def health_check():
    return {"status": "ok"}

@app.get("/")
async def root():
    return {
        "message": "Welcome to Social App",
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "documentation": "/docs" if settings.DEBUG else None,
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("social_app.main:app", host="0.0.0.0", port=5000, reload=True)
