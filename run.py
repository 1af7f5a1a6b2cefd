import argparse
import logging
import uvicorn
from social_app.core.config import settings

logger = logging.getLogger("social_app")

def main():
    parser = argparse.ArgumentParser(description="Run the Social App API server")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to run the server on (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port to run the server on (default: 5000)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on code changes (default: based on DEBUG setting)"
    )
    parser.add_argument(
        "--migrate",
        action="store_true",
        help="Apply Alembic migrations before starting"
    )

    args = parser.parse_args()

    use_reload = args.reload or settings.DEBUG

    if args.migrate:
        from social_app.db.init_db import init_db
        init_db()

    if settings.DEBUG:
        logger.info(f"Starting Social App API in {settings.ENVIRONMENT} mode")
        logger.info(f"Auto-reload: {'enabled' if use_reload else 'disabled'}")
        logger.info(f"API documentation at http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "social_app.main:app",
        host=args.host,
        port=args.port,
        reload=use_reload
    )

if __name__ == "__main__":
    main()
