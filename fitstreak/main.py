"""Main entry point for FitStreak."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fitstreak.api.routes import router as api_router
from fitstreak.config import get_settings
from fitstreak.db.store import StorageError

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="FitStreak API",
        description="Workout, nutrition and hydration logging with streak tracking",
        version="1.0.0",
    )
    app.include_router(api_router)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error("Storage error on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})

    return app


api_app = create_app()


def run():
    """Entry point for running the API server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("Starting FitStreak...")
    storage = "Supabase" if settings.supabase_configured and settings.storage_backend != "local" else "local JSON"
    print(f"Storage: {storage}, calendar timezone: {settings.timezone}")
    print(f"API docs at http://localhost:{settings.api_port}/docs")

    uvicorn.run(api_app, host=settings.api_host, port=settings.api_port, log_level="warning")


if __name__ == "__main__":
    run()
