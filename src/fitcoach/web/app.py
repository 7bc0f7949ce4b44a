"""FastAPI application for the fitcoach JSON API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import AccountDisabled, InvalidInput, NotFound, Unauthorized
from ..db.engine import get_db_path, init_db, seed_exercises
from .routers import accounts, exercises, goals, progress, workouts

logger = logging.getLogger(__name__)


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    db_path = db_path or get_db_path()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler - runs on startup and shutdown."""
        # Startup: make sure the schema and the exercise library exist
        await init_db(db_path)
        await seed_exercises(db_path)
        yield

    app = FastAPI(
        title="fitcoach",
        description="Coach-managed fitness tracking API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store the database path in app state for use in dependencies
    app.state.db_path = db_path

    app.include_router(accounts.router)
    app.include_router(goals.router)
    app.include_router(workouts.router)
    app.include_router(exercises.router)
    app.include_router(progress.router)

    @app.exception_handler(Unauthorized)
    async def unauthorized_handler(request: Request, exc: Unauthorized):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"error": "unauthorized", "detail": str(exc)},
        )

    @app.exception_handler(AccountDisabled)
    async def account_disabled_handler(request: Request, exc: AccountDisabled):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={
                "error": "account_disabled",
                "detail": str(exc),
                "permanent": exc.is_permanent,
                "reactivation_date": (
                    exc.reactivation_date.isoformat() if exc.reactivation_date else None
                ),
            },
        )

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        return JSONResponse(
            status_code=422,
            content={"error": "invalid_input", "detail": str(exc)},
        )

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "not_found", "detail": str(exc)},
        )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
