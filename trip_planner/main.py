"""
FastAPI Application Entry Point.

create_app() is the composition root: it builds the AppState and the
TripStore that owns it, and hangs both off app.state for the routes.
"""
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import Settings, settings as default_settings
from .models.state import AppState
from .services.confirmation import answer
from .services.id_generator import get_id_generator
from .services.trip_store import TripStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, state: Optional[AppState] = None) -> FastAPI:
    """Build the planner app around a fresh (or supplied) application state."""
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        description="Plan trips: add, edit and delete destinations with a date range",
        version="1.0.0"
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.trip_store = TripStore(
        state if state is not None else AppState(),
        id_generator=get_id_generator(settings.id_strategy),
        confirmer=answer(settings.confirm_deletes_by_default),
    )
    logger.info(f"Trip store ready (id strategy: {settings.id_strategy})")

    # Include API routes
    app.include_router(router)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "trips": len(app.state.trip_store.state.trips)
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "trip_planner.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug
    )
