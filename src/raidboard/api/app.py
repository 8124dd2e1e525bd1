"""FastAPI application factory.

API layer:
- Validates inputs, resolves candidates by identity
- Returns card payloads for UI
- Handlers are async so all card state lives on the event loop thread
- Forbidden: aggregation or formatting logic of its own
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from raidboard.board.registry import BoardRegistry
from raidboard.config import Settings, build_clipboard, load_settings


def get_registry(request: Request) -> BoardRegistry:
    """Dependency to get the application's board registry."""
    return request.app.state.registry


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to environment settings.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    registry = BoardRegistry(
        build_clipboard(settings),
        revert_delay=settings.copied_revert_seconds,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        # Cancel pending copied-state timers of every displayed card
        registry.clear()

    app = FastAPI(
        title="Raidboard API",
        description="Raid party selection and sharing",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry

    # Add CORS middleware for UI access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from raidboard.api.routes import raids

    app.include_router(raids.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
