"""FastAPI application factory for the profile-card service.

Serves the SVG card at ``GET /`` and ``GET /api/github-readme`` plus a
``/health`` probe.  The lifespan opens the shared upstream HTTP client and
loads the mascot image once, before the first request.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from profile_card.interface.dependencies import shutdown, startup
from profile_card.interface.error_handlers import register_error_handlers
from profile_card.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Profile Card",
        version="1.0.0",
        description=(
            "Renders a GitHub account's profile, top languages and top "
            "repositories as an SVG card for embedding in a README."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    # ── Health check (simple liveness probe) ────────────────────────────

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
