"""Global exception handlers — translate failures to HTTP responses.

Every failure becomes a plain-text ``500``; details stay in the logs and are
never sent to the client.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from profile_card.domain.exceptions import ProfileCardError

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Error generating SVG"


def _error_text() -> PlainTextResponse:
    return PlainTextResponse(ERROR_MESSAGE, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    @app.exception_handler(ProfileCardError)
    async def domain_handler(request: Request, exc: ProfileCardError) -> PlainTextResponse:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return _error_text()

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled exception")
        return _error_text()
