"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from profile_card.domain.entities import ImageAsset
from profile_card.infrastructure.assets import load_mascot
from profile_card.infrastructure.config import get_settings
from profile_card.infrastructure.github_rest_adapter import GitHubRestAdapter
from profile_card.services.render_card import RenderProfileCardUseCase

_http_client: httpx.AsyncClient | None = None
_mascot: ImageAsset | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _mascot  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        follow_redirects=True,
    )
    _mascot = load_mascot(
        settings.mascot_image_path,
        settings.mascot_base64.get_secret_value() if settings.mascot_base64 else None,
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _mascot  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _mascot = None


def get_use_case() -> RenderProfileCardUseCase:
    """Build a per-request use case with injected adapter and options."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubRestAdapter(
        client=_http_client, token=token, api_url=settings.github_api_url
    )

    return RenderProfileCardUseCase(
        fetcher=github_adapter,
        username=settings.github_username,
        config=settings.render_config(),
        mascot=_mascot,
        excluded_repositories=settings.excluded_repository_names,
    )
