"""Render-profile-card use case — the main orchestration pipeline.

This is the single entry point for the business logic.  It depends only on
the :class:`ProfileFetcher` port and the pure service modules; the interface
layer injects the concrete adapter and the resolved render options.

Each stage is a join barrier: the next one starts only after every fetch of
the previous stage has settled.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from profile_card.domain.entities import (
    ImageAsset,
    Profile,
    RenderedCard,
    RenderStats,
)
from profile_card.domain.ports.profile_fetcher import ProfileFetcher
from profile_card.domain.value_objects import RenderConfig
from profile_card.services.aggregation import build_card_data
from profile_card.services.language_fetcher import fetch_language_maps
from profile_card.services.layout import compose_card
from profile_card.services.svg_encoder import encode_svg

logger = logging.getLogger(__name__)


class RenderProfileCardUseCase:
    """Orchestrates the full account → SVG pipeline.

    Parameters
    ----------
    fetcher:
        Adapter that reads profile, repository and event data from GitHub.
    username:
        Account to render.
    config:
        Display options, resolved once for this request.
    mascot:
        Optional mascot image loaded at startup.
    excluded_repositories:
        Repository names left out of the language statistics.
    """

    def __init__(
        self,
        fetcher: ProfileFetcher,
        username: str,
        config: RenderConfig,
        mascot: ImageAsset | None = None,
        excluded_repositories: frozenset[str] = frozenset(),
    ) -> None:
        self._fetcher = fetcher
        self._username = username
        self._config = config
        self._mascot = mascot
        self._excluded = excluded_repositories

    async def execute(self, now: datetime | None = None) -> RenderedCard:
        """Run the full pipeline and return the SVG document."""
        logger.info("Rendering profile card for %s", self._username)

        # 1. Profile, repositories and events in parallel
        profile, repositories, events = await asyncio.gather(
            self._fetcher.fetch_profile(self._username),
            self._fetcher.fetch_repositories(self._username),
            self._fetcher.fetch_events(self._username),
        )

        # 2. Avatar and per-repository languages in parallel
        avatar, language_result = await asyncio.gather(
            self._fetch_avatar(profile),
            fetch_language_maps(self._fetcher, repositories, self._excluded),
        )
        if language_result.failed:
            logger.warning(
                "Languages missing for %d of %d repositories",
                len(language_result.failed),
                language_result.fetched,
            )

        # 3. Aggregate
        data = build_card_data(language_result.languages, repositories, events, now=now)

        # 4. Lay out and encode
        canvas = compose_card(profile, data, self._config, avatar=avatar, mascot=self._mascot)
        svg = encode_svg(canvas)

        stats = RenderStats(
            repositories=len(repositories),
            language_fetch_failures=len(language_result.failed),
            ranked_languages=len(data.languages),
            recent_activity=data.recent_activity,
        )
        logger.info(
            "Rendered card for %s: %d repos, %d languages, %d recent events, %d bytes",
            self._username,
            stats.repositories,
            stats.ranked_languages,
            stats.recent_activity,
            len(svg),
        )
        return RenderedCard(svg=svg, stats=stats)

    async def _fetch_avatar(self, profile: Profile) -> ImageAsset | None:
        """Download the avatar only when the overlay will show it."""
        if not self._config.show_avatar_background or not profile.avatar_url:
            return None
        return await self._fetcher.fetch_avatar(profile.avatar_url)
