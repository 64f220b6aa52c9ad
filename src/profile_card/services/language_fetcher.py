"""Per-repository language fan-out.

One task per repository is launched and awaited together; the per-repository
maps are folded with :func:`merge_language_maps` only after every task has
settled.  A failing repository contributes nothing and never aborts the batch.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, Mapping, Sequence

from profile_card.domain.entities import LanguageFetchResult, Repository
from profile_card.domain.exceptions import UpstreamFetchError
from profile_card.domain.ports.profile_fetcher import ProfileFetcher

logger = logging.getLogger(__name__)


def merge_language_maps(maps: Iterable[Mapping[str, int]]) -> dict[str, int]:
    """Additively combine language byte maps.

    Keys keep the order in which they are first encountered.
    """
    merged: dict[str, int] = {}
    for language_map in maps:
        for language, count in language_map.items():
            merged[language] = merged.get(language, 0) + count
    return merged


async def fetch_language_maps(
    fetcher: ProfileFetcher,
    repositories: Sequence[Repository],
    excluded: frozenset[str] = frozenset(),
) -> LanguageFetchResult:
    """Fetch and merge language statistics for every non-excluded repository."""
    targets = [repo for repo in repositories if repo.name not in excluded]

    async def _fetch_one(repo: Repository) -> dict[str, int] | None:
        try:
            return await fetcher.fetch_languages(repo)
        except UpstreamFetchError as exc:
            logger.warning("Failed to fetch languages for repo %s: %s", repo.name, exc)
            return None

    # gather keeps argument order, so the fold below follows repository order
    results = await asyncio.gather(*(_fetch_one(repo) for repo in targets))

    failed = tuple(repo.name for repo, result in zip(targets, results) if result is None)
    return LanguageFetchResult(
        languages=merge_language_maps(r for r in results if r is not None),
        fetched=len(targets),
        failed=failed,
    )
