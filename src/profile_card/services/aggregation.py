"""Aggregation engine — pure derivations over the fetched account data.

No I/O and no hidden state: every function here maps its inputs to a fresh
immutable result.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import ROUND_DOWN, Decimal
from typing import Iterable, Mapping, Sequence

from profile_card.domain.entities import (
    ActivityEvent,
    CardData,
    RankedLanguage,
    RankedRepository,
    Repository,
)

# ── Constants ───────────────────────────────────────────────────────────────

TOP_LANGUAGES = 5
TOP_REPOSITORIES = 4
ACTIVITY_WINDOW = timedelta(days=365)
DESCRIPTION_MAX_LENGTH = 60
ELLIPSIS = "..."

_TWO_PLACES = Decimal("0.01")


def _percentage(count: int, total: int) -> float:
    """``100 * count / total`` truncated to two decimals."""
    share = Decimal(100 * count) / Decimal(total)
    return float(share.quantize(_TWO_PLACES, rounding=ROUND_DOWN))


def rank_languages(
    language_map: Mapping[str, int], limit: int = TOP_LANGUAGES
) -> list[RankedLanguage]:
    """Return the top *limit* languages by byte share.

    Ties keep the map's insertion order (stable sort).  A map with no bytes
    at all yields an empty list.
    """
    total = sum(language_map.values())
    if total <= 0:
        return []

    entries = [
        RankedLanguage(name=name, percentage=_percentage(count, total))
        for name, count in language_map.items()
    ]
    entries.sort(key=lambda entry: entry.percentage, reverse=True)
    return entries[:limit]


def truncate_description(
    text: str | None, max_length: int = DESCRIPTION_MAX_LENGTH
) -> str:
    """Cut *text* to *max_length* characters, ending in an ellipsis if cut."""
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def rank_repositories(
    repositories: Sequence[Repository], limit: int = TOP_REPOSITORIES
) -> list[RankedRepository]:
    """Return the most-starred non-fork repositories."""
    originals = [repo for repo in repositories if not repo.is_fork]
    originals.sort(key=lambda repo: repo.stars, reverse=True)
    return [
        RankedRepository(
            name=repo.name,
            html_url=repo.html_url,
            description=truncate_description(repo.description),
            stars=repo.stars,
            forks=repo.forks,
        )
        for repo in originals[:limit]
    ]


def count_recent_activity(
    events: Iterable[ActivityEvent],
    now: datetime | None = None,
    window: timedelta = ACTIVITY_WINDOW,
) -> int:
    """Count events at or after ``now - window``."""
    now = now or datetime.now(timezone.utc)
    cutoff = now - window
    return sum(1 for event in events if event.created_at >= cutoff)


def build_card_data(
    language_map: Mapping[str, int],
    repositories: Sequence[Repository],
    events: Iterable[ActivityEvent],
    now: datetime | None = None,
) -> CardData:
    """Derive every metric shown on the card."""
    return CardData(
        languages=tuple(rank_languages(language_map)),
        repositories=tuple(rank_repositories(repositories)),
        recent_activity=count_recent_activity(events, now=now),
    )
