"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Profile:
    """Snapshot of a GitHub account, fetched once per request."""

    login: str
    avatar_url: str
    html_url: str
    name: str | None = None
    bio: str | None = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    public_gists: int = 0

    @property
    def display_name(self) -> str:
        return self.name or self.login


@dataclass(frozen=True, slots=True)
class Repository:
    """One repository owned by the account."""

    name: str
    html_url: str
    languages_url: str
    description: str | None = None
    stars: int = 0
    forks: int = 0
    is_fork: bool = False


@dataclass(frozen=True, slots=True)
class ActivityEvent:
    """A public event; only its timestamp is used."""

    created_at: datetime


@dataclass(frozen=True, slots=True)
class ImageAsset:
    """An opaque binary image blob plus its MIME type."""

    data: bytes
    mime_type: str = "image/png"


@dataclass(frozen=True, slots=True)
class RankedLanguage:
    """A language and its share of all bytes, in percent (two decimals)."""

    name: str
    percentage: float

    @property
    def label(self) -> str:
        return f"{self.name} ({self.percentage:.2f}%)"


@dataclass(frozen=True, slots=True)
class RankedRepository:
    """A non-fork repository selected for display."""

    name: str
    html_url: str
    description: str
    stars: int
    forks: int

    @property
    def stats_label(self) -> str:
        return f"★ {self.stars} | Forks: {self.forks}"


@dataclass(frozen=True, slots=True)
class LanguageFetchResult:
    """Settled outcome of the per-repository language fan-out."""

    languages: dict[str, int]
    fetched: int
    failed: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class CardData:
    """Every derived metric the layout stage needs."""

    languages: tuple[RankedLanguage, ...]
    repositories: tuple[RankedRepository, ...]
    recent_activity: int


@dataclass(frozen=True, slots=True)
class RenderStats:
    """Per-request counters, logged once the card is rendered."""

    repositories: int
    language_fetch_failures: int
    ranked_languages: int
    recent_activity: int


@dataclass(frozen=True, slots=True)
class RenderedCard:
    """The final SVG document returned to the caller."""

    svg: str
    stats: RenderStats
