"""Port: profile fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from profile_card.domain.entities import ActivityEvent, ImageAsset, Profile, Repository


class ProfileFetcher(Protocol):
    """Abstract contract for reading an account's data from GitHub."""

    async def fetch_profile(self, username: str) -> Profile:
        """Return the account's profile snapshot."""
        ...

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """Return the repositories owned by the account."""
        ...

    async def fetch_events(self, username: str) -> list[ActivityEvent]:
        """Return the account's recent public events."""
        ...

    async def fetch_avatar(self, url: str) -> ImageAsset:
        """Download the avatar image (no credentials)."""
        ...

    async def fetch_languages(self, repository: Repository) -> dict[str, int]:
        """Return language → byte-count mapping for one repository."""
        ...
