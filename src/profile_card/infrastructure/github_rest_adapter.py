"""GitHub REST API adapter — implements the ProfileFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import httpx

from profile_card.domain.entities import ActivityEvent, ImageAsset, Profile, Repository
from profile_card.domain.exceptions import (
    RepositoryLanguagesError,
    UpstreamFetchError,
    UpstreamRateLimitError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "profile-card/1.0"
_PER_PAGE = "100"


class GitHubRestAdapter:
    """Concrete ProfileFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"token {token}"

    async def fetch_profile(self, username: str) -> Profile:
        """GET /users/{username} → Profile."""
        data = (await self._api_get(f"/users/{username}")).json()
        return Profile(
            login=data.get("login", username),
            name=data.get("name"),
            bio=data.get("bio"),
            avatar_url=data.get("avatar_url", ""),
            html_url=data.get("html_url", ""),
            followers=data.get("followers", 0),
            following=data.get("following", 0),
            public_repos=data.get("public_repos", 0),
            public_gists=data.get("public_gists", 0),
        )

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """GET /users/{username}/repos?per_page=100 → [Repository]."""
        resp = await self._api_get(
            f"/users/{username}/repos", params={"per_page": _PER_PAGE}
        )
        return [_to_repository(item) for item in resp.json()]

    async def fetch_events(self, username: str) -> list[ActivityEvent]:
        """GET /users/{username}/events?per_page=100 → [ActivityEvent]."""
        resp = await self._api_get(
            f"/users/{username}/events", params={"per_page": _PER_PAGE}
        )
        events: list[ActivityEvent] = []
        for item in resp.json():
            created_at = _parse_timestamp(item.get("created_at"))
            if created_at is None:
                logger.debug("Skipping event without a valid timestamp: %s", item.get("id"))
                continue
            events.append(ActivityEvent(created_at=created_at))
        return events

    async def fetch_avatar(self, url: str) -> ImageAsset:
        """Download the avatar image without credentials."""
        try:
            resp = await self._client.get(url, headers={"User-Agent": _USER_AGENT})
        except httpx.HTTPError as exc:
            raise UpstreamFetchError(f"Network error fetching avatar {url}: {exc}") from exc

        if resp.status_code != 200:
            raise UpstreamFetchError(
                f"Avatar download returned HTTP {resp.status_code} for {url}"
            )
        mime_type = resp.headers.get("content-type", "").split(";")[0].strip()
        return ImageAsset(data=resp.content, mime_type=mime_type or "image/png")

    async def fetch_languages(self, repository: Repository) -> dict[str, int]:
        """GET {languages_url} → {lang: bytes}."""
        try:
            resp = await self._api_get(repository.languages_url)
        except UpstreamFetchError as exc:
            raise RepositoryLanguagesError(
                f"Languages unavailable for {repository.name}: {exc}"
            ) from exc
        try:
            data = resp.json()
        except ValueError as exc:
            raise RepositoryLanguagesError(
                f"Malformed languages response for {repository.name}: {exc}"
            ) from exc
        if not isinstance(data, dict) or not all(
            isinstance(count, int) and not isinstance(count, bool) for count in data.values()
        ):
            raise RepositoryLanguagesError(
                f"Unexpected languages payload for {repository.name}: {type(data).__name__}"
            )
        return data

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = endpoint if endpoint.startswith("http") else f"{self._api_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise UpstreamFetchError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise UserNotFoundError(f"GitHub returned 404 for {url}")

        if resp.status_code == 403 and resp.headers.get("x-ratelimit-remaining") == "0":
            reset_raw = resp.headers.get("x-ratelimit-reset", "")
            try:
                reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                    "%Y-%m-%d %H:%M:%S UTC"
                )
            except (ValueError, OSError):
                reset_str = reset_raw or "unknown"
            raise UpstreamRateLimitError(
                f"GitHub API rate limit exceeded. Resets at {reset_str}."
            )

        if resp.status_code == 429:
            raise UpstreamRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise UpstreamFetchError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )


# ── Helpers ─────────────────────────────────────────────────────────────────


def _to_repository(item: dict[str, Any]) -> Repository:
    return Repository(
        name=item.get("name", ""),
        description=item.get("description"),
        stars=item.get("stargazers_count", 0),
        forks=item.get("forks_count", 0),
        is_fork=bool(item.get("fork", False)),
        html_url=item.get("html_url", ""),
        languages_url=item.get("languages_url", ""),
    )


def _parse_timestamp(raw: str | None) -> datetime | None:
    """Parse GitHub's ``2024-05-01T12:00:00Z`` into an aware datetime."""
    if not raw:
        return None
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
