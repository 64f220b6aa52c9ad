"""Shared fixtures: an in-memory GitHub served through ``httpx.MockTransport``."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import httpx
import pytest

API = "https://api.github.com"
USERNAME = "octocat"
AVATAR_URL = "https://avatars.example.com/u/583231"
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
AVATAR_BYTES = b"\x89PNG\r\n\x1a\nfake-avatar"


def profile_json(**overrides: Any) -> dict[str, Any]:
    data = {
        "login": USERNAME,
        "name": "The Octocat",
        "bio": "Mascot of GitHub",
        "avatar_url": AVATAR_URL,
        "html_url": f"https://github.com/{USERNAME}",
        "followers": 12,
        "following": 3,
        "public_repos": 3,
        "public_gists": 8,
    }
    data.update(overrides)
    return data


def repo_json(
    name: str,
    stars: int = 0,
    forks: int = 0,
    fork: bool = False,
    description: str | None = None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "stargazers_count": stars,
        "forks_count": forks,
        "fork": fork,
        "html_url": f"https://github.com/{USERNAME}/{name}",
        "languages_url": f"{API}/repos/{USERNAME}/{name}/languages",
    }


def event_json(days_ago: float) -> dict[str, Any]:
    created = NOW - timedelta(days=days_ago)
    return {"id": str(days_ago), "created_at": created.strftime("%Y-%m-%dT%H:%M:%SZ")}


class FakeGitHub:
    """Routes requests by URL (query string ignored) to canned responses."""

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, status: int = 200, **kwargs: Any) -> None:
        self.routes[url] = (status, kwargs)

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url).split("?")[0])
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        status, kwargs = route
        return httpx.Response(status, **kwargs)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

    def requests_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).split("?")[0] == url]


@pytest.fixture
def github() -> FakeGitHub:
    """An account with three repositories; ``gamma``'s languages are broken."""
    fake = FakeGitHub()
    fake.add(f"{API}/users/{USERNAME}", json=profile_json())
    fake.add(
        f"{API}/users/{USERNAME}/repos",
        json=[
            repo_json("alpha", stars=5, forks=1, description="First & best"),
            repo_json("beta", stars=9, forks=0),
            repo_json("gamma", stars=2, forks=4),
        ],
    )
    fake.add(
        f"{API}/users/{USERNAME}/events",
        json=[event_json(1), event_json(100), event_json(364), event_json(366)],
    )
    fake.add(f"{API}/repos/{USERNAME}/alpha/languages", json={"JavaScript": 800})
    fake.add(
        f"{API}/repos/{USERNAME}/beta/languages",
        json={"JavaScript": 200, "TypeScript": 1000},
    )
    fake.add(f"{API}/repos/{USERNAME}/gamma/languages", status=500, json={})
    fake.add(AVATAR_URL, content=AVATAR_BYTES, headers={"content-type": "image/png"})
    return fake
