"""Domain exception hierarchy.

Inner layers raise these; the interface error-handler turns every one of
them into a plain-text server error.
"""

from __future__ import annotations


class ProfileCardError(Exception):
    """Base exception for the entire application."""


# ── Upstream API errors ─────────────────────────────────────────────────────


class UpstreamFetchError(ProfileCardError):
    """A required GitHub call failed or returned a non-success status."""


class UserNotFoundError(UpstreamFetchError):
    """The configured GitHub account does not exist (404)."""


class UpstreamRateLimitError(UpstreamFetchError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class RepositoryLanguagesError(UpstreamFetchError):
    """The language breakdown of a single repository could not be fetched.

    Tolerated by the language fetcher: the repository contributes nothing.
    """


# ── Startup errors ──────────────────────────────────────────────────────────


class AssetLoadError(ProfileCardError):
    """A static image asset could not be read or decoded."""
