"""Application configuration — loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from profile_card.domain.value_objects import ColorScheme, RenderConfig, SocialLinks


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Upstream ────────────────────────────────────────────────────────
    github_username: str = "octocat"
    github_token: SecretStr | None = None
    github_api_url: str = "https://api.github.com"
    request_timeout_seconds: float = 30.0
    excluded_repositories: str = ""

    # ── Server ──────────────────────────────────────────────────────────
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cache_control: str = "public, max-age=3600"

    # ── Colours ─────────────────────────────────────────────────────────
    name_fill_color: str = "#4B8B9B"
    title_fill_color: str = "#AB83CD"
    stats_fill_color: str = "#B0C4DE"
    section_title_fill_color: str = "#6A5ACD"
    language_text_color: str = "#B0C4DE"
    repo_name_color: str = "#b8bb26"
    repo_desc_color: str = "#ebdbb2"
    repo_stats_color: str = "#d3869b"

    # ── Links & text ────────────────────────────────────────────────────
    github_link: str = ""
    website_link: str = ""
    email_link: str = ""
    use_github_bio: bool = False
    bio: str = ""

    # ── Decorations ─────────────────────────────────────────────────────
    show_avatar_background: bool = True
    avatar_background_opacity: float = Field(default=0.05, ge=0.0, le=1.0)
    background_image_url: str = ""
    background_image_opacity: float = Field(default=0.3, ge=0.0, le=1.0)
    show_mascot_image: bool = True
    mascot_opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    mascot_image_path: Path | None = None
    mascot_base64: SecretStr | None = None

    @property
    def excluded_repository_names(self) -> frozenset[str]:
        """Comma-separated ``EXCLUDED_REPOSITORIES`` as a set of names."""
        return frozenset(
            name.strip() for name in self.excluded_repositories.split(",") if name.strip()
        )

    def render_config(self) -> RenderConfig:
        """Resolve the immutable display options for one request."""
        return RenderConfig(
            colors=ColorScheme(
                name=self.name_fill_color,
                title=self.title_fill_color,
                stats=self.stats_fill_color,
                section_title=self.section_title_fill_color,
                language_text=self.language_text_color,
                repo_name=self.repo_name_color,
                repo_description=self.repo_desc_color,
                repo_stats=self.repo_stats_color,
            ),
            links=SocialLinks(
                github=self.github_link,
                website=self.website_link,
                email=self.email_link,
            ),
            bio=self.bio,
            use_github_bio=self.use_github_bio,
            show_avatar_background=self.show_avatar_background,
            avatar_background_opacity=self.avatar_background_opacity,
            background_image_url=self.background_image_url.strip(),
            background_image_opacity=self.background_image_opacity,
            show_mascot=self.show_mascot_image,
            mascot_opacity=self.mascot_opacity,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
