"""Value objects — immutable render options resolved once per request."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class ColorScheme:
    """Fill colours for each text role on the card."""

    name: str = "#4B8B9B"
    title: str = "#AB83CD"
    stats: str = "#B0C4DE"
    section_title: str = "#6A5ACD"
    language_text: str = "#B0C4DE"
    repo_name: str = "#b8bb26"
    repo_description: str = "#ebdbb2"
    repo_stats: str = "#d3869b"


@dataclass(frozen=True, slots=True)
class SocialLinks:
    """Icon link targets.  Empty strings mean "no icon"."""

    github: str = ""
    website: str = ""
    email: str = ""

    @property
    def email_href(self) -> str:
        """Email link with a ``mailto:`` scheme, or empty."""
        address = self.email.strip()
        if not address or address.lower().startswith("mailto:"):
            return address
        return f"mailto:{address}"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Display options consumed by the layout composer.

    Built from :class:`~profile_card.infrastructure.config.Settings` at the
    start of each request and never mutated afterwards.
    """

    colors: ColorScheme = field(default_factory=ColorScheme)
    links: SocialLinks = field(default_factory=SocialLinks)
    bio: str = ""
    use_github_bio: bool = False
    show_avatar_background: bool = True
    avatar_background_opacity: float = 0.05
    background_image_url: str = ""
    background_image_opacity: float = 0.3
    show_mascot: bool = True
    mascot_opacity: float = 1.0
