from __future__ import annotations

from profile_card.domain.entities import (
    CardData,
    ImageAsset,
    Profile,
    RankedLanguage,
    RankedRepository,
)
from profile_card.domain.primitives import Icon, Image, Rect, Text
from profile_card.domain.value_objects import ColorScheme, RenderConfig, SocialLinks
from profile_card.services.icons import GLOBE_ICON, MAIL_ICON
from profile_card.services.layout import compose_card, social_icons

AVATAR = ImageAsset(data=b"avatar", mime_type="image/jpeg")
MASCOT = ImageAsset(data=b"mascot")

PROFILE = Profile(
    login="octocat",
    name="The Octocat",
    bio="Mascot of GitHub",
    avatar_url="https://avatars.example.com/u/1",
    html_url="https://github.com/octocat",
    followers=12,
    following=3,
    public_repos=3,
    public_gists=8,
)

DATA = CardData(
    languages=(RankedLanguage("JavaScript", 50.0), RankedLanguage("Elixir", 33.33)),
    repositories=(
        RankedRepository("beta", "https://github.com/octocat/beta", "", 9, 0),
        RankedRepository("alpha", "https://github.com/octocat/alpha", "First & best", 5, 1),
    ),
    recent_activity=3,
)


def _texts(primitives) -> list[Text]:
    return [p for p in primitives if isinstance(p, Text)]


def _linked_icons(primitives) -> list[Icon]:
    return [p for p in primitives if isinstance(p, Icon) and p.href]


def test_canvas_has_fixed_size_and_background_first() -> None:
    canvas = compose_card(PROFILE, DATA, RenderConfig())

    assert (canvas.width, canvas.height) == (900, 600)
    assert canvas.primitives[0] == Rect(x=0, y=0, width=900, height=600, fill="url(#bgGradient)")
    assert canvas.gradients[0].id == "bgGradient"


def test_single_contact_link_yields_one_icon_at_origin() -> None:
    profile = Profile(login="octocat", avatar_url="", html_url="")
    config = RenderConfig(links=SocialLinks(github="", website="", email="me@example.com"))

    icons = _linked_icons(compose_card(profile, DATA, config).primitives)

    assert len(icons) == 1
    assert (icons[0].x, icons[0].y) == (60, 140)
    assert icons[0].href == "mailto:me@example.com"
    assert icons[0].shapes == MAIL_ICON


def test_icons_are_spaced_left_to_right() -> None:
    config = RenderConfig(
        links=SocialLinks(website="https://example.com", email="mailto:me@example.com")
    )

    icons = _linked_icons(compose_card(PROFILE, DATA, config).primitives)

    assert [i.href for i in icons] == [
        "https://github.com/octocat",
        "https://example.com",
        "mailto:me@example.com",
    ]
    assert [i.x for i in icons] == [60, 100, 140]
    assert all(i.hit_padding == 10 and i.size == 24 for i in icons)


def test_blank_links_are_dropped() -> None:
    icons = social_icons([("   ", GLOBE_ICON), ("", MAIL_ICON), (" https://x.dev ", GLOBE_ICON)])

    assert len(icons) == 1
    assert icons[0].href == "https://x.dev"
    assert icons[0].x == 60


def test_configured_github_link_overrides_profile() -> None:
    config = RenderConfig(links=SocialLinks(github="https://github.com/elsewhere"))

    icons = _linked_icons(compose_card(PROFILE, DATA, config).primitives)

    assert [i.href for i in icons] == ["https://github.com/elsewhere"]


def test_language_bars_scale_with_percentage() -> None:
    config = RenderConfig(colors=ColorScheme(language_text="#123456"))
    canvas = compose_card(PROFILE, DATA, config)

    bars = [p for p in canvas.primitives if isinstance(p, Rect) and p.height == 20]
    labels = [t for t in _texts(canvas.primitives) if t.content.endswith("%)")]

    assert [(b.x, b.y, b.width) for b in bars] == [(60, 265, 100.0), (60, 310, 66.66)]
    assert bars[0].fill == "#f1e05a"
    assert bars[1].fill == "#ccc"
    assert [(t.y, t.content) for t in labels] == [
        (260, "JavaScript (50.00%)"),
        (305, "Elixir (33.33%)"),
    ]
    assert all(t.fill == "#123456" for t in labels)


def test_repository_rows() -> None:
    canvas = compose_card(PROFILE, DATA, RenderConfig())
    rows = [t for t in _texts(canvas.primitives) if t.x == 400 and t.css_class is None]

    assert [(t.y, t.content) for t in rows] == [
        (250, "beta"),
        (270, ""),
        (290, "★ 9 | Forks: 0"),
        (310, "alpha"),
        (330, "First & best"),
        (350, "★ 5 | Forks: 1"),
    ]
    assert rows[0].href == "https://github.com/octocat/beta"
    assert rows[1].href is None


def test_stats_line() -> None:
    texts = _texts(compose_card(PROFILE, DATA, RenderConfig()).primitives)

    stats = next(t for t in texts if t.css_class == "stats")
    assert stats.content == (
        "Followers: 12 | Following: 3 | Repos: 3 | Gists: 8 | "
        "Contributions (Last Year): 3"
    )


def test_bio_source_follows_toggle() -> None:
    def bio(config: RenderConfig) -> str:
        texts = _texts(compose_card(PROFILE, DATA, config).primitives)
        return next(t for t in texts if t.css_class == "title").content

    assert bio(RenderConfig(bio="Custom bio")) == "Custom bio"
    assert bio(RenderConfig(bio="Custom bio", use_github_bio=True)) == "Mascot of GitHub"
    assert bio(RenderConfig()) == ""


def test_name_falls_back_to_login() -> None:
    profile = Profile(login="octocat", avatar_url="", html_url="")

    texts = _texts(compose_card(profile, DATA, RenderConfig()).primitives)

    assert next(t for t in texts if t.css_class == "name").content == "octocat"


def test_decorations_follow_toggles() -> None:
    config = RenderConfig(
        background_image_url="https://example.com/bg.png",
        avatar_background_opacity=0.2,
        mascot_opacity=0.5,
    )
    images = [
        p for p in compose_card(PROFILE, DATA, config, avatar=AVATAR, mascot=MASCOT).primitives
        if isinstance(p, Image)
    ]

    assert [(i.url, i.asset, i.opacity) for i in images] == [
        ("https://example.com/bg.png", None, 0.3),
        ("", AVATAR, 0.2),
        ("", MASCOT, 0.5),
    ]
    assert (images[2].x, images[2].y, images[2].width) == (850, 550, 60)


def test_decorations_can_be_disabled() -> None:
    config = RenderConfig(show_avatar_background=False, show_mascot=False)

    canvas = compose_card(PROFILE, DATA, config, avatar=AVATAR, mascot=MASCOT)

    assert not [p for p in canvas.primitives if isinstance(p, Image)]


def test_missing_assets_are_skipped() -> None:
    canvas = compose_card(PROFILE, DATA, RenderConfig())

    assert not [p for p in canvas.primitives if isinstance(p, Image)]


def test_empty_language_section_still_has_title() -> None:
    data = CardData(languages=(), repositories=(), recent_activity=0)

    texts = _texts(compose_card(PROFILE, data, RenderConfig()).primitives)

    assert "Most Used Languages:" in [t.content for t in texts]
    assert not [t for t in texts if t.content.endswith("%)")]


def test_arrow_is_centred_and_drawn_last() -> None:
    last = compose_card(PROFILE, DATA, RenderConfig()).primitives[-1]

    assert isinstance(last, Icon)
    assert (last.x, last.y, last.href) == (438, 550, None)


def test_stylesheet_uses_configured_colours() -> None:
    config = RenderConfig(colors=ColorScheme(name="#111111", section_title="#222222"))

    rules = {r.selector: dict(r.declarations) for r in compose_card(PROFILE, DATA, config).styles}

    assert rules[".name"]["fill"] == "#111111"
    assert rules[".section-title"]["fill"] == "#222222"
