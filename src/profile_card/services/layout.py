"""Layout composer — places the card's metrics on a fixed 900×600 canvas.

Produces an ordered, immutable :class:`Canvas`.  No escaping happens here:
the SVG encoder escapes every text node and attribute it writes.
"""

from __future__ import annotations

from profile_card.domain.entities import CardData, ImageAsset, Profile
from profile_card.domain.primitives import (
    Canvas,
    GradientStop,
    Icon,
    IconShape,
    Image,
    LinearGradient,
    Primitive,
    Rect,
    StyleRule,
    Text,
)
from profile_card.domain.value_objects import ColorScheme, RenderConfig
from profile_card.services.icons import (
    ARROW_DOWN_ICON,
    GITHUB_ICON,
    GLOBE_ICON,
    MAIL_ICON,
    language_color,
)

# ── Geometry ────────────────────────────────────────────────────────────────

CANVAS_WIDTH = 900
CANVAS_HEIGHT = 600

LEFT_COLUMN_X = 60
RIGHT_COLUMN_X = 400
SECTION_TITLE_Y = 230

ICON_SIZE = 24
ICON_PADDING = 10
ICON_SPACING = 40
ICON_START_X = LEFT_COLUMN_X
ICON_Y = 140

LANGUAGE_FIRST_OFFSET = 15
LANGUAGE_ROW_PITCH = 45
LANGUAGE_BAR_Y = 250
LANGUAGE_LABEL_Y = 245
LANGUAGE_BAR_HEIGHT = 20
LANGUAGE_BAR_SCALE = 2

REPO_ROW_PITCH = 60
REPO_NAME_Y = 250
REPO_DESCRIPTION_Y = 270
REPO_STATS_Y = 290

MASCOT_X = 850
MASCOT_Y = 550
MASCOT_SIZE = 60

ARROW_Y = 550
ARROW_COLOR = "#ebdbb2"

FONT_FAMILY = "'Segoe UI', Ubuntu, Sans-Serif"
BACKGROUND_GRADIENT = LinearGradient(
    id="bgGradient",
    stops=(GradientStop("0%", "#1d2021"), GradientStop("100%", "#32302f")),
)


def compose_card(
    profile: Profile,
    data: CardData,
    config: RenderConfig,
    avatar: ImageAsset | None = None,
    mascot: ImageAsset | None = None,
) -> Canvas:
    """Lay out every card element in draw order."""
    primitives: list[Primitive] = [
        Rect(x=0, y=0, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
             fill=f"url(#{BACKGROUND_GRADIENT.id})"),
    ]
    primitives.extend(background_layers(config, avatar))

    bio = (profile.bio or "") if config.use_github_bio else config.bio
    primitives.append(Text(x=LEFT_COLUMN_X, y=80, content=profile.display_name, css_class="name"))
    primitives.append(Text(x=LEFT_COLUMN_X, y=110, content=bio, css_class="title"))

    github_link = config.links.github.strip() or profile.html_url
    primitives.extend(
        social_icons([
            (github_link, GITHUB_ICON),
            (config.links.website, GLOBE_ICON),
            (config.links.email_href, MAIL_ICON),
        ])
    )

    primitives.append(
        Text(
            x=LEFT_COLUMN_X,
            y=200,
            content=(
                f"Followers: {profile.followers} | Following: {profile.following} | "
                f"Repos: {profile.public_repos} | Gists: {profile.public_gists} | "
                f"Contributions (Last Year): {data.recent_activity}"
            ),
            css_class="stats",
        )
    )

    primitives.append(
        Text(x=LEFT_COLUMN_X, y=SECTION_TITLE_Y, content="Most Used Languages:",
             css_class="section-title")
    )
    primitives.extend(language_rows(data, config.colors))

    primitives.append(
        Text(x=RIGHT_COLUMN_X, y=SECTION_TITLE_Y, content="Top Repositories:",
             css_class="section-title")
    )
    primitives.extend(repository_rows(data, config.colors))

    if config.show_mascot and mascot is not None:
        primitives.append(
            Image(x=MASCOT_X, y=MASCOT_Y, width=MASCOT_SIZE, height=MASCOT_SIZE,
                  asset=mascot, opacity=_opacity(config.mascot_opacity))
        )

    primitives.append(
        Icon(x=(CANVAS_WIDTH - ICON_SIZE) / 2, y=ARROW_Y, size=ICON_SIZE,
             shapes=ARROW_DOWN_ICON, stroke=ARROW_COLOR)
    )

    return Canvas(
        width=CANVAS_WIDTH,
        height=CANVAS_HEIGHT,
        primitives=tuple(primitives),
        gradients=(BACKGROUND_GRADIENT,),
        styles=stylesheet(config.colors),
    )


def background_layers(config: RenderConfig, avatar: ImageAsset | None) -> list[Image]:
    """Optional full-canvas overlays: custom background, then the avatar."""
    layers: list[Image] = []
    if config.background_image_url:
        layers.append(
            Image(x=0, y=0, width=CANVAS_WIDTH, height=CANVAS_HEIGHT,
                  url=config.background_image_url,
                  opacity=config.background_image_opacity,
                  preserve_aspect_ratio="xMidYMid slice")
        )
    if config.show_avatar_background and avatar is not None:
        layers.append(
            Image(x=0, y=0, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, asset=avatar,
                  opacity=config.avatar_background_opacity,
                  preserve_aspect_ratio="xMidYMid slice")
        )
    return layers


def social_icons(candidates: list[tuple[str, tuple[IconShape, ...]]]) -> list[Icon]:
    """Place the icons whose link is non-blank, left to right."""
    links = [(href.strip(), shapes) for href, shapes in candidates if href and href.strip()]
    return [
        Icon(
            x=ICON_START_X + index * ICON_SPACING,
            y=ICON_Y,
            size=ICON_SIZE,
            shapes=shapes,
            hit_padding=ICON_PADDING,
            href=href,
        )
        for index, (href, shapes) in enumerate(links)
    ]


def language_rows(data: CardData, colors: ColorScheme) -> list[Primitive]:
    """One proportional bar plus a label per ranked language."""
    rows: list[Primitive] = []
    offset = LANGUAGE_FIRST_OFFSET
    for language in data.languages:
        rows.append(
            Rect(x=LEFT_COLUMN_X, y=LANGUAGE_BAR_Y + offset,
                 width=language.percentage * LANGUAGE_BAR_SCALE,
                 height=LANGUAGE_BAR_HEIGHT, fill=language_color(language.name),
                 rx=5, ry=5)
        )
        rows.append(
            Text(x=LEFT_COLUMN_X, y=LANGUAGE_LABEL_Y + offset, content=language.label,
                 font_size=14, fill=colors.language_text)
        )
        offset += LANGUAGE_ROW_PITCH
    return rows


def repository_rows(data: CardData, colors: ColorScheme) -> list[Text]:
    """Linked name, description and stats labels per ranked repository."""
    rows: list[Text] = []
    offset = 0
    for repo in data.repositories:
        rows.append(
            Text(x=RIGHT_COLUMN_X, y=REPO_NAME_Y + offset, content=repo.name,
                 font_size=16, fill=colors.repo_name, href=repo.html_url or None)
        )
        rows.append(
            Text(x=RIGHT_COLUMN_X, y=REPO_DESCRIPTION_Y + offset, content=repo.description,
                 font_size=14, fill=colors.repo_description)
        )
        rows.append(
            Text(x=RIGHT_COLUMN_X, y=REPO_STATS_Y + offset, content=repo.stats_label,
                 font_size=12, fill=colors.repo_stats)
        )
        offset += REPO_ROW_PITCH
    return rows


def stylesheet(colors: ColorScheme) -> tuple[StyleRule, ...]:
    return (
        StyleRule(".name", (("font", f"bold 30px {FONT_FAMILY}"), ("fill", colors.name))),
        StyleRule(".title", (("font", f"20px {FONT_FAMILY}"), ("fill", colors.title))),
        StyleRule(".stats", (("font", f"16px {FONT_FAMILY}"), ("fill", colors.stats))),
        StyleRule(
            ".section-title",
            (("font", f"bold 18px {FONT_FAMILY}"), ("fill", colors.section_title)),
        ),
        StyleRule("text", (("font-family", FONT_FAMILY),)),
        StyleRule("a", (("text-decoration", "none"),)),
        StyleRule("svg", (("overflow", "visible"),)),
    )


def _opacity(value: float) -> float | None:
    return None if value >= 1.0 else value
