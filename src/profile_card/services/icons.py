"""Static lookup tables: Feather icon shapes and GitHub language colours."""

from __future__ import annotations

from profile_card.domain.primitives import IconShape

# ── Feather icons (https://feathericons.com/), 24×24 viewBox ────────────────

GITHUB_ICON: tuple[IconShape, ...] = (
    IconShape(
        "path",
        (
            (
                "d",
                "M9 19c-5 1.5-5-2.5-7-3m14 6v-3.87a3.37 3.37 0 0 0-.94-2.61"
                "c3.14-.35 6.44-1.54 6.44-7A5.44 5.44 0 0 0 20 4.77"
                "A5.07 5.07 0 0 0 19.91 1S18.73.65 16 2.48"
                "a13.38 13.38 0 0 0-7 0C6.27.65 5.09 1 5.09 1"
                "A5.07 5.07 0 0 0 5 4.77a5.44 5.44 0 0 0-1.5 3.78"
                "c0 5.42 3.3 6.61 6.44 7A3.37 3.37 0 0 0 9 18.13V22",
            ),
        ),
    ),
)

GLOBE_ICON: tuple[IconShape, ...] = (
    IconShape("circle", (("cx", "12"), ("cy", "12"), ("r", "10"))),
    IconShape("line", (("x1", "2"), ("y1", "12"), ("x2", "22"), ("y2", "12"))),
    IconShape(
        "path",
        (
            (
                "d",
                "M12 2a15.3 15.3 0 0 1 4 10 15.3 15.3 0 0 1-4 10"
                " 15.3 15.3 0 0 1-4-10 15.3 15.3 0 0 1 4-10z",
            ),
        ),
    ),
)

MAIL_ICON: tuple[IconShape, ...] = (
    IconShape(
        "path",
        (
            (
                "d",
                "M4 4h16c1.1 0 2 .9 2 2v12c0 1.1-.9 2-2 2H4"
                "c-1.1 0-2-.9-2-2V6c0-1.1.9-2 2-2z",
            ),
        ),
    ),
    IconShape("polyline", (("points", "22,6 12,13 2,6"),)),
)

ARROW_DOWN_ICON: tuple[IconShape, ...] = (
    IconShape("line", (("x1", "12"), ("y1", "5"), ("x2", "12"), ("y2", "19"))),
    IconShape("polyline", (("points", "19 12 12 19 5 12"),)),
)

# ── Language colours (subset of github/linguist) ────────────────────────────

DEFAULT_LANGUAGE_COLOR = "#ccc"

LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f1e05a",
    "TypeScript": "#2b7489",
    "Python": "#3572A5",
    "C#": "#178600",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Shell": "#89e051",
    "Go": "#00ADD8",
    "Rust": "#dea584",
    "Java": "#b07219",
    "Kotlin": "#A97BFF",
    "C": "#555555",
    "C++": "#f34b7d",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "Swift": "#F05138",
    "Dart": "#00B4AB",
    "Vue": "#41b883",
    "SCSS": "#c6538c",
    "Dockerfile": "#384d54",
}


def language_color(name: str) -> str:
    """Bar colour for *name*, neutral grey when unknown."""
    return LANGUAGE_COLORS.get(name, DEFAULT_LANGUAGE_COLOR)
