"""Visual primitives — positioned drawables produced by the layout stage.

Coordinates and sizes are in canvas units.  A :class:`Canvas` keeps its
primitives in draw order: later entries are painted on top.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from profile_card.domain.entities import ImageAsset


@dataclass(frozen=True, slots=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    rx: float = 0
    ry: float = 0
    opacity: float | None = None
    href: str | None = None


@dataclass(frozen=True, slots=True)
class Text:
    """A single-line text label.

    Either ``css_class`` or explicit ``font_size`` / ``fill`` styles it.
    """

    x: float
    y: float
    content: str
    css_class: str | None = None
    font_size: int | None = None
    fill: str | None = None
    text_anchor: str | None = None
    href: str | None = None


@dataclass(frozen=True, slots=True)
class Image:
    """An image drawn from an embedded asset or an external URL."""

    x: float
    y: float
    width: float
    height: float
    asset: ImageAsset | None = None
    url: str = ""
    opacity: float | None = None
    preserve_aspect_ratio: str | None = None
    href: str | None = None


@dataclass(frozen=True, slots=True)
class IconShape:
    """One stroked shape inside a 24×24 icon viewBox (path, line, ...)."""

    tag: str
    attributes: tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class Icon:
    """A vector icon, optionally wrapped in a padded clickable area."""

    x: float
    y: float
    size: int
    shapes: tuple[IconShape, ...]
    stroke: str = "#ffffff"
    hit_padding: int = 0
    href: str | None = None


Primitive = Union[Rect, Text, Image, Icon]


@dataclass(frozen=True, slots=True)
class GradientStop:
    offset: str
    color: str
    opacity: float = 1.0


@dataclass(frozen=True, slots=True)
class LinearGradient:
    id: str
    stops: tuple[GradientStop, ...]
    x1: str = "0%"
    y1: str = "0%"
    x2: str = "100%"
    y2: str = "100%"


@dataclass(frozen=True, slots=True)
class StyleRule:
    selector: str
    declarations: tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class Canvas:
    """Fixed-size drawing surface plus everything drawn on it."""

    width: int
    height: int
    primitives: tuple[Primitive, ...]
    gradients: tuple[LinearGradient, ...] = ()
    styles: tuple[StyleRule, ...] = ()
