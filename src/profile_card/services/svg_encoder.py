"""SVG encoder — serialises a :class:`Canvas` into a self-contained document.

Embedded assets (avatar, mascot) are inlined as base64 ``data:`` URIs, so
the document renders without any further network fetch.  Primitives are
written in canvas order.
"""

from __future__ import annotations

import base64

from profile_card.domain.entities import ImageAsset
from profile_card.domain.primitives import (
    Canvas,
    Icon,
    Image,
    LinearGradient,
    Primitive,
    Rect,
    StyleRule,
    Text,
)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_XML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
}


def escape_xml(text: str) -> str:
    """Escape the five XML-reserved characters."""
    return "".join(_XML_ESCAPES.get(char, char) for char in text)


def data_uri(asset: ImageAsset) -> str:
    encoded = base64.b64encode(asset.data).decode("ascii")
    return f"data:{asset.mime_type};base64,{encoded}"


def encode_svg(canvas: Canvas) -> str:
    """Render *canvas* as an SVG document string."""
    parts = [
        f'<svg width="{canvas.width}" height="{canvas.height}" '
        f'xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}">'
    ]
    if canvas.gradients:
        parts.append("<defs>")
        parts.extend(_gradient(g) for g in canvas.gradients)
        parts.append("</defs>")
    parts.extend(_primitive(p) for p in canvas.primitives)
    if canvas.styles:
        parts.append(_stylesheet(canvas.styles))
    parts.append("</svg>")
    return "\n".join(parts) + "\n"


# ── Elements ────────────────────────────────────────────────────────────────


def _primitive(primitive: Primitive) -> str:
    if isinstance(primitive, Rect):
        element = _element(
            "rect",
            x=primitive.x,
            y=primitive.y,
            width=primitive.width,
            height=primitive.height,
            fill=primitive.fill,
            rx=primitive.rx or None,
            ry=primitive.ry or None,
            opacity=primitive.opacity,
        )
    elif isinstance(primitive, Text):
        element = _text(primitive)
    elif isinstance(primitive, Image):
        element = _image(primitive)
    elif isinstance(primitive, Icon):
        element = _icon(primitive)
    else:
        raise TypeError(f"Unsupported primitive: {type(primitive).__name__}")

    if primitive.href:
        return f'<a xlink:href="{escape_xml(primitive.href)}" target="_blank">{element}</a>'
    return element


def _text(text: Text) -> str:
    attrs = _attributes(
        x=text.x,
        y=text.y,
        **{
            "class": text.css_class,
            "font-size": text.font_size,
            "fill": text.fill,
            "text-anchor": text.text_anchor,
        },
    )
    return f"<text {attrs}>{escape_xml(text.content)}</text>"


def _image(image: Image) -> str:
    href = data_uri(image.asset) if image.asset is not None else image.url
    return _element(
        "image",
        x=image.x,
        y=image.y,
        width=image.width,
        height=image.height,
        href=href,
        opacity=image.opacity,
        preserveAspectRatio=image.preserve_aspect_ratio,
    )


def _icon(icon: Icon) -> str:
    shapes = "".join(
        f"<{shape.tag} {_attributes(**dict(shape.attributes))}></{shape.tag}>"
        for shape in icon.shapes
    )
    svg = (
        f"<svg {_attributes(x=icon.x, y=icon.y, width=icon.size, height=icon.size)} "
        f'viewBox="0 0 24 24" fill="none" stroke="{escape_xml(icon.stroke)}" '
        'stroke-width="2" stroke-linecap="round" stroke-linejoin="round">'
        f"{shapes}</svg>"
    )
    if not icon.hit_padding:
        return svg
    hit_area = _element(
        "rect",
        x=icon.x - icon.hit_padding,
        y=icon.y - icon.hit_padding,
        width=icon.size + icon.hit_padding * 2,
        height=icon.size + icon.hit_padding * 2,
        fill="transparent",
    )
    return hit_area + svg


def _gradient(gradient: LinearGradient) -> str:
    stops = "".join(
        _element(
            "stop",
            offset=stop.offset,
            style=f"stop-color:{stop.color};stop-opacity:{_number(stop.opacity)}",
        )
        for stop in gradient.stops
    )
    attrs = _attributes(
        id=gradient.id, x1=gradient.x1, y1=gradient.y1, x2=gradient.x2, y2=gradient.y2
    )
    return f"<linearGradient {attrs}>{stops}</linearGradient>"


def _stylesheet(rules: tuple[StyleRule, ...]) -> str:
    body = "\n".join(
        f"{rule.selector} {{ "
        + " ".join(f"{name}: {value};" for name, value in rule.declarations)
        + " }"
        for rule in rules
    )
    # CSS quotes font names, so only markup characters are escaped here
    body = body.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return f"<style>\n{body}\n</style>"


# ── Attribute helpers ───────────────────────────────────────────────────────


def _element(tag: str, **attrs: object) -> str:
    return f"<{tag} {_attributes(**attrs)} />"


def _attributes(**attrs: object) -> str:
    """``key="value"`` pairs, skipping ``None`` values."""
    return " ".join(
        f'{name}="{escape_xml(_number(value) if isinstance(value, (int, float)) else str(value))}"'
        for name, value in attrs.items()
        if value is not None
    )


def _number(value: float) -> str:
    """Format a coordinate without trailing zeros (``60``, ``66.68``)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")
