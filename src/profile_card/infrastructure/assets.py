"""Static image assets, loaded once at startup."""

from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
from pathlib import Path

from profile_card.domain.entities import ImageAsset
from profile_card.domain.exceptions import AssetLoadError

logger = logging.getLogger(__name__)


def load_image(path: Path) -> ImageAsset:
    """Read an image file into an :class:`ImageAsset`."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AssetLoadError(f"Cannot read image asset {path}: {exc}") from exc
    mime_type, _ = mimetypes.guess_type(path.name)
    return ImageAsset(data=data, mime_type=mime_type or "image/png")


def decode_image(encoded: str, mime_type: str = "image/png") -> ImageAsset:
    """Decode a base64 string (as stored in an env var) into an asset."""
    try:
        data = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AssetLoadError(f"Invalid base64 image data: {exc}") from exc
    return ImageAsset(data=data, mime_type=mime_type)


def load_mascot(path: Path | None, encoded: str | None) -> ImageAsset | None:
    """Resolve the mascot image from a file path or inline base64.

    The file path wins when both are configured.  Returns ``None`` when
    neither is set.
    """
    if path is not None:
        asset = load_image(path)
    elif encoded:
        asset = decode_image(encoded)
    else:
        return None
    logger.info("Loaded mascot image (%d bytes, %s)", len(asset.data), asset.mime_type)
    return asset
