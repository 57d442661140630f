"""Loading of the font and sparkle resources used by the renderer.

Both resources are read-only for the duration of a render call. They are
loaded on every call; callers that render often may load them once and
pass them to :func:`sparkler.render` themselves.
"""

from __future__ import annotations

import io
import logging
from typing import Optional, Tuple

from PIL import Image, ImageFont, ImageSequence

from .assets import default_sparkles_gif
from .config import load_settings
from .errors import AssetDecodeError, FontLoadError

FONT_SIZE = 64

logger = logging.getLogger(__name__)

SparkleAsset = Tuple[Image.Image, ...]


def load_font(data: Optional[bytes] = None, path: Optional[str] = None):
    """Return a font at :data:`FONT_SIZE` from ``data``, ``path`` or the configured default.

    Raises :class:`FontLoadError` when the font data cannot be parsed.
    """

    if data is None and path is None:
        path = load_settings().font_path
    try:
        if data is not None:
            return ImageFont.truetype(io.BytesIO(data), FONT_SIZE)
        if path:
            logger.debug("Loading font from %s", path)
            return ImageFont.truetype(path, FONT_SIZE)
        return ImageFont.load_default(size=FONT_SIZE)
    except (OSError, ValueError) as exc:
        raise FontLoadError() from exc


def sparkles_gif_bytes(path: Optional[str] = None) -> bytes:
    """Return the raw sparkle animation bytes from ``path`` or the built-in asset."""

    path = path or load_settings().sparkles_path
    if not path:
        return default_sparkles_gif()
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as exc:
        raise AssetDecodeError(f"Failed to read sparkle animation: {path}") from exc


def load_sparkles(data: Optional[bytes] = None, path: Optional[str] = None) -> SparkleAsset:
    """Decode an animated image into a tuple of equally sized RGBA frames."""

    if data is None:
        data = sparkles_gif_bytes(path)
    try:
        with Image.open(io.BytesIO(data)) as payload:
            frames = tuple(frame.convert("RGBA") for frame in ImageSequence.Iterator(payload))
    except (OSError, ValueError, EOFError) as exc:
        raise AssetDecodeError(f"Failed to decode sparkle animation: {exc}") from exc

    if not frames:
        raise AssetDecodeError("Sparkle animation has no frames")
    size = frames[0].size
    if any(frame.size != size for frame in frames):
        raise AssetDecodeError("Sparkle animation frames differ in size")
    logger.debug("Decoded %d sparkle frames of %dx%d", len(frames), *size)
    return frames


__all__ = ["FONT_SIZE", "SparkleAsset", "load_font", "load_sparkles", "sparkles_gif_bytes"]
