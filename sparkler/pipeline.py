"""Text to sparkling animation frames."""
from __future__ import annotations

import contextlib
import logging
from typing import Iterator, Optional, Sequence

from PIL import Image

from .compositor import composite_frames
from .effects import outline
from .errors import ImageOperationError, NotEnoughTextError, SparklerError
from .frames import FrameSequence
from .layout import text_image, wrap_text
from .resources import load_font, load_sparkles

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _imaging_errors() -> Iterator[None]:
    try:
        yield
    except SparklerError:
        raise
    except (OSError, ValueError, MemoryError) as exc:
        raise ImageOperationError(str(exc) or exc.__class__.__name__) from exc


def render(
    text: str,
    *,
    font=None,
    sparkles: Optional[Sequence[Image.Image]] = None,
) -> FrameSequence:
    """Render ``text`` into a looping sequence of sparkling frames.

    ``font`` and ``sparkles`` default to the configured resources and are
    loaded on every call when omitted.

    Raises :class:`FontLoadError`, :class:`NotEnoughTextError`,
    :class:`AssetDecodeError` or :class:`ImageOperationError`.
    """

    if font is None:
        font = load_font()
    lines = wrap_text(text)
    if not lines:
        raise NotEnoughTextError()
    logger.debug("Wrapped %r into %d line(s)", text, len(lines))

    with _imaging_errors():
        image = outline(text_image(lines, font))

    if sparkles is None:
        sparkles = load_sparkles()
    with _imaging_errors():
        frames = composite_frames(image, sparkles)

    logger.debug("Rendered %d frame(s) at %dx%d", len(frames), *image.size)
    return frames


__all__ = ["render"]
