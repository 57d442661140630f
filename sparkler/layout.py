"""Text wrapping and rasterization."""
from __future__ import annotations

import logging
import textwrap
from typing import List, Sequence, Tuple

from PIL import Image, ImageDraw

from .errors import NotEnoughTextError

PADDING = 24
WRAP_COLUMNS = 15
TEXT_COLOUR = (0, 0, 0, 255)

logger = logging.getLogger(__name__)


def wrap_text(text: str, width: int = WRAP_COLUMNS) -> List[str]:
    """Greedy whitespace word-wrap of ``text`` to ``width`` characters per line."""

    return textwrap.wrap(text, width)


def measure_line(font, line: str) -> Tuple[int, int]:
    """Return the pixel width and height of ``line`` drawn at the origin."""

    _, _, right, bottom = font.getbbox(line)
    return max(0, int(right)), max(0, int(bottom))


def text_image(lines: Sequence[str], font) -> Image.Image:
    """Rasterize ``lines`` top to bottom onto a padded transparent canvas.

    Each line is placed below the previous one by the previous line's
    measured height.
    """

    sizes = [measure_line(font, line) for line in lines]
    if not sizes:
        raise NotEnoughTextError()

    width = max(w for w, _ in sizes)
    height = sum(h for _, h in sizes)
    canvas = Image.new("RGBA", (width + PADDING * 2, height + PADDING * 2), (0, 0, 0, 0))
    draw = ImageDraw.Draw(canvas)

    row = PADDING
    for line, (_, line_height) in zip(lines, sizes):
        draw.text((PADDING, row), line, font=font, fill=TEXT_COLOUR)
        row += line_height

    logger.debug("Laid out %d line(s) on a %dx%d canvas", len(lines), *canvas.size)
    return canvas


__all__ = ["PADDING", "TEXT_COLOUR", "WRAP_COLUMNS", "measure_line", "text_image", "wrap_text"]
