"""Built-in sparkle animation.

The sparkle is a four-pointed star that grows, shrinks and turns a quarter
revolution over one loop, with a small glint twinkling in the opposite
phase. Frames are palette images sharing one palette so the encoded GIF is
lossless.
"""

from __future__ import annotations

import functools
import io
import math
from typing import List, Tuple

from PIL import Image, ImageDraw

SPARKLE_SIZE = 32
SPARKLE_TICKS = 24
SPARKLE_DELAY_MS = 30

TRANSPARENT = 0
GOLD = 1
WHITE = 2
_PALETTE = [0, 0, 0, 255, 214, 90, 255, 255, 255]


def _star_points(cx: float, cy: float, outer: float, inner: float, angle: float) -> List[Tuple[float, float]]:
    points = []
    for index in range(8):
        radius = outer if index % 2 == 0 else inner
        theta = angle + index * math.pi / 4
        points.append((cx + radius * math.cos(theta), cy + radius * math.sin(theta)))
    return points


def sparkle_tick_image(tick: int, ticks: int = SPARKLE_TICKS, size: int = SPARKLE_SIZE) -> Image.Image:
    """Draw one tick of the sparkle loop as a palette image."""

    frame = Image.new("P", (size, size), TRANSPARENT)
    frame.putpalette(_PALETTE)
    draw = ImageDraw.Draw(frame)

    progress = (tick % ticks) / ticks
    centre = (size - 1) / 2
    swell = math.sin(math.pi * progress)
    outer = 3 + (size / 2 - 4) * swell
    inner = max(1.0, outer / 4)
    angle = -math.pi / 2 + progress * math.pi / 2
    draw.polygon(_star_points(centre, centre, outer, inner, angle), fill=GOLD)

    core = max(1.0, outer / 5)
    draw.ellipse((centre - core, centre - core, centre + core, centre + core), fill=WHITE)

    glint = 1 + 2 * (1 - swell)
    gx, gy = size * 0.78, size * 0.22
    draw.ellipse((gx - glint, gy - glint, gx + glint, gy + glint), fill=WHITE)
    return frame


@functools.lru_cache(maxsize=1)
def default_sparkles_gif() -> bytes:
    """Return the built-in sparkle loop encoded as an infinitely looping GIF."""

    ticks = [sparkle_tick_image(index) for index in range(SPARKLE_TICKS)]
    buffer = io.BytesIO()
    ticks[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=ticks[1:],
        duration=SPARKLE_DELAY_MS,
        loop=0,
        disposal=2,
        transparency=TRANSPARENT,
        optimize=False,
    )
    return buffer.getvalue()


__all__ = [
    "SPARKLE_DELAY_MS",
    "SPARKLE_SIZE",
    "SPARKLE_TICKS",
    "default_sparkles_gif",
    "sparkle_tick_image",
]
