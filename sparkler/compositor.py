"""Sparkle placement, phasing and per-frame compositing."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from PIL import Image

from .frames import FRAME_DELAY_MS, Frame

NUM_SPARKLES = 3
SPARKLE_MARGIN = 32
NARROW_WIDTH = 200

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SparklePlacement:
    positions: Tuple[Tuple[int, int], ...]
    phases: Tuple[int, ...]
    active: int

    def slots(self) -> List[Tuple[Tuple[int, int], int]]:
        return list(zip(self.positions, self.phases))[: self.active]


def sparkle_positions(width: int, height: int) -> List[Tuple[int, int]]:
    """Sparkle anchors inside an interior area of ``width`` x ``height``."""

    return [
        (10, 10),
        (width - 42, height - 42),
        (width // 3, 2 * height // 3),
    ]


def sparkle_phases(num_frames: int) -> List[int]:
    return [0, num_frames // 3, num_frames - num_frames // 11]


def active_sparkles(canvas_width: int) -> int:
    return 1 if canvas_width < NARROW_WIDTH else NUM_SPARKLES


def sparkle_tick(frame_index: int, phase: int, num_frames: int) -> int:
    """Index of the sparkle frame shown at ``frame_index`` for a slot at ``phase``."""

    if num_frames <= 0:
        raise ValueError("num_frames must be positive")
    return (frame_index + phase) % num_frames


def place_sparkles(canvas_size: Tuple[int, int], num_frames: int) -> SparklePlacement:
    width, height = canvas_size
    positions = sparkle_positions(width - SPARKLE_MARGIN, height - SPARKLE_MARGIN)
    return SparklePlacement(
        positions=tuple(positions),
        phases=tuple(sparkle_phases(num_frames)),
        active=active_sparkles(width),
    )


def overlay(base: Image.Image, top: Image.Image, x: int, y: int) -> None:
    """Source-over composite ``top`` onto ``base`` at ``(x, y)`` in place.

    Parts of ``top`` falling outside ``base`` are clipped.
    """

    left, upper = max(0, -x), max(0, -y)
    right = min(top.width, base.width - x)
    lower = min(top.height, base.height - y)
    if right <= left or lower <= upper:
        return
    region = top.convert("RGBA").crop((left, upper, right, lower))
    base.alpha_composite(region, dest=(x + left, y + upper))


def composite_frames(image: Image.Image, sparkles: Sequence[Image.Image]) -> List[Frame]:
    """Overlay the phased sparkle loop onto copies of ``image``, one frame per sparkle tick."""

    num_frames = len(sparkles)
    if num_frames == 0:
        raise ValueError("at least one sparkle frame is required")

    placement = place_sparkles(image.size, num_frames)
    logger.debug(
        "Compositing %d frame(s) with %d sparkle(s) at %s",
        num_frames,
        placement.active,
        placement.positions[: placement.active],
    )

    frames: List[Frame] = []
    for index in range(num_frames):
        frame = image.copy()
        for (x, y), phase in placement.slots():
            overlay(frame, sparkles[sparkle_tick(index, phase, num_frames)], x, y)
        frames.append(Frame(frame, duration_ms=FRAME_DELAY_MS))
    return frames


__all__ = [
    "NARROW_WIDTH",
    "NUM_SPARKLES",
    "SPARKLE_MARGIN",
    "SparklePlacement",
    "active_sparkles",
    "composite_frames",
    "overlay",
    "place_sparkles",
    "sparkle_phases",
    "sparkle_positions",
    "sparkle_tick",
]
