"""Timed frames produced by the renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from PIL import Image

FRAME_DELAY_MS = 30


@dataclass
class Frame:
    image: Image.Image
    duration_ms: int = FRAME_DELAY_MS
    left: int = 0
    top: int = 0

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


FrameSequence = List[Frame]

__all__ = ["FRAME_DELAY_MS", "Frame", "FrameSequence"]
