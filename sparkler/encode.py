"""GIF encoding of rendered frame sequences."""
from __future__ import annotations

import io
import os
from typing import Sequence

from PIL import Image

from .errors import ImageOperationError
from .frames import Frame


def _ensure_rgba_frames(frames: Sequence[Frame]) -> list[Image.Image]:
    return [frame.image.convert("RGBA") if frame.image.mode != "RGBA" else frame.image for frame in frames]


def _write_gif(frames: Sequence[Frame], target) -> None:
    if not frames:
        raise ValueError("No frames to save")

    images = _ensure_rgba_frames(frames)
    try:
        images[0].save(
            target,
            format="GIF",
            save_all=True,
            append_images=images[1:],
            duration=[frame.duration_ms for frame in frames],
            loop=0,
            disposal=2,
            optimize=False,
        )
    except (OSError, ValueError) as exc:
        raise ImageOperationError(f"Failed to encode GIF: {exc}") from exc


def encode_gif(frames: Sequence[Frame]) -> bytes:
    """Encode ``frames`` as an infinitely looping GIF and return the bytes."""

    buffer = io.BytesIO()
    _write_gif(frames, buffer)
    return buffer.getvalue()


def save_gif(frames: Sequence[Frame], path: str) -> str:
    """Write ``frames`` as an infinitely looping GIF to ``path``."""

    if not frames:
        raise ValueError("No frames to save")

    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    with open(path, "wb") as handle:
        _write_gif(frames, handle)
    return path


__all__ = ["encode_gif", "save_gif"]
