"""Render short texts as sparkling, glow-outlined looping animations."""

from .errors import (
    AssetDecodeError,
    FontLoadError,
    ImageOperationError,
    NotEnoughTextError,
    SparklerError,
)
from .frames import Frame, FrameSequence
from .pipeline import render

__version__ = "0.1.0"

__all__ = [
    "AssetDecodeError",
    "FontLoadError",
    "Frame",
    "FrameSequence",
    "ImageOperationError",
    "NotEnoughTextError",
    "SparklerError",
    "__version__",
    "render",
]
