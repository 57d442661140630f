"""Exceptions raised by the Sparkler rendering pipeline."""
from __future__ import annotations

__all__ = [
    "AssetDecodeError",
    "FontLoadError",
    "ImageOperationError",
    "NotEnoughTextError",
    "SparklerError",
]


class SparklerError(Exception):
    """Base class for every failure surfaced by :func:`sparkler.render`."""


class FontLoadError(SparklerError):
    def __init__(self, message: str = "Failed to load font data.") -> None:
        super().__init__(message)


class NotEnoughTextError(SparklerError, ValueError):
    def __init__(self, message: str = "Not enough text.") -> None:
        super().__init__(message)


class AssetDecodeError(SparklerError):
    """The sparkle animation could not be decoded into frames."""


class ImageOperationError(SparklerError):
    """Wraps a lower-level Pillow failure that has no dedicated error type."""
