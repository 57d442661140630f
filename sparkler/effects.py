"""Glow outline applied to rasterized text."""
from __future__ import annotations

import numpy as np
from PIL import Image, ImageFilter

BLUR_RADIUS = 3


def invert(img: Image.Image) -> Image.Image:
    """Invert the colour channels of an RGBA image, keeping its alpha."""

    pixels = np.array(img.convert("RGBA"), dtype=np.uint8)
    pixels[..., :3] = 255 - pixels[..., :3]
    return Image.fromarray(pixels)


def outline(img: Image.Image) -> Image.Image:
    """Return ``img`` composited over an inverted, blurred copy of itself.

    The blurred black text turns into a white halo whose opacity follows
    the blurred coverage, fading to transparent away from the glyphs.
    """

    source = img.convert("RGBA")
    halo = invert(source.filter(ImageFilter.GaussianBlur(BLUR_RADIUS)))
    return Image.alpha_composite(halo, source)


__all__ = ["BLUR_RADIUS", "invert", "outline"]
