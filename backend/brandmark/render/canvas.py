"""RGBA canvas and source-over compositing."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from brandmark.render.sdf import clamp

# Favicon canvas edge in pixels
DEFAULT_SIZE = 32

_CHANNEL_MAX = 255


def new_canvas(size: int = DEFAULT_SIZE) -> NDArray[np.uint8]:
    """Fully transparent top-down RGBA canvas, shape (size, size, 4)."""
    return np.zeros((size, size, 4), dtype=np.uint8)


def _to_channel(value: float) -> int:
    # Round half up, then clamp into a byte
    return int(min(_CHANNEL_MAX, max(0, math.floor(value + 0.5))))


def blend_pixel(
    pixels: NDArray[np.uint8],
    x: int,
    y: int,
    r: float,
    g: float,
    b: float,
    a: float,
) -> None:
    """Composite colour (r, g, b) with opacity a over pixel (x, y), in place.

    Standard source-over. Out-of-canvas coordinates and a <= 0 leave the
    canvas untouched. Later blends read the already blended destination,
    so call order matters.
    """
    height, width = pixels.shape[:2]
    if x < 0 or y < 0 or x >= width or y >= height or a <= 0:
        return

    src_a = clamp(a)
    dst = pixels[y, x]
    dst_a = int(dst[3]) / _CHANNEL_MAX
    out_a = src_a + dst_a * (1.0 - src_a)
    if out_a <= 0:
        return

    keep = dst_a * (1.0 - src_a)
    out = (
        _to_channel((r * src_a + int(dst[0]) * keep) / out_a),
        _to_channel((g * src_a + int(dst[1]) * keep) / out_a),
        _to_channel((b * src_a + int(dst[2]) * keep) / out_a),
        _to_channel(out_a * _CHANNEL_MAX),
    )
    pixels[y, x] = out
