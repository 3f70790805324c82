"""Logo scene: background tile plus the "OB" wordmark, drawn pixel by pixel.

All geometry is in canvas pixels for a 32×32 tile, sampled at pixel
centres. Two passes, background first, since compositing is order
dependent.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from brandmark.render.canvas import DEFAULT_SIZE, blend_pixel, new_canvas
from brandmark.render.sdf import (
    box_distance,
    circle_distance,
    clamp,
    fill_coverage,
    mix,
    ring_coverage,
    rounded_rect_distance,
    smoothstep,
)

logger = logging.getLogger(__name__)

# ── Palette ──

_BG_START = (12.0, 18.0, 30.0)
_BG_END = (28.0, 33.0, 46.0)
_GLOW_TINT = (20.0, 10.0, 3.0)
_BORDER = (234.0, 97.0, 26.0)
_ORANGE = (255.0, 133.0, 52.0)
_ORANGE_SOFT = (255.0, 138.0, 60.0)
_ORANGE_DOT = (255.0, 132.0, 49.0)
_HIGHLIGHT = (255.0, 244.0, 236.0)
_STEM_WHITE = (246.0, 248.0, 251.0)
_BOWL_WHITE = (247.0, 249.0, 252.0)

# ── Background tile ──

# Rounded square: 1px margin, corner radius below half the tile so the
# four extreme corners stay transparent.
_TILE_CENTER = 16.0
_TILE_HALF = 15.0
_TILE_RADIUS = 6.2
_TILE_EDGE = (-0.8, 0.8)

# Gaussian glow in the top-left: exp(-dist² / sigma)
_GLOW_CENTER = (8.0, 7.0)
_GLOW_SIGMA = 58.0

# Border = outer fill minus a slightly inset fill
_BORDER_OUTER = (-1.6, 0.9)
_BORDER_INNER = (-3.6, -1.0)
_BORDER_OPACITY = 0.95

# ── Wordmark ──

_O_CENTER = (10.2, 16.0)
_O_INNER = (2.8, 3.9)
_O_OUTER = (4.7, 6.0)
_O_OPACITY = 0.98
# Highlight arc on the right-hand side of the ring, radians
_O_HIGHLIGHT_ARC = (-0.9, 0.25)
_O_HIGHLIGHT_OPACITY = 0.3

_STEM_CENTER = (17.1, 16.0)
_STEM_HALF = (1.25, 7.2)
_STEM_EDGE = (-0.7, 0.7)
_STEM_OPACITY = 0.96

_UPPER_BOWL_CENTER = (19.5, 12.4)
_LOWER_BOWL_CENTER = (19.5, 19.4)
_BOWL_INNER = (1.2, 2.2)
_BOWL_OUTER = (3.0, 4.0)
# Bowls only exist right of the stem
_BOWL_CLIP_X = (16.9, 17.9)
_BOWL_OPACITY = 0.95
_UPPER_BOWL_TINT_BELOW_Y = 12.7
_UPPER_BOWL_TINT_OPACITY = 0.35

_DOT_CENTER = (23.8, 8.8)
_DOT_EDGE = (0.25, 1.35)
_DOT_OPACITY = 0.95


def _pixel_centers(size: int):
    for y in range(size):
        for x in range(size):
            yield x, y, x + 0.5, y + 0.5


def draw_background(pixels: NDArray[np.uint8]) -> None:
    """Rounded dark tile with a diagonal gradient, corner glow and accent border."""
    size = pixels.shape[0]
    span = 2 * (size - 1)

    for x, y, px, py in _pixel_centers(size):
        d = rounded_rect_distance(
            px, py, _TILE_CENTER, _TILE_CENTER, _TILE_HALF, _TILE_HALF, _TILE_RADIUS
        )
        fill = fill_coverage(d, *_TILE_EDGE)
        if fill <= 0:
            continue

        t = (x + y) / span
        glow = math.exp(-((px - _GLOW_CENTER[0]) ** 2 + (py - _GLOW_CENTER[1]) ** 2) / _GLOW_SIGMA)
        r, g, b = (
            mix(start, end, t) + glow * tint
            for start, end, tint in zip(_BG_START, _BG_END, _GLOW_TINT)
        )
        blend_pixel(pixels, x, y, r, g, b, fill)

        border = clamp(fill_coverage(d, *_BORDER_OUTER) - fill_coverage(d, *_BORDER_INNER))
        if border > 0:
            blend_pixel(pixels, x, y, *_BORDER, border * _BORDER_OPACITY)


def draw_logo(pixels: NDArray[np.uint8]) -> None:
    """O ring, B stem, the two B bowls and the accent dot, in that order."""
    size = pixels.shape[0]

    for x, y, px, py in _pixel_centers(size):
        # O
        o_dist = circle_distance(px, py, *_O_CENTER)
        ring = ring_coverage(o_dist, *_O_INNER, *_O_OUTER)
        if ring > 0:
            blend_pixel(pixels, x, y, *_ORANGE, ring * _O_OPACITY)
            angle = math.atan2(py - _O_CENTER[1], px - _O_CENTER[0])
            if _O_HIGHLIGHT_ARC[0] < angle < _O_HIGHLIGHT_ARC[1]:
                blend_pixel(pixels, x, y, *_HIGHLIGHT, ring * _O_HIGHLIGHT_OPACITY)

        # B stem
        stem = fill_coverage(box_distance(px, py, *_STEM_CENTER, *_STEM_HALF), *_STEM_EDGE)
        if stem > 0:
            blend_pixel(pixels, x, y, *_STEM_WHITE, stem * _STEM_OPACITY)

        right_half = smoothstep(*_BOWL_CLIP_X, px)

        # B upper bowl
        upper = ring_coverage(
            circle_distance(px, py, *_UPPER_BOWL_CENTER), *_BOWL_INNER, *_BOWL_OUTER
        ) * right_half
        if upper > 0:
            blend_pixel(pixels, x, y, *_BOWL_WHITE, upper * _BOWL_OPACITY)
            if py < _UPPER_BOWL_TINT_BELOW_Y:
                blend_pixel(pixels, x, y, *_ORANGE_SOFT, upper * _UPPER_BOWL_TINT_OPACITY)

        # B lower bowl
        lower = ring_coverage(
            circle_distance(px, py, *_LOWER_BOWL_CENTER), *_BOWL_INNER, *_BOWL_OUTER
        ) * right_half
        if lower > 0:
            blend_pixel(pixels, x, y, *_BOWL_WHITE, lower * _BOWL_OPACITY)

        dot = fill_coverage(circle_distance(px, py, *_DOT_CENTER), *_DOT_EDGE)
        if dot > 0:
            blend_pixel(pixels, x, y, *_ORANGE_DOT, dot * _DOT_OPACITY)


def render_mark() -> NDArray[np.uint8]:
    """Rasterize the full logo tile onto a fresh DEFAULT_SIZE canvas."""
    pixels = new_canvas(DEFAULT_SIZE)
    draw_background(pixels)
    draw_logo(pixels)
    logger.debug(
        "Rendered %dx%d mark, %d opaque pixels",
        DEFAULT_SIZE,
        DEFAULT_SIZE,
        int(np.count_nonzero(pixels[..., 3] == 255)),
    )
    return pixels
