"""Signed distance fields and soft coverage for the logo rasterizer.

Sign convention everywhere: negative inside, zero on the boundary,
positive outside. Circular shapes use the plain Euclidean distance to
their centre and compare it against radii, which keeps the same
convention (below the radius = inside).
"""

from __future__ import annotations

import math


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return min(hi, max(lo, value))


def mix(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    """Hermite ease t²(3 - 2t) of x clamped into [edge0, edge1].

    Exactly 0 below edge0 and exactly 1 above edge1 (for edge0 < edge1).
    """
    t = clamp((x - edge0) / (edge1 - edge0))
    return t * t * (3.0 - 2.0 * t)


def rounded_rect_distance(
    px: float,
    py: float,
    cx: float,
    cy: float,
    half_w: float,
    half_h: float,
    radius: float,
) -> float:
    """Signed distance from (px, py) to an axis-aligned rounded rectangle.

    The rectangle is shrunk by the corner radius, the distance to that core
    box is taken (hypot of the clamped offset in the corner regions,
    min(max(dx, dy), 0) inside), then the radius is subtracted back.
    """
    dx = abs(px - cx) - (half_w - radius)
    dy = abs(py - cy) - (half_h - radius)
    outside = math.hypot(max(dx, 0.0), max(dy, 0.0))
    inside = min(max(dx, dy), 0.0)
    return outside + inside - radius


def box_distance(
    px: float,
    py: float,
    cx: float,
    cy: float,
    half_w: float,
    half_h: float,
) -> float:
    """Signed distance to a sharp-cornered box (zero corner radius)."""
    return rounded_rect_distance(px, py, cx, cy, half_w, half_h, 0.0)


def circle_distance(px: float, py: float, cx: float, cy: float) -> float:
    return math.hypot(px - cx, py - cy)


def fill_coverage(d: float, inner_edge: float, outer_edge: float) -> float:
    """Coverage of a filled shape: 1 deep inside, fading to 0 across the band."""
    return 1.0 - smoothstep(inner_edge, outer_edge, d)


def ring_coverage(
    dist: float,
    inner_lo: float,
    inner_hi: float,
    outer_lo: float,
    outer_hi: float,
) -> float:
    """Annulus coverage: outer fill multiplied by the inner cut-out."""
    return fill_coverage(dist, outer_lo, outer_hi) * smoothstep(inner_lo, inner_hi, dist)
