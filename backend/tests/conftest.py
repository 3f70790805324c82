"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from brandmark.render.ico import decode_ico
from brandmark.render.icon import get_icon

# Corners of a 32×32 tile, (x, y)
CORNERS = [(0, 0), (31, 0), (0, 31), (31, 31)]
CENTER = (16, 16)


@pytest.fixture
def icon_bytes() -> bytes:
    return get_icon()


@pytest.fixture
def decoded_icon(icon_bytes: bytes) -> np.ndarray:
    return decode_ico(icon_bytes)


@pytest.fixture
def checker_canvas() -> np.ndarray:
    """4×4 canvas with distinct channel values per pixel, for layout checks."""
    canvas = np.zeros((4, 4, 4), dtype=np.uint8)
    for y in range(4):
        for x in range(4):
            canvas[y, x] = (x * 10 + 1, y * 10 + 2, x + y + 3, 255 - x - y)
    return canvas
