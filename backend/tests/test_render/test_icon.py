"""End-to-end tests for the generated favicon."""

from __future__ import annotations

import io
import math
import struct

import numpy as np
import pytest
from PIL import Image

import brandmark.render.icon as icon_module
from brandmark.render.icon import ICON_SIZE, expected_icon_length, get_icon
from brandmark.render.scene import render_mark
from tests.conftest import CENTER, CORNERS


def test_deterministic_within_process():
    first = get_icon()
    second = get_icon()
    assert first == second
    assert first is second


def test_rerender_is_byte_identical():
    before = get_icon()
    get_icon.cache_clear()
    assert get_icon() == before


def test_fixed_size(icon_bytes):
    expected = 6 + 16 + 40 + (32 * 32 * 4) + (math.ceil(32 / 32) * 4 * 32)
    assert expected_icon_length() == expected == 4286
    assert len(icon_bytes) == expected


def test_header(icon_bytes):
    assert struct.unpack_from("<HHH", icon_bytes, 0) == (0, 1, 1)


def test_directory_entry(icon_bytes):
    assert icon_bytes[6] == ICON_SIZE
    assert icon_bytes[7] == ICON_SIZE
    bpp, res_size, res_offset = struct.unpack_from("<HII", icon_bytes, 12)
    assert bpp == 32
    assert res_offset == 22
    assert res_size == len(icon_bytes) - res_offset


def test_alpha_within_byte_range(decoded_icon):
    assert decoded_icon.shape == (32, 32, 4)
    alpha = decoded_icon[..., 3].astype(int)
    assert alpha.min() >= 0
    assert alpha.max() <= 255


def test_centre_opaque_corners_transparent(decoded_icon):
    cx, cy = CENTER
    assert decoded_icon[cy, cx, 3] == 255
    for x, y in CORNERS:
        assert decoded_icon[y, x, 3] == 0


def test_decoded_matches_rendered(decoded_icon):
    assert np.array_equal(decoded_icon, render_mark())


def test_logo_drawn_over_background(decoded_icon):
    # Stem pixels are near-white, the tile is dark navy
    stem = decoded_icon[16, 17]
    assert stem[0] > 200 and stem[1] > 200 and stem[2] > 200
    background = decoded_icon[26, 8]
    assert background[0] < 80 and background[2] < 80
    # O ring at radius ~4.3 left of its centre is orange
    ring = decoded_icon[16, 5]
    assert ring[0] > 200 and ring[2] < 120


def test_pillow_reads_icon(icon_bytes, decoded_icon):
    with Image.open(io.BytesIO(icon_bytes)) as img:
        assert img.format == "ICO"
        assert img.size == (32, 32)
        rgba = np.array(img.convert("RGBA"))
    assert np.array_equal(rgba[..., 3], decoded_icon[..., 3])


@pytest.fixture
def fresh_cache():
    get_icon.cache_clear()
    yield
    get_icon.cache_clear()


def test_failed_render_is_not_cached(monkeypatch, fresh_cache):
    def broken():
        raise MemoryError("no room for pixels")

    monkeypatch.setattr(icon_module, "render_mark", broken)
    with pytest.raises(MemoryError):
        get_icon()

    monkeypatch.undo()
    assert len(get_icon()) == expected_icon_length()
