"""Tests for the ICO container writer and reader."""

from __future__ import annotations

import struct

import numpy as np
import pytest

from brandmark.render.ico import (
    BITMAPINFOHEADER_SIZE,
    ICONDIR,
    ICONDIR_SIZE,
    ICONDIRENTRY_SIZE,
    BinaryWriter,
    IcoFormatError,
    IcoLayout,
    decode_ico,
    encode_ico,
)


def test_struct_sizes():
    assert ICONDIR_SIZE == 6
    assert ICONDIRENTRY_SIZE == 16
    assert BITMAPINFOHEADER_SIZE == 40


def test_layout_for_32():
    layout = IcoLayout.for_size(32)
    assert layout.pixel_bytes == 32 * 32 * 4
    assert layout.mask_row_bytes == 4
    assert layout.mask_bytes == 128
    assert layout.image_offset == 22
    assert layout.image_bytes == 40 + 4096 + 128
    assert layout.file_bytes == 6 + 16 + 40 + 4096 + 128


def test_mask_rows_pad_to_32_bits():
    assert IcoLayout.for_size(33).mask_row_bytes == 8
    assert IcoLayout.for_size(4).mask_row_bytes == 4


def test_encode_headers(checker_canvas):
    data = encode_ico(checker_canvas)
    layout = IcoLayout.for_size(4)
    assert len(data) == layout.file_bytes

    assert struct.unpack_from("<HHH", data, 0) == (0, 1, 1)

    width, height, colors, reserved, planes, bpp, res_size, res_offset = struct.unpack_from(
        "<BBBBHHII", data, 6
    )
    assert (width, height, colors, reserved) == (4, 4, 0, 0)
    assert (planes, bpp) == (1, 32)
    assert res_size == layout.image_bytes
    assert res_offset == 22

    info = struct.unpack_from("<IiiHHIIiiII", data, 22)
    assert info == (40, 4, 8, 1, 32, 0, 4 * 4 * 4, 0, 0, 0, 0)


def test_pixels_bottom_up_bgra(checker_canvas):
    data = encode_ico(checker_canvas)
    pixel_offset = IcoLayout.for_size(4).pixel_offset

    # First stored row is the last canvas row
    first_stored = data[pixel_offset : pixel_offset + 4]
    r, g, b, a = checker_canvas[3, 0]
    assert tuple(first_stored) == (b, g, r, a)

    # Top-left canvas pixel is the first pixel of the last stored row
    last_row = pixel_offset + 3 * 4 * 4
    r, g, b, a = checker_canvas[0, 0]
    assert tuple(data[last_row : last_row + 4]) == (b, g, r, a)


def test_mask_left_zeroed(checker_canvas):
    data = encode_ico(checker_canvas)
    layout = IcoLayout.for_size(4)
    mask = data[layout.pixel_offset + layout.pixel_bytes :]
    assert len(mask) == layout.mask_bytes
    assert not any(mask)


def test_decode_restores_canvas(checker_canvas):
    assert np.array_equal(decode_ico(encode_ico(checker_canvas)), checker_canvas)


@pytest.mark.parametrize("shape", [(4, 5, 4), (4, 4, 3), (4, 4)])
def test_encode_rejects_bad_canvas(shape):
    with pytest.raises(ValueError):
        encode_ico(np.zeros(shape, dtype=np.uint8))


def test_encode_rejects_oversized_canvas():
    with pytest.raises(ValueError):
        encode_ico(np.zeros((256, 256, 4), dtype=np.uint8))


def test_decode_rejects_wrong_type(checker_canvas):
    data = bytearray(encode_ico(checker_canvas))
    data[2] = 2  # cursor
    with pytest.raises(IcoFormatError):
        decode_ico(bytes(data))


def test_decode_rejects_truncated(checker_canvas):
    data = encode_ico(checker_canvas)
    with pytest.raises(IcoFormatError):
        decode_ico(data[:10])
    with pytest.raises(IcoFormatError):
        decode_ico(data[:100])


def test_decode_rejects_other_bit_depth(checker_canvas):
    data = bytearray(encode_ico(checker_canvas))
    struct.pack_into("<H", data, 12, 24)
    with pytest.raises(IcoFormatError):
        decode_ico(bytes(data))


def test_writer_rejects_unknown_field():
    writer = BinaryWriter(ICONDIR_SIZE)
    with pytest.raises(KeyError):
        writer.write_struct(ICONDIR, 0, kind=1)


def test_writer_defaults_missing_fields_to_zero():
    writer = BinaryWriter(ICONDIR_SIZE)
    writer.write_struct(ICONDIR, 0, type=1)
    assert writer.getvalue() == b"\x00\x00\x01\x00\x00\x00"
