"""ICO container encoding — one 32-bit BMP frame with an (unused) AND mask.

Layout of the produced file::

    ICONDIR           6 bytes   reserved, type, image count
    ICONDIRENTRY     16 bytes   width, height, colours, reserved,
                                planes, bit count, image size, image offset
    BITMAPINFOHEADER 40 bytes   height is doubled (colour + mask rows)
    pixel array      w*h*4      BGRA, bottom row first
    AND mask         row-padded to 32 bits, left zeroed

All integers are little-endian. 32-bit readers take transparency from the
alpha channel, so an all-zero mask is fine.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

ICO_TYPE_ICON = 1
BITS_PER_PIXEL = 32
BI_RGB = 0
# Directory entry stores width/height in one byte each
MAX_ICO_DIMENSION = 255


class IcoFormatError(ValueError):
    """Raised when bytes are not a single-frame 32-bit ICO we can read."""


@dataclass(frozen=True)
class Field:
    name: str
    offset: int
    fmt: str  # struct format, little-endian prefix added on write

    @property
    def size(self) -> int:
        return struct.calcsize("<" + self.fmt)


ICONDIR = (
    Field("reserved", 0, "H"),
    Field("type", 2, "H"),
    Field("count", 4, "H"),
)

ICONDIRENTRY = (
    Field("width", 0, "B"),
    Field("height", 1, "B"),
    Field("color_count", 2, "B"),
    Field("reserved", 3, "B"),
    Field("planes", 4, "H"),
    Field("bit_count", 6, "H"),
    Field("bytes_in_res", 8, "I"),
    Field("image_offset", 12, "I"),
)

BITMAPINFOHEADER = (
    Field("size", 0, "I"),
    Field("width", 4, "i"),
    Field("height", 8, "i"),
    Field("planes", 12, "H"),
    Field("bit_count", 14, "H"),
    Field("compression", 16, "I"),
    Field("size_image", 20, "I"),
    Field("x_pels_per_meter", 24, "i"),
    Field("y_pels_per_meter", 28, "i"),
    Field("clr_used", 32, "I"),
    Field("clr_important", 36, "I"),
)


def _struct_size(fields: tuple[Field, ...]) -> int:
    return max(f.offset + f.size for f in fields)


ICONDIR_SIZE = _struct_size(ICONDIR)  # 6
ICONDIRENTRY_SIZE = _struct_size(ICONDIRENTRY)  # 16
BITMAPINFOHEADER_SIZE = _struct_size(BITMAPINFOHEADER)  # 40


@dataclass(frozen=True)
class IcoLayout:
    """Byte sizes and offsets of a single-frame icon of a given edge length."""

    size: int
    pixel_bytes: int
    mask_row_bytes: int
    mask_bytes: int
    image_bytes: int
    image_offset: int
    file_bytes: int

    @classmethod
    def for_size(cls, size: int) -> IcoLayout:
        pixel_bytes = size * size * 4
        mask_row_bytes = math.ceil(size / 32) * 4
        mask_bytes = mask_row_bytes * size
        image_bytes = BITMAPINFOHEADER_SIZE + pixel_bytes + mask_bytes
        image_offset = ICONDIR_SIZE + ICONDIRENTRY_SIZE
        return cls(
            size=size,
            pixel_bytes=pixel_bytes,
            mask_row_bytes=mask_row_bytes,
            mask_bytes=mask_bytes,
            image_bytes=image_bytes,
            image_offset=image_offset,
            file_bytes=image_offset + image_bytes,
        )

    @property
    def pixel_offset(self) -> int:
        return self.image_offset + BITMAPINFOHEADER_SIZE


class BinaryWriter:
    """Writes named little-endian fields into a pre-sized, zeroed buffer."""

    def __init__(self, length: int) -> None:
        self.buffer = bytearray(length)

    def write_struct(self, fields: tuple[Field, ...], base: int, **values: int) -> None:
        """Write every field of a struct at base; missing values are zero."""
        names = {f.name for f in fields}
        unknown = set(values) - names
        if unknown:
            raise KeyError(f"Unknown fields: {sorted(unknown)}")
        for f in fields:
            struct.pack_into("<" + f.fmt, self.buffer, base + f.offset, values.get(f.name, 0))

    def write_bytes(self, offset: int, data: bytes) -> None:
        self.buffer[offset : offset + len(data)] = data

    def getvalue(self) -> bytes:
        return bytes(self.buffer)


def _read_struct(data: bytes, fields: tuple[Field, ...], base: int) -> dict[str, int]:
    return {f.name: struct.unpack_from("<" + f.fmt, data, base + f.offset)[0] for f in fields}


def encode_ico(pixels: NDArray[np.uint8]) -> bytes:
    """Pack a square top-down RGBA canvas into a single-frame ICO file."""
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.shape[0] != pixels.shape[1]:
        raise ValueError(f"Expected a square RGBA canvas, got shape {pixels.shape}")
    size = pixels.shape[0]
    if not 0 < size <= MAX_ICO_DIMENSION:
        raise ValueError(f"Icon size must be within 1..{MAX_ICO_DIMENSION}, got {size}")

    layout = IcoLayout.for_size(size)
    writer = BinaryWriter(layout.file_bytes)

    writer.write_struct(ICONDIR, 0, type=ICO_TYPE_ICON, count=1)
    writer.write_struct(
        ICONDIRENTRY,
        ICONDIR_SIZE,
        width=size,
        height=size,
        planes=1,
        bit_count=BITS_PER_PIXEL,
        bytes_in_res=layout.image_bytes,
        image_offset=layout.image_offset,
    )
    writer.write_struct(
        BITMAPINFOHEADER,
        layout.image_offset,
        size=BITMAPINFOHEADER_SIZE,
        width=size,
        height=size * 2,
        planes=1,
        bit_count=BITS_PER_PIXEL,
        compression=BI_RGB,
        size_image=layout.pixel_bytes,
    )

    # Bottom-up rows, RGBA -> BGRA
    bgra = np.ascontiguousarray(pixels[::-1][..., [2, 1, 0, 3]], dtype=np.uint8)
    writer.write_bytes(layout.pixel_offset, bgra.tobytes())

    return writer.getvalue()


def decode_ico(data: bytes) -> NDArray[np.uint8]:
    """Read the frame of a single-frame 32-bit ICO back into top-down RGBA."""
    if len(data) < ICONDIR_SIZE + ICONDIRENTRY_SIZE:
        raise IcoFormatError("Truncated ICO header")

    header = _read_struct(data, ICONDIR, 0)
    if header["reserved"] != 0 or header["type"] != ICO_TYPE_ICON or header["count"] < 1:
        raise IcoFormatError(f"Not an icon file: {header}")

    entry = _read_struct(data, ICONDIRENTRY, ICONDIR_SIZE)
    if entry["bit_count"] != BITS_PER_PIXEL:
        raise IcoFormatError(f"Unsupported bit depth: {entry['bit_count']}")

    # A zero byte means 256 in the directory entry
    width = entry["width"] or 256
    height = entry["height"] or 256
    offset = entry["image_offset"]
    if offset + BITMAPINFOHEADER_SIZE > len(data):
        raise IcoFormatError("Truncated bitmap header")

    info = _read_struct(data, BITMAPINFOHEADER, offset)
    if info["width"] != width or info["height"] != height * 2:
        raise IcoFormatError(f"Bitmap header {info['width']}x{info['height']} does not match entry")

    start = offset + info["size"]
    end = start + width * height * 4
    if end > len(data):
        raise IcoFormatError("Truncated pixel array")

    bgra = np.frombuffer(data, dtype=np.uint8, count=width * height * 4, offset=start)
    bgra = bgra.reshape(height, width, 4)
    return np.ascontiguousarray(bgra[::-1][..., [2, 1, 0, 3]])
