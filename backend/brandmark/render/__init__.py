"""Procedural favicon rasterizer."""

from brandmark.render.canvas import blend_pixel, new_canvas
from brandmark.render.ico import IcoFormatError, decode_ico, encode_ico
from brandmark.render.icon import ICON_MEDIA_TYPE, ICON_SIZE, expected_icon_length, get_icon
from brandmark.render.scene import render_mark
from brandmark.render.sdf import smoothstep

__all__ = [
    "blend_pixel",
    "new_canvas",
    "IcoFormatError",
    "decode_ico",
    "encode_ico",
    "ICON_MEDIA_TYPE",
    "ICON_SIZE",
    "expected_icon_length",
    "get_icon",
    "render_mark",
    "smoothstep",
]
