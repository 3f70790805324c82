"""get_icon() — the encoded favicon, generated once per process."""

from __future__ import annotations

import functools
import logging
import time

from brandmark.render.canvas import DEFAULT_SIZE
from brandmark.render.ico import IcoLayout, encode_ico
from brandmark.render.scene import render_mark

logger = logging.getLogger(__name__)

ICON_SIZE = DEFAULT_SIZE
ICON_MEDIA_TYPE = "image/x-icon"


def expected_icon_length(size: int = ICON_SIZE) -> int:
    """6 + 16 + 40 + size*size*4 + ceil(size/32)*4*size."""
    return IcoLayout.for_size(size).file_bytes


@functools.lru_cache(maxsize=1)
def get_icon() -> bytes:
    """Complete ICO file bytes for the site mark.

    Pure and deterministic, so the first result is kept for the life of the
    process. Parallel cold calls may each render; the outcome is identical.
    An exception during rendering is not cached.
    """
    start = time.perf_counter()
    data = encode_ico(render_mark())
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Generated favicon: %d bytes in %.1f ms", len(data), elapsed)
    return data
