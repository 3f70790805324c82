"""Write the procedural favicon to disk, plus an enlarged PNG preview.

Usage:
    python generate_favicon.py [OUT_DIR] [--scale N]
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PIL import Image

from brandmark.render import decode_ico, get_icon

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("out_dir", nargs="?", default=".", type=Path)
    parser.add_argument("--scale", type=int, default=8, help="Preview upscale factor")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    out_dir: Path = args.out_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    data = get_icon()
    ico_path = out_dir / "favicon.ico"
    ico_path.write_bytes(data)

    rgba = decode_ico(data)
    img = Image.fromarray(rgba)
    preview = img.resize((img.width * args.scale, img.height * args.scale), Image.Resampling.NEAREST)
    png_path = out_dir / "favicon-preview.png"
    preview.save(png_path)

    logger.info("Wrote %s (%d bytes) and %s", ico_path, len(data), png_path)


if __name__ == "__main__":
    main()
