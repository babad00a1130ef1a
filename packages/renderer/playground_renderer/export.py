"""Saving rendered images to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

_log = logging.getLogger("playground.renderer")


def output_file_name(name: str) -> str:
    name = name.strip() or "render"
    return name if name.lower().endswith(".png") else f"{name}.png"


def save_image_to_file(image: Image.Image, name: str, output_dir: str | Path = "output") -> Path:
    out_dir = Path(output_dir).expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)
    path = (out_dir / output_file_name(name)).resolve()
    image.save(path, format="PNG")
    _log.info("image saved path=%s", path, extra={"event": "image_saved"})
    return path
