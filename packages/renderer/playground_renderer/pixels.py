"""Background images and pixel packing for on-screen preview buffers."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw


def rgb888_bytes_to_rgb32_le(rgb: bytes) -> bytes:
    """Pack RGB888 triples as little-endian 0xFFRRGGBB words (Qt RGB32 layout)."""
    if len(rgb) % 3 != 0:
        raise ValueError("RGB888 data length must be divisible by 3")
    arr = np.frombuffer(rgb, dtype=np.uint8).reshape((-1, 3))
    r = arr[:, 0].astype(np.uint32)
    g = arr[:, 1].astype(np.uint32)
    b = arr[:, 2].astype(np.uint32)
    packed = (np.uint32(0xFF) << 24) | (r << 16) | (g << 8) | b
    return packed.astype("<u4").tobytes()


def image_to_rgb32_le(image: Image.Image) -> bytes:
    if image.mode != "RGB":
        image = image.convert("RGB")
    return rgb888_bytes_to_rgb32_le(image.tobytes())


def _vertical_ramp(width: int, height: int) -> Image.Image:
    return Image.linear_gradient("L").resize((width, height))


def _blend_vertical(top: tuple[int, int, int], bottom: tuple[int, int, int], width: int, height: int) -> Image.Image:
    return Image.composite(
        Image.new("RGB", (width, height), bottom),
        Image.new("RGB", (width, height), top),
        _vertical_ramp(width, height),
    )


def _tiles(width: int, height: int, cell: int, pick) -> Image.Image:
    img = Image.new("RGB", (width, height))
    draw = ImageDraw.Draw(img)
    for row in range(0, height, cell):
        for col in range(0, width, cell):
            draw.rectangle((col, row, col + cell - 1, row + cell - 1), fill=pick(col // cell, row // cell))
    return img


_BACKGROUNDS = {
    "black": lambda w, h: Image.new("RGB", (w, h), (0, 0, 0)),
    "white": lambda w, h: Image.new("RGB", (w, h), (255, 255, 255)),
    "slate": lambda w, h: _blend_vertical((10, 15, 29), (19, 27, 51), w, h),
    "dirt": lambda w, h: _tiles(w, h, 8, lambda c, r: (134, 96, 67) if (c + r) % 2 == 0 else (121, 85, 58)),
    "stone": lambda w, h: _tiles(w, h, 8, lambda c, r: (125, 125, 125) if (c * 7 + r * 3) % 5 else (110, 110, 110)),
    "h-gradient": lambda w, h: _vertical_ramp(h, w).transpose(Image.Transpose.ROTATE_90).convert("RGB"),
    "v-gradient": lambda w, h: _vertical_ramp(w, h).convert("RGB"),
    "checkerboard": lambda w, h: _tiles(w, h, 24, lambda c, r: (255, 255, 255) if (c + r) % 2 == 0 else (0, 0, 0)),
}

BACKGROUND_NAMES = tuple(_BACKGROUNDS)


def build_background(name: str, width: int, height: int) -> Image.Image:
    fill = _BACKGROUNDS.get(name)
    if fill is None:
        raise ValueError(f"Unknown background: {name}")
    return fill(width, height)


def load_background(image_path: str | Path | None, name: str, width: int, height: int) -> Image.Image:
    """Open ``image_path`` as RGB when given, otherwise build the named background."""
    if image_path:
        with Image.open(Path(image_path).expanduser()) as img:
            return img.convert("RGB")
    return build_background(name, width, height)
