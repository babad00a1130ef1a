"""Pixel canvas abstraction over Pillow images."""

from __future__ import annotations

from typing import Protocol

from PIL import Image

from .models import Rgb


class Canvas(Protocol):
    def width(self) -> int: ...

    def height(self) -> int: ...

    def get(self, x: int, y: int) -> Rgb: ...

    def set(self, x: int, y: int, rgb: Rgb) -> None: ...


class ImageCanvas:
    """Canvas backed by an RGB Pillow image, mutated in place."""

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGB":
            raise ValueError(f"ImageCanvas needs an RGB image, got {image.mode}")
        self.image = image
        self._pix = image.load()

    def width(self) -> int:
        return self.image.width

    def height(self) -> int:
        return self.image.height

    def get(self, x: int, y: int) -> Rgb:
        return self._pix[x, y]

    def set(self, x: int, y: int, rgb: Rgb) -> None:
        self._pix[x, y] = rgb
