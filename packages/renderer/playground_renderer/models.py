"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

Rgb = tuple[int, int, int]

WHITE: Rgb = (255, 255, 255)


class StyleFlag(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"


@dataclass(frozen=True)
class StyleState:
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    color: Rgb = WHITE

    @property
    def font_key(self) -> str:
        if self.bold and self.italic:
            return "bold_italic"
        if self.bold:
            return "bold"
        if self.italic:
            return "italic"
        return "regular"

    def with_color(self, color: Rgb) -> StyleState:
        return replace(self, color=color)

    def with_flag(self, flag: StyleFlag) -> StyleState:
        return replace(self, **{flag.value: True})

    def reset(self) -> StyleState:
        return StyleState()


@dataclass
class Cursor:
    x: float
    y: float
    left_margin: float
    line_height: float

    def advance(self, amount: float) -> None:
        self.x += amount

    def newline(self) -> None:
        self.x = self.left_margin
        self.y += self.line_height


@dataclass(frozen=True)
class Glyph:
    """Rasterized coverage mask for one character.

    ``offset_x``/``offset_y`` locate the mask's top-left corner relative to the
    pen origin on the baseline. ``mask`` holds ``width * height`` 8-bit coverage
    values, row major.
    """

    advance: float
    offset_x: int = 0
    offset_y: int = 0
    width: int = 0
    height: int = 0
    mask: bytes = b""

    @property
    def has_bounds(self) -> bool:
        return self.width > 0 and self.height > 0

    def coverage(self, dx: int, dy: int) -> float:
        return self.mask[dy * self.width + dx] / 255.0
