"""Styled text rasterizer: draws marked-up text glyph by glyph onto a canvas."""

from __future__ import annotations

import math

from PIL import Image

from .canvas import Canvas, ImageCanvas
from .fonts import FontSet
from .models import Cursor, Rgb, StyleState
from .scanner import ActionKind, apply_action, iter_actions

DEFAULT_LEFT_MARGIN = 10.0
DEFAULT_BASELINE = 50.0
DEFAULT_LINE_SPACING = 1.15


def blend(background: Rgb, color: Rgb, coverage: float) -> Rgb:
    return (
        int(background[0] * (1.0 - coverage) + color[0] * coverage),
        int(background[1] * (1.0 - coverage) + color[1] * coverage),
        int(background[2] * (1.0 - coverage) + color[2] * coverage),
    )


class TextRasterizer:
    """Walks the scanner's actions and rasterizes glyphs with the running style."""

    def __init__(
        self,
        fonts: FontSet,
        left_margin: float = DEFAULT_LEFT_MARGIN,
        baseline: float = DEFAULT_BASELINE,
        line_spacing: float = DEFAULT_LINE_SPACING,
    ) -> None:
        self.fonts = fonts
        self.left_margin = left_margin
        self.baseline = baseline
        self.line_spacing = line_spacing

    @property
    def point_size(self) -> float:
        return self.fonts.point_size

    @property
    def line_height(self) -> float:
        return self.point_size * self.line_spacing

    def new_cursor(self) -> Cursor:
        return Cursor(x=self.left_margin, y=self.baseline, left_margin=self.left_margin, line_height=self.line_height)

    def render(self, text: str, canvas: Canvas) -> Canvas:
        style = StyleState()
        cursor = self.new_cursor()
        for action in iter_actions(text):
            if action.kind is ActionKind.GLYPH:
                self.draw_glyph(canvas, action.char or "", cursor, style)
            elif action.kind is ActionKind.NEWLINE:
                cursor.newline()
            else:
                style = apply_action(style, action)
        return canvas

    def render_image(self, text: str, background: Image.Image) -> Image.Image:
        image = background.convert("RGB") if background.mode != "RGB" else background.copy()
        self.render(text, ImageCanvas(image))
        return image

    def draw_glyph(self, canvas: Canvas, char: str, cursor: Cursor, style: StyleState) -> None:
        glyph = self.fonts.glyph_for(style.font_key, char)

        if glyph.has_bounds:
            min_x = math.floor(cursor.x) + glyph.offset_x
            min_y = math.floor(cursor.y) + glyph.offset_y
            width, height = canvas.width(), canvas.height()

            for dy in range(glyph.height):
                py = min_y + dy
                if py < 0 or py >= height:
                    continue
                for dx in range(glyph.width):
                    px = min_x + dx
                    if px < 0 or px >= width:
                        continue
                    v = glyph.coverage(dx, dy)
                    if v <= 0.0:
                        continue
                    canvas.set(px, py, blend(canvas.get(px, py), style.color, v))

            max_x = min_x + glyph.width
            if style.strikethrough:
                self._hline(canvas, min_x, max_x, cursor.y - self.point_size / 3.0, style.color)
            if style.underline:
                self._hline(canvas, min_x, max_x, cursor.y + self.point_size / 10.0, style.color)

        cursor.advance(glyph.advance)

    @staticmethod
    def _hline(canvas: Canvas, x0: int, x1: int, y: float, color: Rgb) -> None:
        if y < 0 or y >= canvas.height():
            return
        row = int(y)
        for px in range(max(x0, 0), min(x1, canvas.width())):
            canvas.set(px, row, color)


def render_text(
    text: str,
    fonts: FontSet,
    image: Image.Image,
    left_margin: float = DEFAULT_LEFT_MARGIN,
    baseline: float = DEFAULT_BASELINE,
    line_spacing: float = DEFAULT_LINE_SPACING,
) -> Image.Image:
    """Render ``text`` onto ``image`` in place and return it."""
    rasterizer = TextRasterizer(fonts, left_margin=left_margin, baseline=baseline, line_spacing=line_spacing)
    rasterizer.render(text, ImageCanvas(image))
    return image
