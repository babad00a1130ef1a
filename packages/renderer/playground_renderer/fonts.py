"""Font faces per style combination and glyph rasterization."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Protocol

from PIL import Image, ImageDraw, ImageFont

from .models import Glyph

STYLE_KEYS = ("regular", "bold", "italic", "bold_italic")


class FontLoadError(RuntimeError):
    pass


class GlyphSource(Protocol):
    def glyph(self, char: str) -> Glyph: ...


class FreeTypeFace:
    """Rasterizes glyphs from a Pillow FreeType font at a fixed size."""

    def __init__(self, font: ImageFont.FreeTypeFont, name: str = "") -> None:
        self.font = font
        self.name = name or " ".join(n for n in font.getname() if n)
        self._cache: dict[str, Glyph] = {}

    def glyph(self, char: str) -> Glyph:
        cached = self._cache.get(char)
        if cached is None:
            cached = self._rasterize(char)
            self._cache[char] = cached
        return cached

    def _rasterize(self, char: str) -> Glyph:
        advance = float(self.font.getlength(char))
        left, top, right, bottom = (int(v) for v in self.font.getbbox(char, anchor="ls"))
        width, height = right - left, bottom - top
        if width <= 0 or height <= 0:
            return Glyph(advance=advance)

        mask = Image.new("L", (width, height), 0)
        ImageDraw.Draw(mask).text((-left, -top), char, font=self.font, fill=255, anchor="ls")
        if mask.getbbox() is None:
            # Whitespace can report a box without any ink.
            return Glyph(advance=advance)
        return Glyph(
            advance=advance,
            offset_x=left,
            offset_y=top,
            width=width,
            height=height,
            mask=mask.tobytes(),
        )


class FontSet:
    """Style key -> face lookup; read-only while a pass is running."""

    def __init__(self, faces: Mapping[str, GlyphSource], point_size: float) -> None:
        missing = [key for key in STYLE_KEYS if key not in faces]
        if missing:
            raise FontLoadError(f"Font set is missing styles: {', '.join(missing)}")
        self.faces = dict(faces)
        self.point_size = float(point_size)

    def glyph_for(self, style_key: str, char: str) -> Glyph:
        return self.faces[style_key].glyph(char)

    @classmethod
    def load(cls, paths: Mapping[str, str | Path | None] | None, point_size: float = 16.0) -> FontSet:
        """Load one face per style.

        Styles without a configured file reuse the regular face when one is
        configured, otherwise Pillow's bundled font.
        """
        paths = paths or {}
        regular = _load_face(paths.get("regular"), point_size)
        faces: dict[str, GlyphSource] = {"regular": regular}
        for key in STYLE_KEYS[1:]:
            path = paths.get(key)
            faces[key] = _load_face(path, point_size) if path else regular
        return cls(faces, point_size)

    @classmethod
    def default(cls, point_size: float = 16.0) -> FontSet:
        return cls.load(None, point_size)


def _load_face(path: str | Path | None, point_size: float) -> FreeTypeFace:
    if not path:
        font = ImageFont.load_default(size=point_size)
        if not isinstance(font, ImageFont.FreeTypeFont):
            raise FontLoadError("Pillow was built without FreeType support")
        return FreeTypeFace(font, name="default")
    try:
        font = ImageFont.truetype(str(Path(path).expanduser()), point_size)
    except OSError as exc:
        raise FontLoadError(f"Error loading font {path}: {exc}") from exc
    return FreeTypeFace(font, name=Path(path).stem)
