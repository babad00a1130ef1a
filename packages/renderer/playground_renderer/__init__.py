"""Renderer package for formatting-code text images."""

from .canvas import Canvas, ImageCanvas
from .export import output_file_name, save_image_to_file
from .fonts import STYLE_KEYS, FontLoadError, FontSet, FreeTypeFace
from .models import Cursor, Glyph, StyleFlag, StyleState
from .palette import COLORS, help_text
from .pixels import BACKGROUND_NAMES, build_background, image_to_rgb32_le, load_background
from .rasterizer import TextRasterizer, blend, render_text
from .scanner import Action, ActionKind, apply_action, plain_text, scan

__all__ = [
    "Action",
    "ActionKind",
    "BACKGROUND_NAMES",
    "COLORS",
    "Canvas",
    "Cursor",
    "FontLoadError",
    "FontSet",
    "FreeTypeFace",
    "Glyph",
    "ImageCanvas",
    "STYLE_KEYS",
    "StyleFlag",
    "StyleState",
    "TextRasterizer",
    "apply_action",
    "blend",
    "build_background",
    "help_text",
    "image_to_rgb32_le",
    "load_background",
    "output_file_name",
    "plain_text",
    "render_text",
    "save_image_to_file",
    "scan",
]
