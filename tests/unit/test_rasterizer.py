import sys
import unittest
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from playground_renderer.canvas import ImageCanvas
from playground_renderer.fonts import FontSet
from playground_renderer.models import Glyph
from playground_renderer.rasterizer import TextRasterizer, blend, render_text


class BlockFace:
    """6x10 block glyphs sitting on the baseline, advance 8; spaces have no ink."""

    def __init__(self, coverage=255):
        self.coverage = coverage
        self.requested = []

    def glyph(self, char):
        self.requested.append(char)
        if char == " ":
            return Glyph(advance=4.0)
        return Glyph(advance=8.0, offset_x=1, offset_y=-10, width=6, height=10, mask=bytes([self.coverage]) * 60)


def _font_set(coverage=255):
    faces = {key: BlockFace(coverage) for key in ("regular", "bold", "italic", "bold_italic")}
    return FontSet(faces, point_size=16.0), faces


def _canvas(color=(0, 0, 0), size=(120, 100)):
    return ImageCanvas(Image.new("RGB", size, color))


class BlendTests(unittest.TestCase):
    def test_blend_extremes(self):
        self.assertEqual(blend((10, 20, 30), (200, 100, 0), 0.0), (10, 20, 30))
        self.assertEqual(blend((10, 20, 30), (200, 100, 0), 1.0), (200, 100, 0))

    def test_blend_truncates(self):
        self.assertEqual(blend((0, 0, 0), (255, 255, 85), 0.5), (127, 127, 42))


class RasterizerTests(unittest.TestCase):
    def setUp(self):
        self.fonts, self.faces = _font_set()
        self.raster = TextRasterizer(self.fonts)

    def test_empty_text_leaves_canvas_unchanged(self):
        canvas = _canvas()
        before = canvas.image.tobytes()
        self.raster.render("", canvas)
        self.assertEqual(canvas.image.tobytes(), before)

    def test_glyph_position_and_default_color(self):
        canvas = _canvas()
        self.raster.render("A", canvas)
        # Pen at (10, 50); block spans x 11..16 and rows 40..49.
        self.assertEqual(canvas.get(11, 40), (255, 255, 255))
        self.assertEqual(canvas.get(16, 49), (255, 255, 255))
        self.assertEqual(canvas.get(10, 45), (0, 0, 0))
        self.assertEqual(canvas.get(17, 45), (0, 0, 0))
        self.assertEqual(canvas.get(11, 50), (0, 0, 0))

    def test_glyphs_advance_left_to_right(self):
        canvas = _canvas()
        self.raster.render("AB", canvas)
        self.assertEqual(canvas.get(18, 45), (0, 0, 0))
        self.assertEqual(canvas.get(19, 45), (255, 255, 255))
        self.assertEqual(canvas.get(24, 45), (255, 255, 255))

    def test_whitespace_advances_without_ink(self):
        canvas = _canvas()
        self.raster.render(" A", canvas)
        self.assertEqual(canvas.get(11, 45), (0, 0, 0))
        self.assertEqual(canvas.get(15, 45), (255, 255, 255))

    def test_color_marker(self):
        canvas = _canvas((255, 255, 255))
        self.raster.render("§eA", canvas)
        self.assertEqual(canvas.get(12, 45), (255, 255, 85))

    def test_reset_restores_white_and_regular_face(self):
        canvas = _canvas()
        self.raster.render("&l&eA&rB", canvas)
        self.assertEqual(canvas.get(12, 45), (255, 255, 85))
        self.assertEqual(canvas.get(20, 45), (255, 255, 255))
        self.assertEqual(self.faces["bold"].requested, ["A"])
        self.assertEqual(self.faces["regular"].requested, ["B"])

    def test_face_selection(self):
        self.raster.render("&oI&lJ&rK", _canvas())
        self.assertEqual(self.faces["italic"].requested, ["I"])
        self.assertEqual(self.faces["bold_italic"].requested, ["J"])
        self.assertEqual(self.faces["regular"].requested, ["K"])

    def test_escaped_ampersand_draws_ampersand(self):
        self.raster.render("\\&l", _canvas())
        self.assertEqual(self.faces["regular"].requested, ["&", "l"])
        self.assertEqual(self.faces["bold"].requested, [])

    def test_newline_resets_x_and_moves_down_one_line(self):
        canvas = _canvas()
        self.raster.render("A\\nB", canvas)
        self.assertAlmostEqual(self.raster.line_height, 16.0 * 1.15)
        # Second baseline is 50 + 18.4 = 68.4, so the block covers rows 58..67.
        self.assertEqual(canvas.get(11, 57), (0, 0, 0))
        self.assertEqual(canvas.get(11, 58), (255, 255, 255))
        self.assertEqual(canvas.get(11, 67), (255, 255, 255))
        self.assertEqual(canvas.get(19, 62), (0, 0, 0))

    def test_newline_ignores_style(self):
        for text in ("&l&o&mAB", "A"):
            canvas = _canvas()
            self.raster.render(text + "\\nC", canvas)
            self.assertEqual(canvas.get(10, 58), (0, 0, 0))
            self.assertEqual(canvas.get(11, 58), (255, 255, 255))

    def test_cursor_newline(self):
        cursor = self.raster.new_cursor()
        cursor.advance(30.5)
        cursor.newline()
        self.assertEqual(cursor.x, 10.0)
        self.assertAlmostEqual(cursor.y, 50.0 + 16.0 * 1.15)

    def test_partial_coverage_blends(self):
        fonts, _ = _font_set(coverage=128)
        canvas = _canvas()
        TextRasterizer(fonts).render("&eA", canvas)
        v = 128 / 255.0
        self.assertEqual(canvas.get(12, 45), (int(255 * v), int(255 * v), int(85 * v)))

    def test_strikethrough_and_underline_rows(self):
        fonts, _ = _font_set(coverage=128)
        canvas = _canvas()
        TextRasterizer(fonts).render("&m&nA", canvas)
        # Strike at int(50 - 16/3) = 44, underline at int(50 + 1.6) = 51.
        self.assertEqual(canvas.get(11, 44), (255, 255, 255))
        self.assertEqual(canvas.get(16, 44), (255, 255, 255))
        half = int(255 * (128 / 255.0))
        self.assertEqual(canvas.get(11, 45), (half, half, half))
        self.assertEqual(canvas.get(11, 51), (255, 255, 255))
        self.assertEqual(canvas.get(16, 51), (255, 255, 255))
        self.assertEqual(canvas.get(10, 51), (0, 0, 0))
        self.assertEqual(canvas.get(17, 51), (0, 0, 0))
        self.assertEqual(canvas.get(11, 52), (0, 0, 0))

    def test_overlays_skip_whitespace(self):
        canvas = _canvas()
        self.raster.render("&n ", canvas)
        self.assertIsNone(canvas.image.getbbox())

    def test_out_of_bounds_pixels_are_dropped(self):
        canvas = _canvas(size=(14, 45))
        self.raster.render("&m&nAAAA", canvas)
        self.assertEqual(canvas.get(11, 40), (255, 255, 255))
        self.assertEqual(canvas.get(13, 44), (255, 255, 255))

    def test_render_text_mutates_and_returns_image(self):
        image = Image.new("RGB", (60, 60), (0, 0, 0))
        out = render_text("A", self.fonts, image)
        self.assertIs(out, image)
        self.assertEqual(image.getpixel((12, 45)), (255, 255, 255))

    def test_render_image_leaves_background_untouched(self):
        background = Image.new("RGB", (60, 60), (0, 0, 0))
        out = self.raster.render_image("A", background)
        self.assertIsNone(background.getbbox())
        self.assertEqual(out.getpixel((12, 45)), (255, 255, 255))


class DefaultFontRenderTests(unittest.TestCase):
    def setUp(self):
        self.raster = TextRasterizer(FontSet.default(16.0))

    def test_yellow_text_on_white(self):
        canvas = _canvas((255, 255, 255), size=(80, 70))
        self.raster.render("§eHi", canvas)
        pixels = list(canvas.image.getdata())
        inked = [p for p in pixels if p != (255, 255, 255)]
        self.assertTrue(inked)
        self.assertTrue(all(p[0] >= 254 and p[1] >= 254 for p in inked))
        self.assertTrue(any(p[2] < 200 for p in inked))

    def test_rendering_is_deterministic(self):
        first = _canvas((30, 30, 30), size=(160, 90))
        second = _canvas((30, 30, 30), size=(160, 90))
        text = "&lBold &oboth &r&mstruck &nunder\\n&cred \\& \\\\"
        self.raster.render(text, first)
        self.raster.render(text, second)
        self.assertEqual(first.image.tobytes(), second.image.tobytes())

    def test_second_line_starts_one_line_lower(self):
        canvas = _canvas(size=(120, 100))
        self.raster.render("Hello\\nWorld", canvas)
        image = canvas.image
        first_line = image.crop((0, 0, 120, 53)).getbbox()
        second_line = image.crop((0, 53, 120, 100)).getbbox()
        self.assertIsNotNone(first_line)
        self.assertIsNotNone(second_line)
        # Both lines hold ascenders, so their tops differ by the line height (18.4 px).
        self.assertAlmostEqual((53 + second_line[1]) - first_line[1], 18, delta=1)
        # Both start back at the left margin.
        self.assertLess(first_line[0], 16)
        self.assertLess(second_line[0], 16)
        self.assertLessEqual(53 + second_line[3], 71)


if __name__ == "__main__":
    unittest.main()
