from __future__ import annotations

import unittest

import numpy as np

from textplot.colors import RESET, PixelColor, TrueColor, coerce_color, colorize
from textplot.errors import PlotDataError
from textplot.raster import BRAILLE_BLANK, BrailleCanvas, draw_markers, draw_polyline


class BrailleCanvasTests(unittest.TestCase):
    def test_cell_grid_covers_inclusive_dot_bounds(self) -> None:
        canvas = BrailleCanvas(120, 60)
        self.assertEqual((canvas.rows_count, canvas.cols), (16, 61))
        canvas.set(120, 60)
        self.assertTrue(canvas.is_set(120, 60))

    def test_blank_canvas_renders_blank_braille(self) -> None:
        canvas = BrailleCanvas(4, 4)
        blank = chr(BRAILLE_BLANK)
        self.assertEqual(canvas.rows(), [blank * 3, blank * 3])

    def test_dot_bits_follow_braille_layout(self) -> None:
        canvas = BrailleCanvas(4, 4)
        canvas.set(0, 0)
        canvas.set(1, 3)
        self.assertEqual(int(canvas.codes()[0, 0]), BRAILLE_BLANK + 0x01 + 0x80)
        canvas.clear()
        canvas.set(0, 3)
        canvas.set(1, 0)
        self.assertEqual(canvas.rows()[0][0], chr(BRAILLE_BLANK + 0x40 + 0x08))

    def test_out_of_bounds_writes_are_ignored(self) -> None:
        canvas = BrailleCanvas(8, 8)
        canvas.set(-1, 0)
        canvas.set_colored(500, 500, PixelColor.RED)
        self.assertFalse(np.any(canvas.dots))

    def test_colored_cells_are_wrapped_in_sgr(self) -> None:
        canvas = BrailleCanvas(4, 4)
        canvas.set_colored(0, 0, PixelColor.RED)
        glyph = chr(BRAILLE_BLANK + 0x01)
        self.assertTrue(canvas.rows()[0].startswith(f"\033[31m{glyph}{RESET}"))
        self.assertEqual(canvas.rows(colorize_cells=False)[0][0], glyph)
        self.assertEqual(canvas.color_at(1, 2), PixelColor.RED)

    def test_last_colored_write_wins_per_cell(self) -> None:
        canvas = BrailleCanvas(4, 4)
        canvas.set_colored(0, 0, PixelColor.RED)
        canvas.set_colored(1, 1, TrueColor(1, 2, 3))
        self.assertEqual(canvas.color_at(0, 0), TrueColor(1, 2, 3))
        self.assertIn("\033[38;2;1;2;3m", canvas.frame())

    def test_uncolored_set_keeps_plain_glyph(self) -> None:
        canvas = BrailleCanvas(4, 4)
        canvas.set(2, 0)
        self.assertNotIn("\033[", canvas.frame())
        self.assertIsNone(canvas.color_at(2, 0))

    def test_clear_drops_dots_and_colors(self) -> None:
        canvas = BrailleCanvas(8, 8)
        canvas.line_colored(0, 0, 8, 8, PixelColor.GREEN)
        canvas.clear()
        self.assertFalse(np.any(canvas.dots))
        self.assertFalse(np.any(canvas.cell_colors))

    def test_line_includes_both_endpoints(self) -> None:
        canvas = BrailleCanvas(40, 40)
        canvas.line_colored(3, 30, 33, 5, None)
        self.assertTrue(canvas.is_set(3, 30))
        self.assertTrue(canvas.is_set(33, 5))
        # one dot per step along the major axis
        self.assertEqual(int(np.count_nonzero(canvas.dots)), 31)

    def test_polyline_and_markers(self) -> None:
        canvas = BrailleCanvas(20, 20)
        draw_polyline(canvas, [0, 10, 20], [0, 0, 10], PixelColor.BLUE)
        self.assertTrue(canvas.is_set(5, 0))
        self.assertTrue(canvas.is_set(15, 5))

        markers = BrailleCanvas(20, 20)
        draw_markers(markers, [0, 10, 20], [0, 0, 10], PixelColor.BLUE)
        self.assertEqual(int(np.count_nonzero(markers.dots)), 3)

    def test_single_point_polyline_draws_nothing(self) -> None:
        canvas = BrailleCanvas(20, 20)
        draw_polyline(canvas, [4], [4], None)
        self.assertFalse(np.any(canvas.dots))


class ColorTests(unittest.TestCase):
    def test_coerce_color_variants(self) -> None:
        self.assertIs(coerce_color(PixelColor.CYAN), PixelColor.CYAN)
        self.assertIs(coerce_color("bright-red"), PixelColor.BRIGHT_RED)
        self.assertEqual(coerce_color((255, 170, 70)), TrueColor(255, 170, 70))
        self.assertEqual(coerce_color((255, 170, 70, 128)), TrueColor(255, 170, 70))

    def test_coerce_color_rejects_unknown_values(self) -> None:
        with self.assertRaises(PlotDataError):
            coerce_color("ultraviolet")
        with self.assertRaises(PlotDataError):
            coerce_color((300, 0, 0))
        with self.assertRaises(PlotDataError):
            coerce_color(7)

    def test_colorize_respects_enabled_flag(self) -> None:
        self.assertEqual(colorize("a", PixelColor.BLUE), f"\033[34ma{RESET}")
        self.assertEqual(colorize("a", PixelColor.BLUE, enabled=False), "a")
        self.assertEqual(colorize("a", None), "a")


if __name__ == "__main__":
    unittest.main()
