from __future__ import annotations

import numpy as np

from textplot.colors import Color, colorize
from textplot.raster.draw_lines import draw_segment


CELL_W = 2
CELL_H = 4
BRAILLE_BLANK = 0x2800
# BRAILLE_BITS[dy, dx] is the code point offset of that dot inside a cell.
BRAILLE_BITS = np.asarray(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.int32,
)


class BrailleCanvas:
    """Dot matrix addressed in braille dots, 2x4 dots per character cell.

    Dot coordinates ``0..=width`` and ``0..=height`` are valid; anything else is
    ignored on write. Each cell remembers the color of its last colored write.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = int(width)
        self.height = int(height)
        self.cols = self.width // CELL_W + 1
        self.rows_count = self.height // CELL_H + 1
        self.dots = np.zeros((self.rows_count * CELL_H, self.cols * CELL_W), dtype=bool)
        # 0 means "no color"; otherwise an index into _palette shifted by one.
        self.cell_colors = np.zeros((self.rows_count, self.cols), dtype=np.int32)
        self._palette: list[Color] = []

    def clear(self) -> None:
        self.dots[:, :] = False
        self.cell_colors[:, :] = 0
        self._palette.clear()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.dots.shape[1] and 0 <= y < self.dots.shape[0]

    def set(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            return
        self.dots[y, x] = True

    def set_colored(self, x: int, y: int, color: Color | None) -> None:
        if not self.in_bounds(x, y):
            return
        self.dots[y, x] = True
        if color is not None:
            self.cell_colors[y // CELL_H, x // CELL_W] = self._color_index(color)

    def line_colored(self, x1: int, y1: int, x2: int, y2: int, color: Color | None) -> None:
        draw_segment(self, x1, y1, x2, y2, color)

    def is_set(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and bool(self.dots[y, x])

    def color_at(self, x: int, y: int) -> Color | None:
        if not self.in_bounds(x, y):
            return None
        idx = int(self.cell_colors[y // CELL_H, x // CELL_W])
        return self._palette[idx - 1] if idx else None

    def codes(self) -> np.ndarray:
        cells = self.dots.reshape(self.rows_count, CELL_H, self.cols, CELL_W).astype(np.int32)
        return BRAILLE_BLANK + np.einsum("rhcw,hw->rc", cells, BRAILLE_BITS)

    def rows(self, *, colorize_cells: bool = True) -> list[str]:
        codes = self.codes()
        out: list[str] = []
        for r in range(self.rows_count):
            parts: list[str] = []
            for c in range(self.cols):
                glyph = chr(int(codes[r, c]))
                idx = int(self.cell_colors[r, c])
                if idx and codes[r, c] != BRAILLE_BLANK:
                    glyph = colorize(glyph, self._palette[idx - 1], enabled=colorize_cells)
                parts.append(glyph)
            out.append("".join(parts))
        return out

    def frame(self, *, colorize_cells: bool = True) -> str:
        return "\n".join(self.rows(colorize_cells=colorize_cells))

    def _color_index(self, color: Color) -> int:
        try:
            return self._palette.index(color) + 1
        except ValueError:
            self._palette.append(color)
            return len(self._palette)
