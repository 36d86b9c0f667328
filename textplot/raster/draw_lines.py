from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from textplot.colors import Color

if TYPE_CHECKING:
    from textplot.raster.canvas import BrailleCanvas


def draw_polyline(dst: "BrailleCanvas", xs: Sequence[int], ys: Sequence[int], color: Color | None) -> None:
    if len(xs) < 2:
        return
    for i in range(len(xs) - 1):
        draw_segment(dst, int(xs[i]), int(ys[i]), int(xs[i + 1]), int(ys[i + 1]), color)


def draw_segment(dst: "BrailleCanvas", x0: int, y0: int, x1: int, y1: int, color: Color | None) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        dst.set_colored(x0, y0, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
