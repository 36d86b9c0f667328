from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from textplot.colors import Color

if TYPE_CHECKING:
    from textplot.raster.canvas import BrailleCanvas


def draw_markers(dst: "BrailleCanvas", xs: Sequence[int], ys: Sequence[int], color: Color | None) -> None:
    for x, y in zip(xs, ys, strict=False):
        dst.set_colored(int(x), int(y), color)
