from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Any, Callable, TextIO

import numpy as np

from textplot.adapters import points_from_xy
from textplot.axis_values import REAL, AxisType, RealAxis
from textplot.colors import Color, PixelColor, coerce_color, colorize
from textplot.errors import PlotDataError
from textplot.raster import BrailleCanvas, draw_markers, draw_polyline
from textplot.scales import Scale, is_normal, round_half_away
from textplot.series import DISCRETE_SHAPES, Shape
from textplot.style import ChartStyle


LOGGER = logging.getLogger(__name__)
MIN_CHART_SIZE = 32


def _contiguous_true_runs(mask: np.ndarray) -> list[tuple[int, int]]:
    idx = np.flatnonzero(mask)
    if idx.size == 0:
        return []
    runs: list[tuple[int, int]] = []
    start = int(idx[0])
    prev = int(idx[0])
    for v in idx[1:]:
        iv = int(v)
        if iv == prev + 1:
            prev = iv
            continue
        runs.append((start, prev + 1))
        start = iv
        prev = iv
    runs.append((start, prev + 1))
    return runs


def _sample(func: Callable[[float], float], x: float) -> float:
    # math.log(-1) or 1/0 raise where IEEE arithmetic would yield NaN/inf.
    try:
        value = func(x)
    except (ArithmeticError, ValueError):
        return math.nan
    # (-1.0) ** 0.5 is complex in Python, NaN in IEEE pow.
    if isinstance(value, complex):
        return math.nan
    return float(value)


@dataclass
class Chart:
    """Braille line chart over a fixed x domain with an auto-ranged y axis.

    Shapes are registered with :meth:`lineplot` / :meth:`lineplot_with_tags`;
    every registration widens ``ymin``/``ymax`` to cover the values the shape
    shows inside ``[xmin, xmax]``. Registration returns the chart so calls can
    be chained::

        Chart.default().lineplot(Continuous(math.atan)).display()

    Rendering redraws the canvas from scratch, so :meth:`display` can be called
    repeatedly with identical output.
    """

    width: int
    height: int
    xmin: float
    xmax: float
    x_axis: AxisType = REAL
    y_axis: AxisType = REAL
    style: ChartStyle = field(default_factory=ChartStyle)

    ymin: float | None = field(default=None, init=False)
    ymax: float | None = field(default=None, init=False)
    _shapes: list[tuple[Shape, Color]] = field(default_factory=list, init=False, repr=False)
    _labels: list[tuple[str, Color]] = field(default_factory=list, init=False, repr=False)
    _borders: bool = field(default=False, init=False, repr=False)
    canvas: BrailleCanvas = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width < MIN_CHART_SIZE:
            raise ValueError(f"width should be at least {MIN_CHART_SIZE}, {self.width} is provided")
        if self.height < MIN_CHART_SIZE:
            raise ValueError(f"height should be at least {MIN_CHART_SIZE}, {self.height} is provided")
        self.width = int(self.width)
        self.height = int(self.height)
        self.xmin = float(self.xmin)
        self.xmax = float(self.xmax)
        self.canvas = BrailleCanvas(self.width, self.height)

    @classmethod
    def default(cls, **kwargs: Any) -> "Chart":
        return cls(120, 60, -10.0, 10.0, **kwargs)

    @property
    def shapes(self) -> tuple[tuple[Shape, Color], ...]:
        return tuple(self._shapes)

    @property
    def labels(self) -> tuple[tuple[str, Color], ...]:
        return tuple(self._labels)

    def lineplot(self, shape: Shape) -> "Chart":
        return self.lineplot_with_tags(shape, None, PixelColor.WHITE)

    def lineplot_with_tags(self, shape: Shape, label: str | None = None, color: Any = PixelColor.WHITE) -> "Chart":
        color = coerce_color(color)
        self._shapes.append((shape, color))
        if label is not None:
            self._labels.append((label, color))

        ys = self._contributing_ys(shape)
        if not ys:
            LOGGER.warning(
                "%s shape has no visible values in [%s, %s]; y-range is extended to 0.0",
                shape.kind,
                self.xmin,
                self.xmax,
            )
        lo = min(ys) if ys else 0.0
        hi = max(ys) if ys else 0.0
        self.ymin = lo if self.ymin is None else min(self.ymin, lo)
        self.ymax = hi if self.ymax is None else max(self.ymax, hi)
        LOGGER.debug(
            "registered %s shape (%d values); y-range now [%s, %s]",
            shape.kind,
            len(ys),
            self.ymin,
            self.ymax,
        )
        return self

    def plot_xy(
        self,
        y: Any = None,
        *,
        x: Any = None,
        data: Any = None,
        kind: str = "lines",
        label: str | None = None,
        color: Any = PixelColor.WHITE,
    ) -> "Chart":
        """Register array-like samples (lists, numpy, pandas, torch) as a discrete shape.

        ``kind`` picks the shape: ``"points"``, ``"lines"``, ``"steps"`` or ``"bars"``.
        Samples arrive as plain floats, so both axes should be real axes.
        """
        try:
            shape_cls = DISCRETE_SHAPES[kind]
        except KeyError as exc:
            raise PlotDataError(f"unsupported shape kind: {kind}") from exc
        return self.lineplot_with_tags(shape_cls(points_from_xy(y, x=x, data=data)), label, color)

    def _contributing_ys(self, shape: Shape) -> list[float]:
        if shape.kind == "continuous":
            x_scale = self._x_scale()
            ys: list[float] = []
            for i in range(self.width):
                y = _sample(shape.func, x_scale.inv_linear(float(i)))
                if is_normal(y):
                    ys.append(y)
            return ys
        return [y for x, y in self._finite_points(shape) if self.xmin <= x <= self.xmax]

    def _finite_points(self, shape: Shape) -> list[tuple[float, float]]:
        out: list[tuple[float, float]] = []
        for point in shape.points:
            x = self.x_axis.to_float(point.x)
            y = self.y_axis.to_float(point.y)
            if math.isfinite(x) and math.isfinite(y):
                out.append((x, y))
        return out

    def _x_scale(self) -> Scale:
        return Scale((self.xmin, self.xmax), (0.0, float(self.width)))

    def _y_scale(self) -> Scale | None:
        # Equal bounds (a constant series) leave nothing to stretch; every y lands on the baseline.
        if self.ymin is None or self.ymax is None or self.ymin == self.ymax:
            return None
        return Scale((self.ymin, self.ymax), (0.0, float(self.height)))

    @staticmethod
    def _scale_y(y_scale: Scale | None, y: float) -> float:
        return y_scale.linear(y) if y_scale is not None else 0.0

    def render(self) -> None:
        if not self._shapes:
            raise PlotDataError("cannot render chart without shapes")
        LOGGER.debug("rendering %d shapes on %dx%d canvas", len(self._shapes), self.width, self.height)
        self.canvas.clear()
        if self._borders:
            self._draw_borders()
        self.figures()
        self.axis()

    def figures(self) -> None:
        x_scale = self._x_scale()
        y_scale = self._y_scale()
        for shape, color in self._shapes:
            if shape.kind == "continuous":
                self._draw_continuous(shape, color, x_scale, y_scale)
                continue

            xs, ys = self._map_points(shape, x_scale, y_scale)
            if shape.kind == "lines":
                draw_polyline(self.canvas, xs, ys, color)
            elif shape.kind == "points":
                draw_markers(self.canvas, xs, ys, color)
            elif shape.kind == "steps":
                for i in range(len(xs) - 1):
                    x1, y1, x2, y2 = xs[i], ys[i], xs[i + 1], ys[i + 1]
                    self.canvas.line_colored(x1, y2, x2, y2, color)
                    self.canvas.line_colored(x1, y1, x1, y2, color)
            elif shape.kind == "bars":
                for i in range(len(xs) - 1):
                    x1, y1, x2, y2 = xs[i], ys[i], xs[i + 1], ys[i + 1]
                    self.canvas.line_colored(x1, y2, x2, y2, color)
                    self.canvas.line_colored(x1, y1, x1, y2, color)
                    self.canvas.line_colored(x1, self.height, x1, y1, color)
                    self.canvas.line_colored(x2, self.height, x2, y2, color)
            else:
                raise PlotDataError(f"unsupported shape kind: {shape.kind}")

    def _draw_continuous(self, shape: Shape, color: Color, x_scale: Scale, y_scale: Scale | None) -> None:
        cols = np.arange(self.width, dtype=np.int32)
        rows = np.zeros(self.width, dtype=np.int32)
        mask = np.zeros(self.width, dtype=bool)
        for i in range(self.width):
            y = _sample(shape.func, x_scale.inv_linear(float(i)))
            if is_normal(y):
                mask[i] = True
                rows[i] = self.height - round_half_away(self._scale_y(y_scale, y))
        for start, end in _contiguous_true_runs(mask):
            if end - start == 1:
                self.canvas.set_colored(int(cols[start]), int(rows[start]), color)
            else:
                draw_polyline(self.canvas, cols[start:end], rows[start:end], color)

    def _map_points(self, shape: Shape, x_scale: Scale, y_scale: Scale | None) -> tuple[list[int], list[int]]:
        xs: list[int] = []
        ys: list[int] = []
        for x, y in self._finite_points(shape):
            if x < self.xmin or x > self.xmax:
                continue
            i = round_half_away(x_scale.linear(x))
            j = round_half_away(self._scale_y(y_scale, y))
            if i <= self.width and j <= self.height:
                xs.append(i)
                ys.append(self.height - j)
        return xs, ys

    def axis(self) -> None:
        if self.xmin <= 0.0 <= self.xmax:
            self.vline(int(self._x_scale().linear(0.0)))
        if self.ymin is not None and self.ymax is not None and self.ymin <= 0.0 <= self.ymax:
            self.hline(int(self._scale_y(self._y_scale(), 0.0)))

    def vline(self, i: int) -> None:
        if 0 <= i <= self.width:
            for j in range(0, self.height + 1, 3):
                self.canvas.set(i, j)

    def hline(self, j: int) -> None:
        if 0 <= j <= self.height:
            for i in range(0, self.width + 1, 3):
                self.canvas.set(i, self.height - j)

    def borders(self) -> None:
        self._borders = True
        self._draw_borders()

    def _draw_borders(self) -> None:
        self.vline(0)
        self.vline(self.width)
        self.hline(0)
        self.hline(self.height)

    def display_lines(self) -> list[str]:
        self.render()
        if self.ymin is None or self.ymax is None:
            raise PlotDataError("chart has no y-range to label")
        precision = self.style.label_precision
        ymax_label = self.y_axis.format(self.y_axis.from_float(self.ymax), precision)
        ymin_label = self.y_axis.format(self.y_axis.from_float(self.ymin), precision)

        rows = self.canvas.rows(colorize_cells=self.style.colorize)
        out: list[str] = []
        for i, row in enumerate(rows):
            if i == 0:
                out.append(f"{row} {ymax_label}")
            elif i == len(rows) - 1:
                out.append(f"{row} {ymin_label}")
            else:
                out.append(row)
        out.append(self._x_label_line())
        return out

    def _x_label_line(self) -> str:
        precision = self.style.label_precision
        if isinstance(self.x_axis, RealAxis):
            pad = self.width // 2 - 3
            return f"{self.xmin:<{pad}.{precision}f}{self.xmax:.{precision}f}"
        # Balance arbitrary label widths so xmax ends near the right edge.
        left = self.x_axis.format(self.x_axis.from_float(self.xmin), precision)
        right = self.x_axis.format(self.x_axis.from_float(self.xmax), precision)
        spacing = max(0, self.width // 2 - (len(left) + len(right)))
        return left.ljust(spacing) + " ".ljust(spacing) + right

    def display(self, file: TextIO | None = None) -> None:
        for line in self.display_lines():
            print(line, file=file)

    def to_string(self) -> str:
        return "\n".join(self.display_lines())

    def legend_lines(self) -> list[str]:
        out = [""]
        for label, color in self._labels:
            out.append(colorize(f"{label}: {self.style.legend_swatch}", color, enabled=self.style.colorize))
        return out

    def legends(self, file: TextIO | None = None) -> None:
        for line in self.legend_lines():
            print(line, file=file)

    def nice(self, file: TextIO | None = None) -> None:
        self.borders()
        self.display(file=file)
        self.legends(file=file)

    def frame(self) -> str:
        return self.canvas.frame(colorize_cells=self.style.colorize)
