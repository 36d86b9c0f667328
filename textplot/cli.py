from __future__ import annotations

import argparse
from dataclasses import replace
import logging
import sys
from typing import Sequence

from textplot.chart import MIN_CHART_SIZE, Chart
from textplot.expression import FormulaError, compile_formula
from textplot.series import Continuous
from textplot.style import ChartStyle


def _chart_size(raw: str) -> int:
    value = int(raw)
    if value < MIN_CHART_SIZE:
        raise argparse.ArgumentTypeError(f"must be at least {MIN_CHART_SIZE}, {value} is provided")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="textplot", description="Plot y = f(x) in the terminal.")
    parser.add_argument("formula", metavar="FORMULA", help="Formula to plot, e.g. 'sin(x) / x'.")
    parser.add_argument("--xmin", type=float, default=-10.0, help="X-axis start value.")
    parser.add_argument("--xmax", type=float, default=10.0, help="X-axis end value.")
    parser.add_argument("-w", "--width", type=_chart_size, default=180, help="Canvas width in points.")
    parser.add_argument("-H", "--height", type=_chart_size, default=60, help="Canvas height in points.")
    parser.add_argument("--nice", action="store_true", help="Draw borders around the chart.")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log chart registration and rendering.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        func = compile_formula(args.formula)
    except FormulaError as exc:
        print(exc, file=sys.stderr)
        return 1

    style = ChartStyle.from_env()
    if args.no_color:
        style = replace(style, colorize=False)

    chart = Chart(args.width, args.height, args.xmin, args.xmax, style=style)
    chart.lineplot(Continuous(func))
    print(f"y = {args.formula}")
    if args.nice:
        chart.nice()
    else:
        chart.display()
    return 0
