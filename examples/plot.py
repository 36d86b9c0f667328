from __future__ import annotations

import math

import numpy as np

from textplot import Chart, Continuous, Lines, Points, Steps
from textplot.utils import points_from_pairs


DATA = [
    (-10.0, -1.0),
    (0.0, 0.0),
    (1.0, 1.0),
    (2.0, 0.0),
    (3.0, 3.0),
    (4.0, 4.0),
    (5.0, 3.0),
    (9.0, 1.0),
    (10.0, -1.0),
]


def main() -> None:
    # Any real valued function works.
    print("y = atan(x)")
    Chart.default().lineplot(Continuous(math.atan)).display()

    # NaN, infinities and raised math errors leave gaps instead of failing.
    print("\ny = sin(x) / x")
    Chart.default().lineplot(Continuous(lambda x: math.sin(x) / x)).display()

    print("\ny = ln(x)")
    Chart.default().lineplot(Continuous(math.log)).display()

    # Several functions on one chart; the text resolution is low, so keep it to a few.
    print("\ny = cos(x), y = sin(x) / 2")
    (
        Chart(180, 60, -5.0, 5.0)
        .lineplot(Continuous(math.cos))
        .lineplot(Continuous(lambda x: math.sin(x) / 2.0))
        .display()
    )

    points = points_from_pairs(DATA)

    print("\ny = interpolated points")
    Chart.default().lineplot(Lines(points)).display()

    print("\ny = staircase points")
    Chart.default().lineplot(Steps(points)).display()

    print("\ny = scatter plot")
    Chart.default().lineplot(Points(points)).display()

    xs = np.linspace(-10.0, 10.0, 81)
    print("\ny = damped sine sampled with numpy")
    Chart.default().plot_xy(np.exp(-np.abs(xs) / 5.0) * np.sin(xs), x=xs, kind="points").display()


if __name__ == "__main__":
    main()
