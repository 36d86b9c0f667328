"""Helpers for preparing data for charts."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from textplot.series import Point


def histogram(data: Sequence[tuple[float, float]], min: float, max: float, bins: int) -> list[Point]:
    """Group the y-values of ``data`` into ``bins`` equal-width buckets.

    Values outside ``[min, max]`` are ignored. Bucket indexes are truncated, so
    a value equal to ``max`` falls one past the last bucket and is dropped::

        >>> histogram([(0.0, 0.0), (9.0, 9.0), (10.0, 10.0)], 0.0, 10.0, 2)
        [Point(x=0.0, y=1.0), Point(x=5.0, y=1.0)]

    Each returned point is ``(bucket start, count)``.
    """
    if bins <= 0:
        raise ValueError("bins must be > 0")
    if max <= min:
        raise ValueError("max must be greater than min")

    step = (max - min) / bins
    ys = np.asarray([float(y) for _x, y in data], dtype=np.float64)
    ys = ys[(ys >= min) & (ys <= max)]
    bucket_ids = ((ys - min) / step).astype(np.int64)
    bucket_ids = bucket_ids[bucket_ids < bins]
    counts = np.bincount(bucket_ids, minlength=bins)
    return [Point(x=min + float(i) * step, y=float(c)) for i, c in enumerate(counts.tolist())]


def points_from_pairs(data: Sequence[tuple[float, float]]) -> list[Point]:
    return [Point(x=float(x), y=float(y)) for x, y in data]
