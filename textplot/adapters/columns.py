"""Turn array-like columns into chart points.

Lists, numpy arrays, pandas Series and torch tensors are accepted for either
coordinate. With ``data=`` a DataFrame, ``x`` and ``y`` may name its columns.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from textplot.errors import PlotDataError
from textplot.series import Point


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def points_from_xy(y: Any = None, *, x: Any = None, data: Any = None) -> list[Point]:
    """Pair ``x`` with ``y`` as float points, dropping pairs with a missing side.

    ``x`` defaults to the sample index ``0..n-1``. A DataFrame passed as ``y``
    (or as ``data`` with no ``y``) must hold exactly one numeric column.
    """
    if y is None and data is not None:
        y = data
    if y is None:
        raise PlotDataError("y input is required")

    ys = _column(y, data, "y")
    if ys.size == 0:
        raise PlotDataError("y has no samples")
    xs = np.arange(ys.size, dtype=np.float64) if x is None else _column(x, data, "x")
    if xs.size != ys.size:
        raise PlotDataError(f"x has {xs.size} samples but y has {ys.size}")

    keep = np.isfinite(xs) & np.isfinite(ys)
    return [Point(float(px), float(py)) for px, py in zip(xs[keep], ys[keep], strict=True)]


def _column(value: Any, data: Any, name: str) -> np.ndarray:
    if isinstance(value, str):
        value = _named_column(value, data, name)
    if pd is not None and isinstance(value, pd.DataFrame):
        value = _only_numeric_column(value, name)
    if torch is not None and isinstance(value, torch.Tensor):
        value = value.detach().cpu().numpy()
    if isinstance(value, (bytes, bytearray)) or not hasattr(value, "__len__"):
        raise PlotDataError(f"{name} must be a sequence of numbers, got {type(value).__name__}")

    raw = np.asarray(value, dtype=object)
    if raw.ndim != 1:
        raise PlotDataError(f"{name} must be one-dimensional, got shape {raw.shape}")
    out = np.full(raw.shape[0], np.nan, dtype=np.float64)
    for i, item in enumerate(raw):
        if item is None:
            continue
        try:
            out[i] = float(item)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{name}[{i}] is not a number: {item!r}") from exc
    return out


def _named_column(column: str, data: Any, name: str) -> Any:
    if data is None:
        raise PlotDataError(f"{name}={column!r} names a column but no data was given")
    if pd is None or not isinstance(data, pd.DataFrame):
        raise PlotDataError("column names need a pandas DataFrame as data")
    if column not in data.columns:
        raise PlotDataError(f"column not found: {column}")
    return data[column]


def _only_numeric_column(frame: Any, name: str) -> Any:
    numeric = frame.select_dtypes(include="number")
    if numeric.shape[1] != 1:
        raise PlotDataError(f"{name} DataFrame must have exactly one numeric column, found {numeric.shape[1]}")
    return numeric.iloc[:, 0]
