from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Sequence


ShapeKind = Literal["continuous", "points", "lines", "steps", "bars"]


@dataclass(frozen=True)
class Point:
    x: Any
    y: Any


@dataclass(frozen=True, eq=False)
class Continuous:
    """Real valued function, sampled once per canvas column at render time."""

    func: Callable[[float], float]
    kind: ShapeKind = field(default="continuous", init=False)


@dataclass(frozen=True, eq=False)
class _Discrete:
    # Holds the caller's sequence as-is; it must outlive every render.
    points: Sequence[Point]


@dataclass(frozen=True, eq=False)
class Points(_Discrete):
    """Scatter plot."""

    kind: ShapeKind = field(default="points", init=False)


@dataclass(frozen=True, eq=False)
class Lines(_Discrete):
    """Points connected with straight segments."""

    kind: ShapeKind = field(default="lines", init=False)


@dataclass(frozen=True, eq=False)
class Steps(_Discrete):
    """Points connected in step fashion."""

    kind: ShapeKind = field(default="steps", init=False)


@dataclass(frozen=True, eq=False)
class Bars(_Discrete):
    """Points drawn as bar outlines down to the baseline."""

    kind: ShapeKind = field(default="bars", init=False)


Shape = Continuous | Points | Lines | Steps | Bars
DISCRETE_SHAPES: dict[str, type[_Discrete]] = {
    "points": Points,
    "lines": Lines,
    "steps": Steps,
    "bars": Bars,
}
