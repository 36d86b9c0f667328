from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Callable, Protocol, Sequence

from textplot.errors import PlotDataError


class AxisType(Protocol):
    """Converts axis values to and from chart coordinates and formats them."""

    def to_float(self, value: Any) -> float: ...

    def from_float(self, number: float) -> Any: ...

    def format(self, value: Any, precision: int) -> str: ...


@dataclass(frozen=True)
class RealAxis:
    def to_float(self, value: Any) -> float:
        return float(value)

    def from_float(self, number: float) -> float:
        return float(number)

    def format(self, value: Any, precision: int) -> str:
        return f"{float(value):.{precision}f}"


REAL = RealAxis()


@dataclass(frozen=True)
class FunctionAxis:
    """Axis type assembled from plain conversion callables.

    ``formatter`` receives the axis value only; precision is ignored because
    user types decide their own rendering.
    """

    to_real: Callable[[Any], float]
    from_real: Callable[[float], Any]
    formatter: Callable[[Any], str] = str

    def to_float(self, value: Any) -> float:
        return float(self.to_real(value))

    def from_float(self, number: float) -> Any:
        return self.from_real(number)

    def format(self, value: Any, precision: int) -> str:
        return self.formatter(value)


class EnumAxis:
    """Ordinal axis over an ordered set of members (months, weekdays, ...)."""

    def __init__(self, members: Sequence[Any], formatter: Callable[[Any], str] = str) -> None:
        if len(members) == 0:
            raise ValueError("enum axis needs at least one member")
        self.members = tuple(members)
        self.formatter = formatter
        self._index = {member: i for i, member in enumerate(self.members)}

    def to_float(self, value: Any) -> float:
        try:
            return float(self._index[value])
        except KeyError as exc:
            raise PlotDataError(f"value is not a member of this axis: {value!r}") from exc

    def from_float(self, number: float) -> Any:
        if not math.isfinite(number):
            raise PlotDataError(f"cannot convert {number} to an axis member")
        idx = int(math.floor(number))
        if idx < 0 or idx >= len(self.members):
            raise PlotDataError(f"cannot convert {number} to an axis member")
        return self.members[idx]

    def format(self, value: Any, precision: int) -> str:
        return self.formatter(value)
