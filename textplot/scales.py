from __future__ import annotations

from dataclasses import dataclass
import math
import sys


Interval = tuple[float, float]


@dataclass(frozen=True)
class Scale:
    """Linear mapping between a domain interval and a range interval.

    Both directions clamp their output into the target interval, so values
    outside the mapped interval stick to its edges.
    """

    domain: Interval
    range: Interval

    def __post_init__(self) -> None:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            raise ValueError(f"scale domain must have non-zero width, got {self.domain!r}")
        if r1 == r0:
            raise ValueError(f"scale range must have non-zero width, got {self.range!r}")

    def linear(self, x: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        p = (x - d0) / (d1 - d0)
        r = r0 + p * (r1 - r0)
        return min(max(r, r0), r1)

    def inv_linear(self, i: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        p = (i - r0) / (r1 - r0)
        d = d0 + p * (d1 - d0)
        return min(max(d, d0), d1)


def is_normal(value: float) -> bool:
    # NaN fails the abs() comparison, infinities fail isfinite.
    return math.isfinite(value) and abs(value) >= sys.float_info.min


def round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))
