from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from textplot.errors import PlotDataError


RESET = "\033[0m"


class PixelColor(Enum):
    # value is the SGR foreground code
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    @property
    def sgr(self) -> str:
        return f"\033[{self.value}m"


@dataclass(frozen=True)
class TrueColor:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if channel < 0 or channel > 255:
                raise ValueError(f"color channel must be in [0, 255], got {channel}")

    @property
    def sgr(self) -> str:
        return f"\033[38;2;{self.r};{self.g};{self.b}m"


Color = PixelColor | TrueColor


def coerce_color(value: Any) -> Color:
    if isinstance(value, (PixelColor, TrueColor)):
        return value
    if isinstance(value, str):
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return PixelColor[key]
        except KeyError as exc:
            raise PlotDataError(f"unknown color name: {value!r}") from exc
    if isinstance(value, tuple) and len(value) in (3, 4):
        # alpha is accepted for RGBA callers and dropped; terminals have no blending.
        r, g, b = (int(c) for c in value[:3])
        try:
            return TrueColor(r, g, b)
        except ValueError as exc:
            raise PlotDataError(str(exc)) from exc
    raise PlotDataError(f"unsupported color: {value!r}")


def colorize(text: str, color: Color | None, *, enabled: bool = True) -> str:
    if not enabled or color is None or not text:
        return text
    return f"{color.sgr}{text}{RESET}"
