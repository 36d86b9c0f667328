from __future__ import annotations

from dataclasses import dataclass
import os


DEFAULT_LEGEND_SWATCH = "⠉⠉⠉"
DEFAULT_LABEL_PRECISION = 1


@dataclass(frozen=True)
class ChartStyle:
    colorize: bool = True
    label_precision: int = DEFAULT_LABEL_PRECISION
    legend_swatch: str = DEFAULT_LEGEND_SWATCH

    def __post_init__(self) -> None:
        if self.label_precision < 0:
            raise ValueError("label_precision must be >= 0")

    @classmethod
    def from_env(
        cls,
        *,
        color_env_var: str = "TEXTPLOT_COLOR",
        precision_env_var: str = "TEXTPLOT_LABEL_PRECISION",
        color_default: str = "1",
    ) -> "ChartStyle":
        # https://no-color.org: any non-empty value disables color.
        no_color = os.getenv("NO_COLOR", "").strip() != ""
        colorize = not no_color and os.getenv(color_env_var, color_default).strip() != "0"
        return cls(
            colorize=colorize,
            label_precision=_parse_precision(precision_env_var),
        )


def _parse_precision(env_var: str) -> int:
    raw = os.getenv(env_var, "").strip()
    if raw == "":
        return DEFAULT_LABEL_PRECISION
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_LABEL_PRECISION
    if value < 0:
        return DEFAULT_LABEL_PRECISION
    return value
