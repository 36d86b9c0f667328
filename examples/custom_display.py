from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from textplot import Chart, EnumAxis, FunctionAxis, Lines, PixelColor, Point


class Month(Enum):
    JANUARY = "January"
    FEBRUARY = "February"
    MARCH = "March"
    APRIL = "April"
    MAY = "May"
    JUNE = "June"
    JULY = "July"
    AUGUST = "August"
    SEPTEMBER = "September"
    OCTOBER = "October"
    NOVEMBER = "November"
    DECEMBER = "December"


@dataclass(frozen=True)
class Temp:
    celsius: float

    def __str__(self) -> str:
        return f"{self.celsius:g}°C"


MONTHS = EnumAxis(list(Month), formatter=lambda month: month.value)
TEMPS = FunctionAxis(to_real=lambda t: t.celsius, from_real=Temp)

EDMONTON = [-8.0, -8.0, -3.0, 5.0, 12.0, 16.0, 19.0, 18.0, 13.0, 6.0, -4.0, -10.0]
CALGARY = [-8.0, -7.4, -2.7, 3.1, 9.0, 13.2, 16.8, 15.8, 10.6, 3.8, -3.0, -8.4]


def monthly_points(temperatures: list[float]) -> list[Point]:
    return [Point(month, Temp(t)) for month, t in zip(Month, temperatures, strict=True)]


def main() -> None:
    edmonton = monthly_points(EDMONTON)
    calgary = monthly_points(CALGARY)

    print("\nMean Monthly Temperature in Edmonton, Alberta\n")
    Chart(120, 60, 0.0, 11.0, x_axis=MONTHS, y_axis=TEMPS).lineplot(Lines(edmonton)).display()

    print("\nMean Monthly Temperature in Edmonton and Calgary, Alberta\n")
    (
        Chart(120, 60, 0.0, 11.0, x_axis=MONTHS, y_axis=TEMPS)
        .lineplot_with_tags(Lines(edmonton), "Edmonton", PixelColor.BLUE)
        .lineplot_with_tags(Lines(calgary), "Calgary", PixelColor.RED)
        .nice()
    )


if __name__ == "__main__":
    main()
