from __future__ import annotations

from textplot import Chart, Continuous, Lines, PixelColor, Point


def main() -> None:
    print("y = -x^2; y = x^2")
    (
        Chart.default()
        .lineplot(Continuous(lambda x: -(x**2)))
        .lineplot(Continuous(lambda x: x**2))
        .display()
    )

    l1 = [Point(float(n), float(n)) for n in range(-2, 3)]
    l2 = [Point(float(n), float(n) - 1.0) for n in range(-2, 3)]
    l3 = [Point(float(n), float(n) - 2.0) for n in range(-2, 3)]

    print("\nf(x)=x; f(x)=x-1; f(x)=x-2")
    Chart(120, 80, -2.0, 2.0).lineplot(Lines(l1)).lineplot(Lines(l2)).lineplot(Lines(l3)).nice()

    l4 = [Point(float(n), float(n)) for n in range(-2, 3)]
    l5 = [Point(float(n), float(n) + 1.0) for n in range(-2, 3)]
    l6 = [Point(float(n), float(n) + 2.0) for n in range(-2, 3)]

    print("\nf(x)=x; f(x)=x+1; f(x)=x+2")
    (
        Chart(120, 80, -2.0, 2.0)
        .lineplot_with_tags(Lines(l4), None, PixelColor.YELLOW)
        .lineplot_with_tags(Lines(l5), None, PixelColor.RED)
        .lineplot_with_tags(Lines(l6), None, PixelColor.GREEN)
        .nice()
    )


if __name__ == "__main__":
    main()
