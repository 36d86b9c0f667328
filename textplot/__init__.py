from textplot.axis_values import REAL, AxisType, EnumAxis, FunctionAxis, RealAxis
from textplot.chart import Chart
from textplot.colors import PixelColor, TrueColor
from textplot.errors import PlotDataError
from textplot.scales import Scale
from textplot.series import Bars, Continuous, Lines, Point, Points, Shape, Steps
from textplot.style import ChartStyle

__all__ = [
    "REAL",
    "AxisType",
    "Bars",
    "Chart",
    "ChartStyle",
    "Continuous",
    "EnumAxis",
    "FunctionAxis",
    "Lines",
    "PixelColor",
    "PlotDataError",
    "Point",
    "Points",
    "RealAxis",
    "Scale",
    "Shape",
    "Steps",
    "TrueColor",
]
