from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when series data cannot be plotted or a chart cannot render."""
