from .canvas import BRAILLE_BLANK, BrailleCanvas
from .draw_lines import draw_polyline, draw_segment
from .draw_markers import draw_markers

__all__ = [
    "BRAILLE_BLANK",
    "BrailleCanvas",
    "draw_markers",
    "draw_polyline",
    "draw_segment",
]
