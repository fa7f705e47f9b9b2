# __init__.py

from .attributes import Alignment, AttributeName, ParagraphStyle, UnderlineStyle
from .definitions import COLORS, DEFAULT_PALETTE, ColorPalette
from .errors import ColorError, EmptyStyleSet, StyleRangeError, StyleValueError, StylizeError
from .logger import Logger
from .render import from_rich, render_ansi, to_rich
from .styles import (
    StringStyle, background_color, baseline, combine, compose, foreground_color,
    kern, link, make_style, paragraph, stylize, underline, underline_color
)
from .text import FULL_RANGE, AttributeRun, StyledText, TextRange

__all__ = [
    "StyledText", "TextRange", "AttributeRun", "FULL_RANGE",
    "AttributeName", "UnderlineStyle", "Alignment", "ParagraphStyle",
    "StringStyle", "make_style", "underline", "foreground_color", "background_color",
    "underline_color", "link", "paragraph", "kern", "baseline",
    "compose", "combine", "stylize",
    "to_rich", "from_rich", "render_ansi",
    "ColorPalette", "COLORS", "DEFAULT_PALETTE",
    "StylizeError", "StyleRangeError", "EmptyStyleSet", "StyleValueError", "ColorError",
    "Logger"
]
