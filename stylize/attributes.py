# attributes.py

from enum import Enum, IntEnum
from dataclasses import dataclass

class AttributeName(str, Enum):
    """The fixed set of attributes a style function can apply."""
    UNDERLINE_STYLE = 'underline_style'
    FOREGROUND_COLOR = 'foreground_color'
    BACKGROUND_COLOR = 'background_color'
    UNDERLINE_COLOR = 'underline_color'
    LINK = 'link'
    PARAGRAPH_STYLE = 'paragraph_style'
    KERN = 'kern'
    BASELINE_OFFSET = 'baseline_offset'

    def __str__(self) -> str:
        return self.value

class UnderlineStyle(IntEnum):
    """Underline style codes."""
    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09

class Alignment(str, Enum):
    LEFT = 'left'
    RIGHT = 'right'
    CENTER = 'center'
    JUSTIFIED = 'justified'
    NATURAL = 'natural'

@dataclass(frozen=True)
class ParagraphStyle:
    """
    Paragraph formatting descriptor.

    Spacing and indents are in points. A line_height_multiple of 0 means
    the renderer's default line height.
    """
    alignment: Alignment = Alignment.NATURAL
    line_spacing: float = 0.0
    paragraph_spacing: float = 0.0
    paragraph_spacing_before: float = 0.0
    first_line_head_indent: float = 0.0
    head_indent: float = 0.0
    tail_indent: float = 0.0
    line_height_multiple: float = 0.0
