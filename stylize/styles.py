# styles.py

from functools import reduce
from numbers import Real
from typing import Any, Callable, Optional, Tuple, Union
from rich.color import Color

from .attributes import AttributeName, ParagraphStyle, UnderlineStyle
from .definitions import DEFAULT_PALETTE, ColorPalette
from .errors import EmptyStyleSet, StyleRangeError, StyleValueError
from .logger import Logger
from .text import FULL_RANGE, StyledText, TextRange

logger = Logger(__name__)

StringStyle = Callable[[StyledText], StyledText]
RangeLike = Union[TextRange, Tuple[int, int], range, None]
ColorLike = Union[Color, str]

def make_style(name: Union[AttributeName, str], value: Any,
               text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """
    Create a style that sets one attribute over a range.

    The range is resolved each time the style is applied, against the
    length of the text it is applied to, so the default FULL_RANGE always
    covers the whole input.

    Args:
        name: Attribute to set
        value: Attribute value, already in the shape the attribute expects
        text_range: Range to style; FULL_RANGE (or None) means the whole text

    Returns:
        Function that applies the attribute to a StyledText
    """
    try:
        name = AttributeName(name)
    except ValueError as e:
        logger.error(f"Unknown attribute name: {name!r}")
        raise StyleValueError(f"Unknown attribute name '{name}'") from e
    span = TextRange.coerce(text_range)

    def style(text: Union[StyledText, str]) -> StyledText:
        text = StyledText.coerce(text)
        resolved = span.resolve(len(text))
        try:
            return text.add_attribute(name, value, resolved)
        except StyleRangeError as e:
            logger.error(f"Cannot apply {name.value}: {e}")
            raise

    return style

def underline(style: Union[UnderlineStyle, int], text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """
    Create a style that underlines text.

    Args:
        style: UnderlineStyle (or its integer code) to underline with
        text_range: Range to underline; defaults to the whole text
    """
    try:
        style = UnderlineStyle(style)
    except ValueError as e:
        logger.error(f"Unknown underline style: {style!r}")
        raise StyleValueError(f"Unknown underline style {style!r}") from e
    return make_style(AttributeName.UNDERLINE_STYLE, style, text_range)

def foreground_color(color: ColorLike, text_range: RangeLike = FULL_RANGE,
                     palette: Optional[ColorPalette] = None) -> StringStyle:
    """
    Create a style that changes the text color.

    Palette names win over rich's own color names, so "green" resolves to
    the palette's green3 rather than standard green. Pass a rich Color to
    bypass the palette.
    """
    return make_style(AttributeName.FOREGROUND_COLOR, _color(color, palette), text_range)

def background_color(color: ColorLike, text_range: RangeLike = FULL_RANGE,
                     palette: Optional[ColorPalette] = None) -> StringStyle:
    """Create a style that changes the background color."""
    return make_style(AttributeName.BACKGROUND_COLOR, _color(color, palette), text_range)

def underline_color(color: ColorLike, text_range: RangeLike = FULL_RANGE,
                    palette: Optional[ColorPalette] = None) -> StringStyle:
    """Create a style that changes the underline color."""
    return make_style(AttributeName.UNDERLINE_COLOR, _color(color, palette), text_range)

def link(url: str, text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """Create a style that links text to ``url``."""
    if not isinstance(url, str) or not url:
        logger.error(f"Invalid link URL: {url!r}")
        raise StyleValueError(f"Link URL must be a non-empty string, got {url!r}")
    return make_style(AttributeName.LINK, url, text_range)

def paragraph(style: ParagraphStyle, text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """Create a style that applies paragraph formatting."""
    if not isinstance(style, ParagraphStyle):
        logger.error(f"Invalid paragraph style: {style!r}")
        raise StyleValueError(f"Expected ParagraphStyle, got {type(style).__name__}")
    return make_style(AttributeName.PARAGRAPH_STYLE, style, text_range)

def kern(points: Real, text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """
    Create a style that kerns text.

    Args:
        points: Points to kern per character
        text_range: Range to kern; defaults to the whole text
    """
    return make_style(AttributeName.KERN, _points(points, 'kern'), text_range)

def baseline(offset: Real, text_range: RangeLike = FULL_RANGE) -> StringStyle:
    """
    Create a style that offsets the baseline.

    Args:
        offset: Points to move the baseline by
        text_range: Range to offset; defaults to the whole text
    """
    return make_style(AttributeName.BASELINE_OFFSET, _points(offset, 'baseline'), text_range)

def compose(first: StringStyle, second: StringStyle) -> StringStyle:
    """Return a style that applies ``first`` and then ``second``."""
    def composed(text: Union[StyledText, str]) -> StyledText:
        return second(first(text))
    return composed

def combine(*styles: StringStyle) -> StringStyle:
    """
    Combine styles into one, applied left to right.

    Args:
        styles: One or more styles; each runs once, in order

    Returns:
        A single style equivalent to applying every style in sequence

    Raises:
        EmptyStyleSet: If no styles are given
    """
    if not styles:
        logger.error("combine() called without styles")
        raise EmptyStyleSet("Cannot combine zero styles")
    logger.debug(f"Combining {len(styles)} style(s)")
    return reduce(compose, styles)

def stylize(text: Union[StyledText, str], *styles: StringStyle) -> StyledText:
    """Apply ``styles`` in order to ``text`` and return the result."""
    return combine(*styles)(StyledText.coerce(text))

def _color(value: ColorLike, palette: Optional[ColorPalette]) -> Color:
    return (palette or DEFAULT_PALETTE).resolve(value)

def _points(value: Real, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        logger.error(f"Invalid {what} value: {value!r}")
        raise StyleValueError(f"{what} expects a number of points, got {value!r}")
    return float(value)
