# render.py

from io import StringIO
from typing import Any, Iterator, List, Optional, Tuple, Union
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from .attributes import Alignment, AttributeName, ParagraphStyle, UnderlineStyle
from .logger import Logger
from .text import StyledText, TextRange

logger = Logger(__name__)

JUSTIFY = {
    Alignment.LEFT: 'left',
    Alignment.RIGHT: 'right',
    Alignment.CENTER: 'center',
    Alignment.JUSTIFIED: 'full',
    Alignment.NATURAL: 'default'
}

# Attributes a terminal has no way to show
UNRENDERED = {AttributeName.UNDERLINE_COLOR, AttributeName.KERN, AttributeName.BASELINE_OFFSET}

# rich style flags with no styled-text attribute
UNMAPPED_FLAGS = (
    "bold", "dim", "italic", "blink", "blink2", "reverse",
    "conceal", "strike", "frame", "encircle", "overline"
)

def to_rich(styled: Union[StyledText, str]) -> Text:
    """
    Convert styled text into a rich Text.

    Underline, colors and links become span styles. A paragraph style
    covering the whole text sets the Text's justification. Underline color,
    kerning and baseline offsets are dropped.

    Args:
        styled: Text to convert

    Returns:
        Equivalent rich Text
    """
    styled = StyledText.coerce(styled)
    text = Text(styled.plain)
    dropped = set()

    for run in styled.runs:
        style = _style_for(run.as_dict())
        if style:
            text.stylize(style, run.start, run.end)
        dropped.update(name for name, _ in run.attributes if name in UNRENDERED)

    paragraphs = styled.spans(AttributeName.PARAGRAPH_STYLE)
    if paragraphs:
        span, value = paragraphs[0]
        if (len(paragraphs) == 1 and span.location == 0 and span.length == len(styled)
                and isinstance(value, ParagraphStyle)):
            text.justify = JUSTIFY[value.alignment]
        else:
            dropped.add(AttributeName.PARAGRAPH_STYLE)

    if dropped:
        logger.debug(f"Dropped attributes with no rich equivalent: {sorted(n.value for n in dropped)}")
    return text

def from_rich(text: Text) -> StyledText:
    """
    Convert a rich Text into styled text.

    The Text's base style covers every character, then each span is
    applied in order. Style strings that don't parse are skipped.
    """
    length = len(text.plain)
    styled = StyledText(text.plain)

    entries: List[Tuple[int, int, Any]] = [(0, length, text.style)]
    entries.extend((span.start, span.end, span.style) for span in text.spans)

    for start, end, style in entries:
        style = _parse_style(style)
        start, end = max(0, start), min(end, length)
        if style is None or end <= start:
            continue
        flags = [flag for flag in UNMAPPED_FLAGS if getattr(style, flag) is not None]
        if flags:
            logger.debug(f"Dropped rich style flags over [{start}, {end}): {flags}")
        for name, value in _attributes_for(style):
            styled = styled.add_attribute(name, value, TextRange(start, end - start))

    alignment = next((a for a, j in JUSTIFY.items() if j == text.justify), None)
    if alignment is not None and alignment is not Alignment.NATURAL:
        styled = styled.add_attribute(AttributeName.PARAGRAPH_STYLE, ParagraphStyle(alignment=alignment))
    return styled

def render_ansi(styled: Union[StyledText, str], width: Optional[int] = None,
                color_system: str = "truecolor") -> str:
    """
    Render styled text to a string of ANSI escape sequences.

    Args:
        styled: Text to render
        width: Console width; rich picks one when None
        color_system: rich color system ("standard", "256", "truecolor", ...)

    Returns:
        Rendered output without a trailing newline
    """
    console = Console(
        force_terminal=True,
        color_system=color_system,
        file=StringIO(),
        highlight=False,
        width=width
    )
    with console.capture() as capture:
        console.print(to_rich(styled), end="")
    return capture.get()

def _style_for(attributes: dict) -> Optional[Style]:
    underline = attributes.get(AttributeName.UNDERLINE_STYLE)
    double = underline == UnderlineStyle.DOUBLE
    style = Style(
        color=attributes.get(AttributeName.FOREGROUND_COLOR),
        bgcolor=attributes.get(AttributeName.BACKGROUND_COLOR),
        underline=None if underline is None or double else underline != UnderlineStyle.NONE,
        underline2=True if double else None,
        link=attributes.get(AttributeName.LINK)
    )
    return style or None

def _parse_style(style: Union[Style, str, None]) -> Optional[Style]:
    if isinstance(style, Style):
        return style
    if not style or not style.strip():
        return None
    try:
        return Style.parse(style)
    except StyleSyntaxError as e:
        logger.warning(f"Skipping unparseable style '{style}': {e}")
        return None

def _attributes_for(style: Style) -> Iterator[Tuple[AttributeName, Any]]:
    if style.color is not None:
        yield AttributeName.FOREGROUND_COLOR, style.color
    if style.bgcolor is not None:
        yield AttributeName.BACKGROUND_COLOR, style.bgcolor
    if style.underline2:
        yield AttributeName.UNDERLINE_STYLE, UnderlineStyle.DOUBLE
    elif style.underline:
        yield AttributeName.UNDERLINE_STYLE, UnderlineStyle.SINGLE
    elif style.underline is False:
        yield AttributeName.UNDERLINE_STYLE, UnderlineStyle.NONE
    if style.link:
        yield AttributeName.LINK, style.link
