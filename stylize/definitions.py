# definitions.py

from typing import Dict, Optional, Union
from rich.color import Color, ColorParseError

from .errors import ColorError
from .logger import Logger

logger = Logger(__name__)

# Named colors mapped to rich color names
COLORS = {
    'GREEN': 'green3',
    'PINK': 'pink1',
    'BLUE': 'blue1',
    'GRAY': 'gray50',
    'YELLOW': 'yellow1',
    'WHITE': 'white',
    'RED': 'red',
    'BLACK': 'black'
}

class ColorPalette:
    """
    Named color configuration used when resolving color values.

    Names are matched case-insensitively and shadow rich's color names of
    the same spelling ('green' is the palette's green3). Anything that is
    not a palette name is handed to rich's color parser, so '#ff0000' and
    'rgb(255,0,0)' resolve too.
    """
    def __init__(self, colors: Optional[Dict[str, str]] = None):
        source = colors if colors is not None else COLORS
        self.colors = {name.upper(): spec for name, spec in source.items()}

    def get(self, name: str) -> Optional[str]:
        """Get a color specification by palette name."""
        return self.colors.get(name.upper())

    def add_color(self, name: str, spec: str) -> None:
        """Add a new named color to the palette."""
        if name.upper() in self.colors:
            raise ValueError(f"Color '{name}' already exists")
        self._parse(spec)
        self.colors[name.upper()] = spec

    def resolve(self, value: Union[Color, str]) -> Color:
        """
        Resolve a color value into a rich Color.

        Args:
            value: A rich Color, a palette name, or a color string rich can parse

        Returns:
            The resolved Color

        Raises:
            ColorError: If the value is not a color or does not parse
        """
        if isinstance(value, Color):
            return value
        if not isinstance(value, str):
            logger.error(f"Unsupported color value: {value!r}")
            raise ColorError(f"Expected a Color or color string, got {type(value).__name__}")
        return self._parse(self.get(value) or value)

    def _parse(self, spec: str) -> Color:
        try:
            return Color.parse(spec)
        except ColorParseError as e:
            logger.error(f"Color parse error: {e}")
            raise ColorError(f"Unknown color '{spec}'") from e

DEFAULT_PALETTE = ColorPalette()
