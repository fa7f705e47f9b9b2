# errors.py

class StylizeError(Exception):
    """Base class for all stylize errors."""

class StyleRangeError(StylizeError, IndexError):
    """A character range falls outside the text it is applied to."""

class EmptyStyleSet(StylizeError, ValueError):
    """combine() was called without any styles."""

class StyleValueError(StylizeError, ValueError):
    """An attribute value has the wrong shape for its attribute name."""

class ColorError(StyleValueError):
    """A color name or specification could not be resolved."""
