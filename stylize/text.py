# text.py

import sys
from bisect import bisect_right
from numbers import Integral
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .attributes import AttributeName
from .errors import StyleRangeError, StyleValueError
from .logger import Logger

logger = Logger(__name__)

# Location of the "unspecified" range sentinel
NOT_FOUND = sys.maxsize

Attributes = Tuple[Tuple[AttributeName, Any], ...]

@dataclass(frozen=True)
class TextRange:
    """
    Half-open character range [location, location + length).

    FULL_RANGE (location NOT_FOUND) is left unresolved until it is applied,
    at which point it covers the whole text it is applied to.
    """
    location: int
    length: int = 0

    @property
    def end(self) -> int:
        return self.location + self.length

    @property
    def is_unspecified(self) -> bool:
        return self.location == NOT_FOUND

    def resolve(self, length: int) -> "TextRange":
        """Return a concrete range, expanding the sentinel to [0, length)."""
        if self.is_unspecified:
            return TextRange(0, length)
        return self

    def check(self, length: int) -> None:
        """Raise StyleRangeError unless the range lies within a text of ``length``."""
        if self.is_unspecified:
            return
        if self.location < 0 or self.length < 0 or self.end > length:
            raise StyleRangeError(
                f"Range [{self.location}, {self.end}) out of bounds for text of length {length}"
            )

    @classmethod
    def coerce(cls, value: Union["TextRange", Tuple[int, int], range, None]) -> "TextRange":
        """
        Build a TextRange from the accepted range spellings.

        None means the unspecified sentinel, a tuple is (location, length)
        and a builtin range must have a step of 1.
        """
        if value is None:
            return FULL_RANGE
        if isinstance(value, TextRange):
            return value
        if isinstance(value, range):
            if value.step != 1:
                logger.error(f"Stepped range not supported: {value!r}")
                raise StyleValueError("Ranges with a step other than 1 are not supported")
            return cls(value.start, max(0, value.stop - value.start))
        if isinstance(value, tuple) and len(value) == 2 and all(
                isinstance(v, Integral) and not isinstance(v, bool) for v in value):
            return cls(int(value[0]), int(value[1]))
        logger.error(f"Cannot interpret {value!r} as a text range")
        raise StyleValueError(f"Cannot interpret {value!r} as a text range")

    def __repr__(self) -> str:
        if self.is_unspecified:
            return "TextRange(FULL)"
        return f"TextRange({self.location}, {self.length})"

FULL_RANGE = TextRange(NOT_FOUND, 0)

def _attribute_name(name: Union[AttributeName, str]) -> AttributeName:
    try:
        return AttributeName(name)
    except ValueError as e:
        logger.error(f"Unknown attribute name: {name!r}")
        raise StyleValueError(f"Unknown attribute name '{name}'") from e

def _freeze(attributes: Mapping) -> Attributes:
    items = ((_attribute_name(k), v) for k, v in attributes.items())
    return tuple(sorted(items, key=lambda item: item[0].value))

@dataclass(frozen=True)
class AttributeRun:
    """A maximal stretch of characters sharing one attribute set."""
    start: int
    end: int
    attributes: Attributes = ()

    @property
    def length(self) -> int:
        return self.end - self.start

    def get(self, name: Union[AttributeName, str], default: Any = None) -> Any:
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    def as_dict(self) -> Dict[AttributeName, Any]:
        return dict(self.attributes)

    def shifted(self, offset: int) -> "AttributeRun":
        return AttributeRun(self.start + offset, self.end + offset, self.attributes)

def _normalize(runs: Iterable[AttributeRun]) -> Tuple[AttributeRun, ...]:
    """Drop empty runs and merge neighbours with equal attributes."""
    merged: List[AttributeRun] = []
    for run in runs:
        if run.length <= 0:
            continue
        if merged and merged[-1].attributes == run.attributes and merged[-1].end == run.start:
            merged[-1] = AttributeRun(merged[-1].start, run.end, run.attributes)
        else:
            merged.append(run)
    return tuple(merged)

class StyledText:
    """
    Immutable text with named attributes over character ranges.

    Attributes are stored as gap-free runs covering the whole text, so two
    values with the same characters and the same per-character attributes
    compare equal however they were built. Every operation returns a new
    value; nothing mutates an existing one.
    """
    __slots__ = ('_text', '_runs')

    def __init__(self, text: str = "", attributes: Optional[Mapping] = None):
        """
        Args:
            text: The characters
            attributes: Optional attributes applied over the whole text
        """
        if not isinstance(text, str):
            raise TypeError(f"StyledText requires str, got {type(text).__name__}")
        self._text = text
        self._runs = _normalize([AttributeRun(0, len(text), _freeze(attributes or {}))])

    @classmethod
    def _from_runs(cls, text: str, runs: Iterable[AttributeRun]) -> "StyledText":
        obj = cls.__new__(cls)
        obj._text = text
        obj._runs = _normalize(runs)
        return obj

    @classmethod
    def coerce(cls, value: Union["StyledText", str]) -> "StyledText":
        """Promote a plain string to unstyled StyledText."""
        if isinstance(value, StyledText):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected StyledText or str, got {type(value).__name__}")

    @property
    def plain(self) -> str:
        return self._text

    @property
    def runs(self) -> Tuple[AttributeRun, ...]:
        return self._runs

    def _run_at(self, index: int) -> AttributeRun:
        if index < 0:
            index += len(self._text)
        if not 0 <= index < len(self._text):
            raise StyleRangeError(f"Index {index} out of bounds for text of length {len(self._text)}")
        starts = [run.start for run in self._runs]
        return self._runs[bisect_right(starts, index) - 1]

    def attributes_at(self, index: int) -> Dict[AttributeName, Any]:
        """Return all attributes in effect at a character index."""
        return self._run_at(index).as_dict()

    def attribute(self, name: Union[AttributeName, str], index: int, default: Any = None) -> Any:
        """Return one attribute's value at a character index."""
        return self._run_at(index).get(_attribute_name(name), default)

    def spans(self, name: Union[AttributeName, str]) -> List[Tuple[TextRange, Any]]:
        """Return the maximal ranges over which ``name`` holds a single value."""
        name = _attribute_name(name)
        missing = object()
        spans: List[Tuple[TextRange, Any]] = []
        for run in self._runs:
            value = run.get(name, missing)
            if value is missing:
                continue
            if spans:
                last_range, last_value = spans[-1]
                if last_range.end == run.start and last_value == value:
                    spans[-1] = (TextRange(last_range.location, last_range.length + run.length), value)
                    continue
            spans.append((TextRange(run.start, run.length), value))
        return spans

    def add_attribute(self, name: Union[AttributeName, str], value: Any,
                      text_range: Union[TextRange, Tuple[int, int], range, None] = FULL_RANGE) -> "StyledText":
        """
        Return a copy with ``name`` set to ``value`` over ``text_range``.

        Where the range overlaps an existing value for the same name, the new
        value replaces it on the overlap only.

        Raises:
            StyleRangeError: If the range lies outside the text
        """
        name = _attribute_name(name)
        span = TextRange.coerce(text_range).resolve(len(self._text))
        span.check(len(self._text))
        if span.length == 0:
            return self

        runs: List[AttributeRun] = []
        for run in self._runs:
            if run.end <= span.location or run.start >= span.end:
                runs.append(run)
                continue
            if run.start < span.location:
                runs.append(AttributeRun(run.start, span.location, run.attributes))
            updated = run.as_dict()
            updated[name] = value
            runs.append(AttributeRun(max(run.start, span.location), min(run.end, span.end), _freeze(updated)))
            if run.end > span.end:
                runs.append(AttributeRun(span.end, run.end, run.attributes))
        return self._from_runs(self._text, runs)

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        runs = ", ".join(
            f"[{run.start}:{run.end}] " + "{" + ", ".join(f"{k.value}={v!r}" for k, v in run.attributes) + "}"
            for run in self._runs if run.attributes
        )
        return f"StyledText({self._text!r}{', ' + runs if runs else ''})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._text == other._text and self._runs == other._runs

    def __hash__(self) -> int:
        return hash((self._text, self._runs))

    def __getitem__(self, key: Union[int, slice]) -> "StyledText":
        if isinstance(key, int):
            run = self._run_at(key)
            index = key + len(self._text) if key < 0 else key
            return StyledText(self._text[index], run.as_dict())
        start, stop, step = key.indices(len(self._text))
        if step != 1:
            raise ValueError("StyledText slices do not support a step")
        stop = max(start, stop)
        runs = [
            AttributeRun(max(run.start, start) - start, min(run.end, stop) - start, run.attributes)
            for run in self._runs
            if run.end > start and run.start < stop
        ]
        return self._from_runs(self._text[start:stop], runs)

    def __add__(self, other: Union["StyledText", str]) -> "StyledText":
        if not isinstance(other, (StyledText, str)):
            return NotImplemented
        other = StyledText.coerce(other)
        offset = len(self._text)
        return self._from_runs(self._text + other._text,
                               list(self._runs) + [run.shifted(offset) for run in other._runs])

    def __radd__(self, other: str) -> "StyledText":
        if not isinstance(other, str):
            return NotImplemented
        return StyledText(other) + self
