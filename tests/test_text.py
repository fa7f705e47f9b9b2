# test_text.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from stylize.attributes import AttributeName
from stylize.errors import StyleRangeError, StyleValueError
from stylize.text import FULL_RANGE, NOT_FOUND, AttributeRun, StyledText, TextRange

LINK = AttributeName.LINK
KERN = AttributeName.KERN


class TestTextRange:

    def test_full_range_resolves_to_length(self):
        assert FULL_RANGE.is_unspecified
        assert FULL_RANGE.location == NOT_FOUND
        assert FULL_RANGE.resolve(7) == TextRange(0, 7)

    def test_explicit_range_resolves_to_itself(self):
        assert TextRange(2, 3).resolve(100) == TextRange(2, 3)
        assert TextRange(2, 3).end == 5

    def test_coerce(self):
        assert TextRange.coerce(None) is FULL_RANGE
        assert TextRange.coerce((1, 2)) == TextRange(1, 2)
        assert TextRange.coerce(range(2, 5)) == TextRange(2, 3)

    def test_coerce_rejects_bad_values(self):
        with pytest.raises(StyleValueError):
            TextRange.coerce(range(0, 6, 2))
        with pytest.raises(StyleValueError):
            TextRange.coerce("0:5")

    def test_check(self):
        TextRange(0, 5).check(5)
        TextRange(5, 0).check(5)
        with pytest.raises(StyleRangeError):
            TextRange(4, 2).check(5)
        with pytest.raises(StyleRangeError):
            TextRange(6, 0).check(5)


class TestStyledText:
    """Construction, inspection and attribute runs."""

    def setup_method(self):
        self.text = StyledText("abcdefghij")

    def test_empty(self):
        empty = StyledText()
        assert len(empty) == 0
        assert empty.runs == ()
        assert empty.add_attribute(KERN, 1.0) == empty

    def test_initial_attributes_cover_whole_text(self):
        text = StyledText("abc", {LINK: "https://example.com"})
        assert text.runs == (AttributeRun(0, 3, ((LINK, "https://example.com"),)),)
        assert text.spans("link") == [(TextRange(0, 3), "https://example.com")]

    def test_plain_and_str(self):
        assert self.text.plain == "abcdefghij"
        assert str(self.text) == "abcdefghij"
        assert len(self.text) == 10

    def test_requires_str(self):
        with pytest.raises(TypeError):
            StyledText(42)

    def test_add_attribute_returns_new_value(self):
        styled = self.text.add_attribute(KERN, 2.0, TextRange(2, 3))
        assert styled is not self.text
        assert self.text.runs == (AttributeRun(0, 10),)
        assert [run.start for run in styled.runs] == [0, 2, 5]
        assert styled.attribute(KERN, 1) is None
        assert styled.attribute(KERN, 4) == 2.0

    def test_zero_length_range_is_a_no_op(self):
        assert self.text.add_attribute(KERN, 1.0, (3, 0)) == self.text
        assert self.text.add_attribute(KERN, 1.0, (10, 0)) == self.text
        with pytest.raises(StyleRangeError):
            self.text.add_attribute(KERN, 1.0, (11, 0))

    def test_out_of_bounds(self):
        with pytest.raises(StyleRangeError):
            self.text.add_attribute(KERN, 1.0, (8, 5))

    def test_unknown_attribute(self):
        with pytest.raises(StyleValueError):
            self.text.add_attribute("font", "Menlo")

    def test_equality_ignores_how_runs_were_built(self):
        pieces = self.text.add_attribute(LINK, "u", (0, 5)).add_attribute(LINK, "u", (5, 5))
        whole = self.text.add_attribute(LINK, "u")
        assert pieces == whole
        assert hash(pieces) == hash(whole)
        assert len(pieces.runs) == 1

    def test_spans_split_on_value_change(self):
        styled = self.text.add_attribute(LINK, "a", (0, 4)).add_attribute(LINK, "b", (4, 2))
        assert styled.spans(LINK) == [(TextRange(0, 4), "a"), (TextRange(4, 2), "b")]

    def test_spans_merge_across_runs(self):
        """A span continues through runs where other attributes change."""
        styled = self.text.add_attribute(LINK, "a").add_attribute(KERN, 1.0, (3, 2))
        assert len(styled.runs) == 3
        assert styled.spans(LINK) == [(TextRange(0, 10), "a")]

    def test_attributes_at(self):
        styled = self.text.add_attribute(LINK, "a", (0, 4)).add_attribute(KERN, 1.0, (2, 4))
        assert styled.attributes_at(3) == {LINK: "a", KERN: 1.0}
        assert styled.attributes_at(-1) == {}
        with pytest.raises(StyleRangeError):
            styled.attributes_at(10)

    def test_slice_keeps_attributes(self):
        styled = self.text.add_attribute(LINK, "a", (2, 2))
        sliced = styled[1:4]
        assert sliced.plain == "bcd"
        assert sliced.spans(LINK) == [(TextRange(1, 2), "a")]

    def test_index(self):
        styled = self.text.add_attribute(LINK, "a", (9, 1))
        assert styled[-1] == StyledText("j", {LINK: "a"})
        assert styled[0] == StyledText("a")

    def test_slice_with_step(self):
        with pytest.raises(ValueError):
            self.text[::2]

    def test_concatenation(self):
        linked = StyledText("ab", {LINK: "x"})
        joined = linked + StyledText("cd", {KERN: 1.0})
        assert joined.plain == "abcd"
        assert joined.spans(LINK) == [(TextRange(0, 2), "x")]
        assert joined.spans(KERN) == [(TextRange(2, 2), 1.0)]

        prefixed = "xy" + linked
        assert prefixed.plain == "xyab"
        assert prefixed.spans(LINK) == [(TextRange(2, 2), "x")]
        assert (linked + "!").plain == "ab!"

    def test_coerce(self):
        assert StyledText.coerce("abc") == StyledText("abc")
        assert StyledText.coerce(self.text) is self.text
        with pytest.raises(TypeError):
            StyledText.coerce(3)

    def test_repr(self):
        styled = StyledText("ab", {LINK: "x"})
        assert repr(styled) == "StyledText('ab', [0:2] {link='x'})"
        assert repr(StyledText("ab")) == "StyledText('ab')"

    def test_overlapping_write_leaves_original_runs(self):
        original = self.text.add_attribute(LINK, "a", (0, 4)).add_attribute(KERN, 1.0, (2, 4))
        runs = original.runs
        rewritten = original.add_attribute(LINK, "b", (1, 6))
        assert original.runs == runs
        assert original.spans(LINK) == [(TextRange(0, 4), "a")]
        assert rewritten.spans(LINK) == [(TextRange(0, 1), "a"), (TextRange(1, 6), "b")]

    def test_non_integral_range_rejected(self):
        with pytest.raises(StyleValueError):
            TextRange.coerce((1.7, 2))
        with pytest.raises(StyleValueError):
            TextRange.coerce((0, 2.0))
        with pytest.raises(StyleValueError):
            TextRange.coerce((True, 2))
