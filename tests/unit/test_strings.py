"""Unit tests for substring and is_repetition_of."""

import pytest

from textparts.domain.exceptions import InvalidArgument, NullInput
from textparts.domain.strings import is_repetition_of, substring


class TestSubstring:
    """Tests for substring."""

    def test_within_bounds(self) -> None:
        assert substring("abcdef", 1, 4) == "bcd"

    def test_end_past_length_runs_to_end(self) -> None:
        assert substring("abcdef", 3, 100) == "def"

    def test_start_at_length_returns_empty(self) -> None:
        assert substring("abc", 3, 5) == ""

    @pytest.mark.parametrize(("start", "end"), [(-1, 2), (4, 5), (2, 1)])
    def test_invalid_range_raises(self, start: int, end: int) -> None:
        with pytest.raises(InvalidArgument):
            substring("abc", start, end)

    def test_none_raises(self) -> None:
        with pytest.raises(NullInput):
            substring(None, 0, 1)  # type: ignore[arg-type]


class TestIsRepetitionOf:
    """Tests for is_repetition_of."""

    def test_repeated_base(self) -> None:
        assert is_repetition_of("abcabcabc", "abc") is True

    def test_single_repetition(self) -> None:
        assert is_repetition_of("abc", "abc") is True

    def test_length_not_multiple(self) -> None:
        assert is_repetition_of("abcab", "abc") is False

    def test_mismatch(self) -> None:
        assert is_repetition_of("abcabd", "abc") is False

    def test_base_longer_than_text(self) -> None:
        assert is_repetition_of("ab", "abc") is False

    def test_empty_base(self) -> None:
        assert is_repetition_of("abc", "") is False

    def test_none_raises(self) -> None:
        with pytest.raises(NullInput):
            is_repetition_of(None, "a")  # type: ignore[arg-type]
        with pytest.raises(NullInput):
            is_repetition_of("a", None)  # type: ignore[arg-type]
