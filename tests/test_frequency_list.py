"""Test for frequency list and top words selection."""

import pytest

from tagcloud.errors import ErrorKind, TagCloudError
from tagcloud.frequency_list import FrequencyList, WordOccurrences


@pytest.fixture(name="frequency_list")
def fixture_frequency_list() -> FrequencyList:
    """Create frequency list with ties."""
    return FrequencyList({"c": 3, "a": 5, "d": 1, "b": 3})


def test_occurrences(frequency_list: FrequencyList) -> None:
    """Test occurrences."""
    assert frequency_list.get_occurrences("a") == 5
    assert frequency_list.get_occurrences("missing") == 0
    assert frequency_list.get_all_occurrences() == 12
    assert frequency_list.get_min_occurrences() == 1
    assert frequency_list.get_max_occurrences() == 5
    assert len(frequency_list) == 4


def test_add() -> None:
    """Test `add()` method."""
    frequency_list: FrequencyList = FrequencyList()
    frequency_list.add("word")
    frequency_list.add("word", 2)
    frequency_list.add("other")
    assert frequency_list.has("word") is True
    assert frequency_list.has("missing") is False
    assert frequency_list.get_occurrences("word") == 3
    assert frequency_list.get_all_occurrences() == 4


def test_words_order(frequency_list: FrequencyList) -> None:
    """Test that words are sorted by frequency, then alphabetically."""
    assert frequency_list.get_words() == ["a", "b", "c", "d"]


def test_top_tie_break(frequency_list: FrequencyList) -> None:
    """Test that `b` beats `c` on tie and result is sorted alphabetically."""
    assert frequency_list.get_top(2) == [
        WordOccurrences("a", 5),
        WordOccurrences("b", 3),
    ]


def test_top_alphabetical() -> None:
    """Test that selected words are re-sorted alphabetically."""
    frequency_list: FrequencyList = FrequencyList({"zebra": 4, "apple": 1})
    assert [item.word for item in frequency_list.get_top(2)] == [
        "apple",
        "zebra",
    ]


def test_top_zero(frequency_list: FrequencyList) -> None:
    """Test that zero words may be selected."""
    assert frequency_list.get_top(0) == []


def test_top_all(frequency_list: FrequencyList) -> None:
    """Test selection of exactly all words."""
    assert [item.word for item in frequency_list.get_top(4)] == [
        "a",
        "b",
        "c",
        "d",
    ]


def test_top_too_many(
    frequency_list: FrequencyList, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that requested size is clamped to the number of unique words."""
    assert len(frequency_list.get_top(10)) == 4
    assert "only 4 unique words" in caplog.text


def test_top_negative(frequency_list: FrequencyList) -> None:
    """Test that negative size is rejected."""
    with pytest.raises(TagCloudError) as error:
        frequency_list.get_top(-1)
    assert error.value.kind == ErrorKind.INVALID_COUNT
