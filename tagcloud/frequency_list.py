"""Frequency list."""

import logging
from dataclasses import dataclass, field

from tagcloud.errors import ErrorKind, TagCloudError


@dataclass(frozen=True)
class WordOccurrences:
    """Unique word and number of its occurrences in some text."""

    word: str
    """Unique word."""

    occurrences: int
    """Number of occurrences of the word in some text."""


def by_frequency(item: WordOccurrences) -> tuple[int, str]:
    """Sort key: more frequent words first, then alphabetically."""
    return -item.occurrences, item.word


def by_word(item: WordOccurrences) -> tuple[str, int]:
    """Sort key: alphabetically, then less frequent words first."""
    return item.word, item.occurrences


@dataclass
class FrequencyList:
    """Frequency list of some text.

    It is a list of all unique words in the text and the number of their
    occurrences.
    """

    data: dict[str, int] = field(default_factory=dict)
    """Mapping from words to their number of occurrences."""

    _occurrences: int = 0
    """Total number of occurrences of all words in the frequency list."""

    def __post_init__(self) -> None:
        if self.data:
            self._occurrences = sum(self.data.values())

        assert self._occurrences == sum(self.data.values()), (
            f"Precomputed number of occurrences {self._occurrences} is not "
            f"equal to the sum of occurrences: {sum(self.data.values())}."
        )

    def __len__(self) -> int:
        return len(self.data)

    def add(self, word: str, occurrences: int = 1) -> None:
        """Add word and its occurrences in some text."""
        if not self.has(word):
            self.data[word] = 0
        self.data[word] += occurrences
        self._occurrences += occurrences

    def has(self, word: str) -> bool:
        """Check whether frequency list contains word."""
        return word in self.data

    def get_occurrences(self, word: str) -> int:
        """Get number of word occurrences in text."""
        if word in self.data:
            return self.data[word]
        return 0

    def get_all_occurrences(self) -> int:
        """Get number of all words in the text."""
        return self._occurrences

    def get_min_occurrences(self) -> int:
        """Get the number of occurrences of the least frequent word."""
        return min(self.data.values())

    def get_max_occurrences(self) -> int:
        """Get the number of occurrences of the most frequent word."""
        return max(self.data.values())

    def get_items(self) -> list[WordOccurrences]:
        """Get all words with occurrences, the most frequent first.

        Words with the same number of occurrences are sorted alphabetically.
        """
        return sorted(
            (WordOccurrences(word, count) for word, count in self.data.items()),
            key=by_frequency,
        )

    def get_words(self) -> list[str]:
        """Get all unique words, the most frequent first."""
        return [item.word for item in self.get_items()]

    def get_top(self, size: int) -> list[WordOccurrences]:
        """Get the most frequent words sorted alphabetically.

        If there are fewer unique words than requested, all words are
        returned.

        :param size: number of words to select, should be non-negative
        """
        if size < 0:
            raise TagCloudError(
                ErrorKind.INVALID_COUNT,
                f"number of words must be >= 0, got {size}",
            )
        if size > len(self):
            logging.warning(
                "Requested %d words, but the text has only %d unique words.",
                size,
                len(self),
            )
            size = len(self)

        return sorted(self.get_items()[:size], key=by_word)
