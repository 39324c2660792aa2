"""Text processing utility."""

import logging
import re
from typing import IO

from tagcloud.errors import ErrorKind, TagCloudError
from tagcloud.frequency_list import FrequencyList

SEPARATORS: re.Pattern = re.compile(r"[ \t\n\r,\-.!?\[\]';:/()]+")


def split_words(line: str) -> list[str]:
    """Split line into lowercase words.

    Words are separated by whitespace and ASCII punctuation: `,-.!?[]';:/()`.
    """
    return [word.lower() for word in SEPARATORS.split(line) if word]


class Text:
    """Text processing utility."""

    def __init__(self, input_file: IO[str]):
        """
        :param input_file: file to process
        """
        self.input_file: IO[str] = input_file

    def get_frequency_list(self) -> FrequencyList:
        """Construct frequency list of the text.

        Lines are processed separately, so words never span two lines.
        """
        logging.info("Construct frequency list...")

        frequency_list: FrequencyList = FrequencyList()

        try:
            line: str
            for line in self.input_file:
                for word in split_words(line):
                    frequency_list.add(word)
        except (OSError, UnicodeDecodeError) as error:
            raise TagCloudError(
                ErrorKind.IO_FAILURE, f"could not read input: {error}"
            ) from error

        logging.debug(
            "Found %d words, %d unique.",
            frequency_list.get_all_occurrences(),
            len(frequency_list),
        )
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            logging.debug(
                "Most frequent words: %s.",
                ", ".join(frequency_list.get_words()[:10]),
            )
        return frequency_list
