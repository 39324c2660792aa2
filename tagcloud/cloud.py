"""HTML tag cloud.

Tag cloud is a list of words, where the font size of every word depends on how
often the word occurs in the text.  Words are sorted alphabetically.
"""

import html
import logging
from dataclasses import dataclass, field
from typing import IO

from tagcloud.config import FontSizeConfig
from tagcloud.frequency_list import FrequencyList, WordOccurrences

STYLESHEET_URL: str = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/"
    "projects/tag-cloud-generator/data/tagcloud.css"
)
LOCAL_STYLESHEET: str = "tagcloud.css"

STYLE_RULES: list[str] = [
    ".rdp {--rdp-cell-size: 40px;--rdp-accent-color: #0000ff;"
    "--rdp-background-color: #e7edff;--rdp-accent-color-dark: #3003e1;"
    "--rdp-background-color-dark: #180270;"
    "--rdp-outline: 2px solid var(--rdp-accent-color);"
    "--rdp-outline-selected: 2px solid rgba(0, 0, 0, 0.75);margin: 1em;}",
    ".rdp-vhidden {box-sizing: border-box;padding: 0;margin: 0;"
    "background: transparent;border: 0;-moz-appearance: none;"
    "-webkit-appearance: none;appearance: none;"
    "position: absolute !important;top: 0;width: 1px !important;"
    "height: 1px !important;padding: 0 !important;"
    "overflow: hidden !important;clip: rect(1px, 1px, 1px, 1px) !important;"
    "border: 0 !important;}",
]


def get_font_size(
    occurrences: int,
    min_occurrences: int,
    max_occurrences: int,
    config: FontSizeConfig = FontSizeConfig(),
) -> int:
    """Compute font size class of a word.

    Font size grows linearly from `config.minimum` for the least frequent word
    to `config.maximum` for the most frequent one and is truncated to an
    integer.  If all words are equally frequent, every word gets the maximum
    font size.

    :param occurrences: number of occurrences of the word
    :param min_occurrences: minimum number of occurrences among all words of
        the text
    :param max_occurrences: maximum number of occurrences among all words of
        the text
    :param config: font size range
    """
    if max_occurrences == min_occurrences:
        return config.maximum

    scaled: int = (config.maximum - config.minimum) * (
        occurrences - min_occurrences
    )
    return config.minimum + scaled // (max_occurrences - min_occurrences)


@dataclass
class TagCloud:
    """Tag cloud of the most frequent words of a text."""

    frequency_list: FrequencyList
    """All words of the text with their occurrences."""

    size: int
    """Requested number of words."""

    title: str
    """Name of the text shown in the header."""

    escape: bool = True
    """Whether words and title should be HTML-escaped."""

    font_size: FontSizeConfig = field(default_factory=FontSizeConfig)

    def get_words(self) -> list[WordOccurrences]:
        """Get words of the tag cloud sorted alphabetically."""
        return self.frequency_list.get_top(self.size)

    def get_font_size(self, occurrences: int) -> int:
        """Get font size class for the number of occurrences.

        Range is computed over the whole text, not only over selected words.
        """
        return get_font_size(
            occurrences,
            self.frequency_list.get_min_occurrences(),
            self.frequency_list.get_max_occurrences(),
            self.font_size,
        )

    def _text(self, text: str) -> str:
        return html.escape(text) if self.escape else text

    def write_header(self, output_file: IO[str]) -> None:
        """Write document head and the tag cloud header."""

        output_file.write("<!DOCTYPE html>\n<html>\n<head>\n")
        output_file.write("\t<title>Tag Cloud</title>\n")
        output_file.write(
            f'\t<link href="{STYLESHEET_URL}" rel="stylesheet" '
            'type="text/css">\n'
        )
        output_file.write(
            f'\t<link href="{LOCAL_STYLESHEET}" type="text/css" '
            'rel="stylesheet">\n'
        )
        output_file.write("\t<style>\n")
        for rule in STYLE_RULES:
            output_file.write(rule + "\n")
        output_file.write("</style>\n")
        output_file.write("</head>\n<body>\n")
        output_file.write(
            f"\t<h2>Top {self.size} words in {self._text(self.title)} </h2>\n"
            "\t<hr>\n\n"
        )

    def write_span(self, output_file: IO[str], item: WordOccurrences) -> None:
        """Write one word of the tag cloud."""

        font_size: int = self.get_font_size(item.occurrences)
        output_file.write(
            f'<span style="cursor:default" class="f{font_size}" '
            f'title="count: {item.occurrences}">'
            f"{self._text(item.word)}</span>\n"
        )

    def write(self, output_file: IO[str]) -> int:
        """Write HTML document with the tag cloud.

        :param output_file: text stream to write to
        :return: number of words written
        """
        words: list[WordOccurrences] = self.get_words()
        logging.info("Writing tag cloud of %d words...", len(words))

        self.write_header(output_file)
        output_file.write('<div class="cdiv">\n<p class="cbox">\n')
        for item in words:
            self.write_span(output_file, item)
        output_file.write("</p>\n</div>\n</body>\n</html>\n")

        return len(words)
