"""Tag cloud generation from a text file to an HTML file."""

import logging
from pathlib import Path
from typing import IO

from tagcloud.cloud import TagCloud
from tagcloud.config import TagCloudConfig
from tagcloud.errors import ErrorKind, TagCloudError
from tagcloud.frequency_list import FrequencyList
from tagcloud.text import Text
from tagcloud.util import atomic_output


def open_input(path: Path) -> IO[str]:
    """Open input text file for reading."""
    try:
        return path.open(encoding="utf-8")
    except OSError as error:
        raise TagCloudError(
            ErrorKind.INVALID_INPUT_PATH,
            f"could not open `{path}`: {error}",
        ) from error


def generate(config: TagCloudConfig) -> int:
    """Generate HTML tag cloud for the text file.

    Either the whole output file is written or, if anything fails, the output
    file is not changed at all.

    :param config: input and output paths and the number of words
    :return: number of words in the tag cloud
    """
    if config.size < 0:
        raise TagCloudError(
            ErrorKind.INVALID_COUNT,
            f"number of words must be >= 0, got {config.size}",
        )

    input_path: Path = Path(config.input_path)
    output_path: Path = Path(config.output_path)

    logging.info("Reading `%s`...", input_path)

    with open_input(input_path) as input_file, atomic_output(
        output_path
    ) as output_file:
        frequency_list: FrequencyList = Text(input_file).get_frequency_list()
        tag_cloud: TagCloud = TagCloud(
            frequency_list,
            config.size,
            config.input_path,
            escape=config.escape,
            font_size=config.font_size,
        )
        written: int = tag_cloud.write(output_file)

    logging.info("Tag cloud written to `%s`.", output_path)
    return written
