"""Tag cloud generator entry point."""

import json
import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any

import coloredlogs
from pydantic import ValidationError

from tagcloud.config import TagCloudConfig
from tagcloud.errors import ErrorKind, TagCloudError
from tagcloud.generator import generate
from tagcloud.ui import Interface, get_interface

INPUT_PROMPT: str = "Enter the name of an input file: "
OUTPUT_PROMPT: str = "Enter the name of the output HTML file: "
SIZE_PROMPT: str = "Enter the number of words to include in the Tag Cloud: "

LOGGING_FORMAT: str = "%(levelname)s %(message)s"


def parse_arguments(arguments: list[str]) -> Namespace:
    """Parse command line arguments."""

    parser: ArgumentParser = ArgumentParser(
        "tagcloud", description="Generate HTML tag cloud from a text file."
    )
    parser.add_argument("-i", "--input", help="path to input text file")
    parser.add_argument("-o", "--output", help="path to output HTML file")
    parser.add_argument(
        "-n", "--size", help="number of words to include in the tag cloud"
    )
    parser.add_argument(
        "--config", help="path to JSON file with tag cloud configuration"
    )
    parser.add_argument(
        "--no-escape",
        help="write words into HTML as is, without escaping",
        action="store_true",
    )
    parser.add_argument(
        "--interface",
        help="interface type",
        choices=["terminal", "rich"],
        default="rich",
    )
    parser.add_argument(
        "--verbose", help="print debug messages", action="store_true"
    )
    return parser.parse_args(arguments)


def load_config_file(path: Path) -> dict[str, Any]:
    """Read configuration values from JSON file."""

    try:
        with path.open(encoding="utf-8") as input_file:
            structure: Any = json.load(input_file)
    except (OSError, ValueError) as error:
        raise TagCloudError(
            ErrorKind.INVALID_INPUT_PATH,
            f"could not read configuration `{path}`: {error}",
        ) from error

    if not isinstance(structure, dict):
        raise TagCloudError(
            ErrorKind.INVALID_INPUT_PATH,
            f"configuration `{path}` should be a JSON object",
        )
    return structure


def parse_size(text: str) -> int:
    """Parse number of words to include in the tag cloud."""

    try:
        size: int = int(text)
    except ValueError as error:
        raise TagCloudError(
            ErrorKind.INVALID_COUNT, f"`{text}` is not an integer"
        ) from error

    if size < 0:
        raise TagCloudError(
            ErrorKind.INVALID_COUNT,
            f"number of words must be >= 0, got {size}",
        )
    return size


def ask(interface: Interface, prompt: str, kind: ErrorKind) -> str:
    """Ask user for a value.

    :param kind: kind of the error reported if input is closed
    """
    try:
        return interface.input(prompt).strip()
    except EOFError as error:
        raise TagCloudError(kind, "no value entered") from error


def construct_config(
    arguments: Namespace, interface: Interface
) -> TagCloudConfig:
    """Collect configuration from arguments, config file and user input.

    Command line arguments override values from the configuration file.
    Values missing in both are asked interactively.
    """
    values: dict[str, Any] = (
        load_config_file(Path(arguments.config)) if arguments.config else {}
    )

    if arguments.input is not None:
        values["input_path"] = arguments.input
    if arguments.output is not None:
        values["output_path"] = arguments.output
    if arguments.size is not None:
        values["size"] = arguments.size
    if arguments.no_escape:
        values["escape"] = False

    if "input_path" not in values:
        values["input_path"] = ask(
            interface, INPUT_PROMPT, ErrorKind.INVALID_INPUT_PATH
        )
    if "output_path" not in values:
        values["output_path"] = ask(
            interface, OUTPUT_PROMPT, ErrorKind.INVALID_OUTPUT_PATH
        )
    if "size" not in values:
        values["size"] = ask(interface, SIZE_PROMPT, ErrorKind.INVALID_COUNT)

    if isinstance(values["size"], str):
        values["size"] = parse_size(values["size"])

    try:
        return TagCloudConfig(**values)
    except ValidationError as error:
        kind: ErrorKind = (
            ErrorKind.INVALID_COUNT
            if any("size" in item["loc"] for item in error.errors())
            else ErrorKind.INVALID_INPUT_PATH
        )
        raise TagCloudError(kind, f"invalid configuration: {error}") from error


def main() -> None:
    """Entry point."""

    arguments: Namespace = parse_arguments(sys.argv[1:])
    coloredlogs.install(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        fmt=LOGGING_FORMAT,
    )
    interface: Interface = get_interface(arguments.interface)

    try:
        config: TagCloudConfig = construct_config(arguments, interface)
        generate(config)
    except TagCloudError as error:
        interface.error(str(error))
        sys.exit(2 if error.kind == ErrorKind.INVALID_COUNT else 1)

    interface.print("Tag Cloud created!")


if __name__ == "__main__":
    main()
