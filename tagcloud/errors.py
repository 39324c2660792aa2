"""Errors of the tag cloud generation process."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Kind of a fatal error."""

    INVALID_INPUT_PATH = "invalid input path"
    """Input file is missing or unreadable."""

    INVALID_OUTPUT_PATH = "invalid output path"
    """Output file cannot be created or written."""

    INVALID_COUNT = "invalid count"
    """Number of words is not a non-negative integer."""

    IO_FAILURE = "input/output failure"
    """Reading or writing failed in the middle of the process."""


@dataclass
class TagCloudError(Exception):
    """Fatal error that stops tag cloud generation."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"
