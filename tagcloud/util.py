"""Utility functions."""

import logging
import os
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from tagcloud.errors import ErrorKind, TagCloudError

TEMPORARY_PREFIX: str = ".tagcloud-"


def get_default_mode() -> int:
    """Get permissions of a newly created file for the current umask."""
    umask: int = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


@contextmanager
def open_output(path: Path) -> Iterator[IO[str]]:
    """Open existing special file, e.g. a pipe or a device, for writing."""
    try:
        output_file: IO[str] = path.open("w", encoding="utf-8", newline="\n")
    except OSError as error:
        raise TagCloudError(
            ErrorKind.INVALID_OUTPUT_PATH,
            f"could not open `{path}`: {error}",
        ) from error

    try:
        with output_file:
            yield output_file
    except OSError as error:
        raise TagCloudError(
            ErrorKind.IO_FAILURE, f"could not write `{path}`: {error}"
        ) from error


@contextmanager
def atomic_output(path: Path) -> Iterator[IO[str]]:
    """Open a file for writing atomically.

    Data is written to a temporary file in the same directory, which replaces
    the target file only if the block finishes without an exception.
    Otherwise, the temporary file is removed and the target file is left
    untouched.  Symbolic links are followed, so the file they point to is
    written.  Existing files that are not regular files are written directly.

    :param path: path to the target file
    """
    path = path.resolve()

    if path.is_dir():
        raise TagCloudError(
            ErrorKind.INVALID_OUTPUT_PATH, f"`{path}` is a directory"
        )
    if path.exists() and not path.is_file():
        with open_output(path) as output_file:
            yield output_file
        return

    try:
        output_file = tempfile.NamedTemporaryFile(
            "w+",
            encoding="utf-8",
            newline="\n",
            dir=path.parent,
            prefix=TEMPORARY_PREFIX,
            suffix=".tmp",
            delete=False,
        )
    except OSError as error:
        raise TagCloudError(
            ErrorKind.INVALID_OUTPUT_PATH,
            f"could not create `{path}`: {error}",
        ) from error

    temp_path: Path = Path(output_file.name)
    try:
        with output_file:
            yield output_file
        if path.exists():
            shutil.copymode(path, temp_path)
        else:
            temp_path.chmod(get_default_mode())
        temp_path.replace(path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise TagCloudError(
            ErrorKind.IO_FAILURE, f"could not write `{path}`: {error}"
        ) from error
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise

    logging.debug("File `%s` written.", path)
