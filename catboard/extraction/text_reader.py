import sys
from pathlib import Path
from typing import TextIO

from catboard.extraction.exceptions import (
    BinaryFileError,
    FileReadError,
    MissingFileError,
    PermissionDeniedError,
)
from catboard.logging.logger import Log

BINARY_CHECK_SIZE = 8192

STDIN_PATH = "-"


def read_text(path: Path | str) -> str:
    """Read a text file, rejecting binary content.

    The first BINARY_CHECK_SIZE bytes are scanned for a null byte before the
    whole file is read and decoded as UTF-8.

    Raises:
        MissingFileError: if the path does not exist.
        PermissionDeniedError: if the OS refuses to open the file.
        BinaryFileError: if a null byte appears in the check window.
        FileReadError: on any other I/O or decode failure.
    """
    path = Path(path)
    if not path.exists():
        raise MissingFileError(path)

    try:
        handle = path.open("rb")
    except PermissionError as exc:
        raise PermissionDeniedError(path) from exc
    except FileNotFoundError as exc:
        raise MissingFileError(path) from exc
    except OSError as exc:
        raise FileReadError(path, exc) from exc

    with handle:
        try:
            head = handle.read(BINARY_CHECK_SIZE)
        except OSError as exc:
            raise FileReadError(path, exc) from exc
        if b"\x00" in head:
            Log.debug(f"Null byte within first {BINARY_CHECK_SIZE} bytes of {path}")
            raise BinaryFileError(path)

    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, exc) from exc


def read_stdin(stream: TextIO | None = None) -> str:
    """Read all of standard input (or the given stream) as text."""
    source = stream if stream is not None else sys.stdin
    try:
        return source.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(STDIN_PATH, exc) from exc
