import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from catboard import __version__
from catboard.clipboard.base import BaseClipboard
from catboard.extraction.exceptions import NoFilesSpecifiedError
from catboard.extraction.pipeline import ExtractionPipeline
from catboard.extraction.text_reader import STDIN_PATH, read_stdin
from catboard.logging.logger import Log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catboard",
        description=(
            "Copy file contents to clipboard. Text files are copied as-is, "
            "PDFs have their text extracted and images are OCR'd."
        ),
    )
    parser.add_argument(
        "files",
        nargs="+",
        help="Files to copy to clipboard (use '-' for stdin). "
        "Multiple files are concatenated with newlines.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Quiet mode - suppress all output except errors",
    )
    parser.add_argument("--version", action="version", version=f"catboard {__version__}")
    return parser


def run(
    files: Sequence[str],
    pipeline: ExtractionPipeline,
    clipboard: BaseClipboard,
    stdin: TextIO | None = None,
) -> str:
    """Read every input in order, join with newlines and copy the result.

    Stops at the first failing input; nothing is copied in that case.

    Returns:
        The text placed on the clipboard.
    """
    contents: list[str] = []
    for name in files:
        if name == STDIN_PATH:
            Log.debug("Reading from stdin")
            contents.append(read_stdin(stdin))
        else:
            Log.debug(f"Reading file: {name}")
            contents.append(pipeline.extract(Path(name)))

    if not contents:
        raise NoFilesSpecifiedError()

    combined = "\n".join(contents)
    clipboard.set_text(combined)
    Log.info(f"Copied {len(combined)} characters to clipboard")
    return combined


def copy_file_to_clipboard(
    path: Path | str,
    pipeline: ExtractionPipeline,
    clipboard: BaseClipboard,
) -> int:
    """Extract one file onto the clipboard and return its character count."""
    content = pipeline.extract(path)
    clipboard.set_text(content)
    return len(content)


def describe_copy(files: Sequence[str], combined: str) -> str:
    """Human summary printed after a successful copy."""
    size = len(combined.encode("utf-8"))
    if len(files) == 1:
        source = "stdin" if files[0] == STDIN_PATH else files[0]
        return f"Copied {size} bytes from {source} to clipboard"
    return f"Copied {size} bytes from {len(files)} files to clipboard"
