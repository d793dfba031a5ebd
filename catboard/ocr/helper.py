"""Locating and invoking the external OCR helper executable."""

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HELPER_NAME = "catboard-ocr"


@dataclass(frozen=True)
class HelperOutput:
    """Result of one helper process run."""

    returncode: int
    stdout: str
    stderr: str


def _program_dirs() -> list[Path]:
    """Directories holding the running program: the entry script, then the interpreter."""
    dirs: list[Path] = []
    if sys.argv and sys.argv[0]:
        dirs.append(Path(sys.argv[0]).resolve().parent)
    dirs.append(Path(sys.executable).resolve().parent)
    return dirs


def find_ocr_helper(name: str = DEFAULT_HELPER_NAME) -> Path | None:
    """Find the helper next to the running program, then on PATH."""
    for directory in _program_dirs():
        candidate = directory / name
        if candidate.is_file():
            return candidate

    found = shutil.which(name)
    if found is not None:
        return Path(found)
    return None


def run_helper(helper: Path, path: Path) -> HelperOutput:
    """Run ``<helper> <path>`` and wait for it to exit.

    There is no timeout; a hung helper blocks the caller.

    Raises:
        OSError: if the helper cannot be spawned.
    """
    completed = subprocess.run(
        [str(helper), str(path)],
        check=False,
        capture_output=True,
    )
    return HelperOutput(
        returncode=completed.returncode,
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )
