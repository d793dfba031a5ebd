from collections.abc import Callable
from pathlib import Path

from catboard.extraction.exceptions import ExtractionError
from catboard.logging.logger import Log
from catboard.ocr.base import BaseOcr
from catboard.ocr.helper import (
    DEFAULT_HELPER_NAME,
    HelperOutput,
    find_ocr_helper,
    run_helper,
)

HelperLocator = Callable[[str], Path | None]
HelperRunner = Callable[[Path, Path], HelperOutput]


class SystemOcr(BaseOcr):
    """OCR backed by the external ``catboard-ocr`` helper process.

    The helper is looked up on every call. ``locator`` and ``runner`` are
    injectable so tests never spawn real processes.
    """

    def __init__(
        self,
        helper_name: str = DEFAULT_HELPER_NAME,
        runner: HelperRunner = run_helper,
        locator: HelperLocator = find_ocr_helper,
    ) -> None:
        self._helper_name = helper_name
        self._runner = runner
        self._locator = locator

    def is_available(self) -> bool:
        return self._locator(self._helper_name) is not None

    def extract_text(self, path: Path) -> str:
        helper = self._locator(self._helper_name)
        if helper is None:
            raise ExtractionError(
                path,
                f"OCR helper '{self._helper_name}' not found. Install it alongside catboard.",
            )

        Log.debug(f"Running OCR helper {helper} on {path}")
        try:
            output = self._runner(helper, path)
        except OSError as exc:
            raise ExtractionError(path, f"Failed to run OCR helper: {exc}") from exc

        if output.returncode != 0:
            raise ExtractionError(path, f"OCR failed: {output.stderr.strip()}")

        if not output.stdout.strip():
            raise ExtractionError(path, "Image contains no recognizable text")

        Log.info(f"OCR recognized {len(output.stdout)} chars in {path}")
        return output.stdout
