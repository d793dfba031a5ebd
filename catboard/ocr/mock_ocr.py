"""In-memory OCR backend for tests.

Register a canned outcome per path; anything unregistered fails.
"""

from dataclasses import dataclass
from pathlib import Path

from catboard.extraction.exceptions import ExtractionError
from catboard.ocr.base import BaseOcr


@dataclass(frozen=True)
class MockOcrText:
    text: str


@dataclass(frozen=True)
class MockOcrError:
    message: str


OcrOutcome = MockOcrText | MockOcrError


class MockOcr(BaseOcr):
    """OCR double returning configured outcomes keyed by path."""

    def __init__(
        self,
        responses: dict[Path, OcrOutcome] | None = None,
        available: bool = True,
    ) -> None:
        self._responses: dict[Path, OcrOutcome] = {
            Path(p): outcome for p, outcome in (responses or {}).items()
        }
        self._available = available
        self.calls: list[Path] = []

    def register_text(self, path: Path | str, text: str) -> None:
        self._responses[Path(path)] = MockOcrText(text)

    def register_error(self, path: Path | str, message: str) -> None:
        self._responses[Path(path)] = MockOcrError(message)

    def is_available(self) -> bool:
        return self._available

    def extract_text(self, path: Path) -> str:
        path = Path(path)
        self.calls.append(path)
        outcome = self._responses.get(path)
        if outcome is None:
            raise ExtractionError(path, f"No mock response configured for {path}")
        if isinstance(outcome, MockOcrError):
            raise ExtractionError(path, outcome.message)
        return outcome.text
