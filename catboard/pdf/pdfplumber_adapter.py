from pathlib import Path

import pdfplumber

from catboard.pdf.base import BasePdfBackend, BasePdfDocument
from catboard.pdf.exceptions import PdfBackendError


class PdfPlumberDocument(BasePdfDocument):
    def __init__(self, pdf: pdfplumber.PDF) -> None:
        self._pdf = pdf

    def page_count(self) -> int:
        try:
            return len(self._pdf.pages)
        except Exception as exc:
            raise PdfBackendError(f"pdfplumber could not read page tree: {exc}") from exc

    def page_text(self, index: int) -> str:
        try:
            return self._pdf.pages[index].extract_text() or ""
        except Exception as exc:
            raise PdfBackendError(f"pdfplumber extraction failed: {exc}") from exc

    def close(self) -> None:
        self._pdf.close()


class PdfPlumberAdapter(BasePdfBackend):
    """Extracts text from PDF using pdfplumber."""

    def open(self, path: Path) -> BasePdfDocument:
        try:
            return PdfPlumberDocument(pdfplumber.open(path))
        except Exception as exc:
            raise PdfBackendError(f"pdfplumber could not open document: {exc}") from exc
