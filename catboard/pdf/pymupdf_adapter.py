from pathlib import Path

import pymupdf

from catboard.pdf.base import BasePdfBackend, BasePdfDocument
from catboard.pdf.exceptions import PdfBackendError


class PyMuPdfDocument(BasePdfDocument):
    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    def page_count(self) -> int:
        try:
            return int(self._doc.page_count)
        except Exception as exc:
            raise PdfBackendError(f"pymupdf could not read page tree: {exc}") from exc

    def page_text(self, index: int) -> str:
        try:
            return str(self._doc[index].get_text())
        except Exception as exc:
            raise PdfBackendError(f"pymupdf extraction failed: {exc}") from exc

    def close(self) -> None:
        self._doc.close()


class PyMuPdfAdapter(BasePdfBackend):
    """Extracts text from PDF using PyMuPDF."""

    def open(self, path: Path) -> BasePdfDocument:
        try:
            doc = pymupdf.open(path, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfBackendError(f"pymupdf could not open document: {exc}") from exc
        return PyMuPdfDocument(doc)
