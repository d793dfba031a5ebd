from pathlib import Path

from catboard.extraction.exceptions import ExtractionError
from catboard.logging.logger import Log
from catboard.ocr.base import BaseOcr
from catboard.pdf.base import BasePdfBackend
from catboard.pdf.exceptions import PdfBackendError


class PdfExtractor:
    """Extracts embedded PDF text, falling back to OCR for scanned documents.

    Pipeline: open -> page count -> text per page -> join -> OCR if blank.
    """

    def __init__(self, backend: BasePdfBackend, ocr: BaseOcr) -> None:
        self._backend = backend
        self._ocr = ocr

    def extract(self, path: Path) -> str:
        """Return all embedded text of the PDF at ``path``.

        Raises:
            ExtractionError: if the document or any page cannot be read, or if
                no text is found and OCR is unavailable or finds nothing.
        """
        text = self._extract_embedded(path)
        if text.strip():
            return text

        Log.info(f"No embedded text in {path}, trying OCR")
        if not self._ocr.is_available():
            raise ExtractionError(
                path, "PDF contains no extractable text (OCR support is not available)"
            )

        # The helper renders the document itself; only the first page may be read.
        ocr_text = self._ocr.extract_text(path)
        if not ocr_text.strip():
            raise ExtractionError(
                path, "PDF contains no recognizable text (OCR found nothing)"
            )
        return ocr_text

    def _extract_embedded(self, path: Path) -> str:
        try:
            document = self._backend.open(path)
        except PdfBackendError as exc:
            raise ExtractionError(path, str(exc)) from exc

        with document:
            try:
                page_count = document.page_count()
            except PdfBackendError as exc:
                raise ExtractionError(path, str(exc)) from exc
            Log.debug(f"PDF {path} has {page_count} pages")

            text = ""
            for index in range(page_count):
                try:
                    page_text = document.page_text(index)
                except PdfBackendError as exc:
                    raise ExtractionError(
                        path, f"Failed to extract page {index + 1}: {exc}"
                    ) from exc
                if text:
                    text += "\n"
                text += page_text
        return text
