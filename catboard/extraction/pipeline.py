from pathlib import Path

from catboard.config.settings import Settings
from catboard.extraction.classifier import classify
from catboard.extraction.exceptions import ExtractionError, MissingFileError
from catboard.extraction.models import FileClassification
from catboard.extraction.text_reader import read_text
from catboard.logging.logger import Log
from catboard.ocr.base import BaseOcr
from catboard.ocr.factory import OcrFactory
from catboard.pdf.extractor import PdfExtractor
from catboard.pdf.factory import PdfBackendFactory


class ExtractionPipeline:
    """Classifies a file once and routes it to the matching reader."""

    def __init__(self, pdf_extractor: PdfExtractor, ocr: BaseOcr) -> None:
        self._pdf_extractor = pdf_extractor
        self._ocr = ocr

    def extract(self, path: Path | str) -> str:
        """Return the full text of ``path`` or raise a CatboardError."""
        path = Path(path)
        if not path.exists():
            raise MissingFileError(path)

        classification = classify(path)
        Log.debug(f"Classified {path} as {classification.value}")

        if classification is FileClassification.PDF:
            return self._pdf_extractor.extract(path)
        if classification is FileClassification.IMAGE:
            return self._extract_image(path)
        return read_text(path)

    def _extract_image(self, path: Path) -> str:
        if not self._ocr.is_available():
            raise ExtractionError(path, "OCR support is not available for images")
        text = self._ocr.extract_text(path)
        if not text.strip():
            raise ExtractionError(path, "Image contains no recognizable text")
        return text


def build_pipeline(settings: Settings) -> ExtractionPipeline:
    """Build an ExtractionPipeline with the configured adapters."""
    ocr = OcrFactory.create(settings)
    backend = PdfBackendFactory.create(settings)
    return ExtractionPipeline(pdf_extractor=PdfExtractor(backend, ocr), ocr=ocr)
