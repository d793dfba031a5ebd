from catboard.config.settings import Settings
from catboard.pdf.base import BasePdfBackend
from catboard.pdf.pdfplumber_adapter import PdfPlumberAdapter
from catboard.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfBackendFactory:
    """Creates the PDF parsing backend named by settings."""

    ADAPTERS: dict[str, type[BasePdfBackend]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfBackend:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
