from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from catboard.extraction.exceptions import (
    BinaryFileError,
    ExtractionError,
    MissingFileError,
)
from catboard.extraction.models import FileClassification
from catboard.extraction.pipeline import ExtractionPipeline, build_pipeline
from catboard.ocr.mock_ocr import MockOcr
from catboard.ocr.system_ocr import SystemOcr
from catboard.pdf.extractor import PdfExtractor
from catboard.pdf.pdfplumber_adapter import PdfPlumberAdapter
from catboard.pdf.pymupdf_adapter import PyMuPdfAdapter


def _make_pipeline(ocr: MockOcr | None = None) -> tuple[ExtractionPipeline, MagicMock, MockOcr]:
    pdf_extractor = MagicMock(spec=PdfExtractor)
    ocr = ocr if ocr is not None else MockOcr(available=True)
    return ExtractionPipeline(pdf_extractor=pdf_extractor, ocr=ocr), pdf_extractor, ocr


class TestTextDispatch:
    def test_text_file(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.md"
        path.write_text("# Title\n", encoding="utf-8")
        pipeline, pdf_extractor, ocr = _make_pipeline()

        assert pipeline.extract(path) == "# Title\n"
        pdf_extractor.extract.assert_not_called()
        assert ocr.calls == []

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.txt"
        path.write_bytes(b"")
        pipeline, _pdf, _ocr = _make_pipeline()

        assert pipeline.extract(path) == ""

    def test_binary_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.bin"
        path.write_bytes(bytes([0x48, 0x65, 0x6C, 0x00, 0x6F]))
        pipeline, _pdf, _ocr = _make_pipeline()

        with pytest.raises(BinaryFileError):
            pipeline.extract(path)

    def test_large_file(self, tmp_path: Path) -> None:
        path = tmp_path / "large.txt"
        path.write_bytes(b"A" * 10000)
        pipeline, _pdf, _ocr = _make_pipeline()

        assert len(pipeline.extract(path)) == 10000

    def test_unknown_extension_with_nulls_is_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "data.svg"
        path.write_bytes(b"\x00\x01\x02")
        pipeline, _pdf, _ocr = _make_pipeline()

        with pytest.raises(BinaryFileError):
            pipeline.extract(path)


class TestMissingFile:
    def test_fails_before_classification(self) -> None:
        pipeline, pdf_extractor, _ocr = _make_pipeline()

        with patch("catboard.extraction.pipeline.classify") as mock_classify:
            with pytest.raises(MissingFileError, match="/no/such/file.txt"):
                pipeline.extract("/no/such/file.txt")

        mock_classify.assert_not_called()
        pdf_extractor.extract.assert_not_called()

    def test_missing_pdf_never_reaches_extractor(self) -> None:
        pipeline, pdf_extractor, _ocr = _make_pipeline()

        with pytest.raises(MissingFileError):
            pipeline.extract("/no/such/file.pdf")
        pdf_extractor.extract.assert_not_called()


class TestPdfDispatch:
    def test_routes_to_pdf_extractor_unmodified(self, tmp_path: Path) -> None:
        path = tmp_path / "REPORT.PDF"
        path.write_bytes(b"%PDF-1.4")
        pipeline, pdf_extractor, _ocr = _make_pipeline()
        pdf_extractor.extract.return_value = "  pdf text  "

        assert pipeline.extract(path) == "  pdf text  "
        pdf_extractor.extract.assert_called_once_with(path)

    def test_classifies_once(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF-1.4")
        pipeline, _pdf, _ocr = _make_pipeline()

        with patch(
            "catboard.extraction.pipeline.classify", return_value=FileClassification.PDF
        ) as mock_classify:
            pipeline.extract(path)

        mock_classify.assert_called_once_with(path)

    def test_invalid_pdf_is_extraction_error_not_binary(self, tmp_path: Path) -> None:
        path = tmp_path / "test.pdf"
        path.write_bytes(b"not a real pdf\x00")
        ocr = MockOcr(available=False)
        pipeline = ExtractionPipeline(PdfExtractor(PdfPlumberAdapter(), ocr), ocr)

        with pytest.raises(ExtractionError):
            pipeline.extract(path)

    def test_real_pdf(self, sample_pdf: Path) -> None:
        ocr = MockOcr(available=False)
        pipeline = ExtractionPipeline(PdfExtractor(PdfPlumberAdapter(), ocr), ocr)

        assert "Hello PDF World" in pipeline.extract(sample_pdf)


class TestImageDispatch:
    def test_routes_to_ocr(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.JPG"
        path.write_bytes(b"\xff\xd8\xff\x00")
        pipeline, pdf_extractor, ocr = _make_pipeline()
        ocr.register_text(path, "Hello")

        assert pipeline.extract(path) == "Hello"
        pdf_extractor.extract.assert_not_called()

    def test_ocr_unavailable(self, tmp_path: Path) -> None:
        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG\x00")
        pipeline, _pdf, ocr = _make_pipeline(MockOcr(available=False))
        ocr.register_text(path, "unused")

        with pytest.raises(ExtractionError, match="OCR support is not available"):
            pipeline.extract(path)
        assert ocr.calls == []

    def test_blank_ocr_text(self, tmp_path: Path) -> None:
        path = tmp_path / "blank.tiff"
        path.write_bytes(b"II*\x00")
        pipeline, _pdf, ocr = _make_pipeline()
        ocr.register_text(path, "  \n ")

        with pytest.raises(ExtractionError, match="no recognizable text"):
            pipeline.extract(path)

    def test_ocr_error_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.heic"
        path.write_bytes(b"\x00")
        pipeline, _pdf, ocr = _make_pipeline()
        ocr.register_error(path, "x")

        with pytest.raises(ExtractionError, match="x"):
            pipeline.extract(path)


class TestBuildPipeline:
    def _settings(self, pdf_engine: str = "pdfplumber") -> MagicMock:
        return MagicMock(pdf_engine=pdf_engine, ocr_helper_name="catboard-ocr")

    def test_wires_configured_backend_and_ocr(self) -> None:
        pipeline = build_pipeline(self._settings("pymupdf"))

        assert isinstance(pipeline._ocr, SystemOcr)
        assert isinstance(pipeline._pdf_extractor._backend, PyMuPdfAdapter)
        assert pipeline._pdf_extractor._ocr is pipeline._ocr

    def test_unknown_engine_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            build_pipeline(self._settings("nope"))
