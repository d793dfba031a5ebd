from collections.abc import Generator
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from catboard.logging.logger import Log


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    yield
    Log.reset()


@pytest.fixture()
def sample_pdf(tmp_path: Path) -> Path:
    """Write a minimal single-page PDF with known text content."""
    path = tmp_path / "sample.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return path


@pytest.fixture()
def multi_page_pdf(tmp_path: Path) -> Path:
    """Write a two-page PDF with known text on each page."""
    path = tmp_path / "multi.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return path


@pytest.fixture()
def blank_pdf(tmp_path: Path) -> Path:
    """Write a valid PDF with no text content, like a scan without a text layer."""
    path = tmp_path / "scanned.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    c.showPage()
    c.save()
    return path
