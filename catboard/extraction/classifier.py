from pathlib import Path

from catboard.extraction.models import FileClassification

PDF_EXTENSION = "pdf"

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {"png", "jpg", "jpeg", "tiff", "tif", "gif", "bmp", "webp", "heic", "heif"}
)


def _extension(path: Path | str) -> str:
    """Lowercased extension without the dot, or '' when there is none."""
    return Path(path).suffix.lstrip(".").lower()


def is_pdf(path: Path | str) -> bool:
    return _extension(path) == PDF_EXTENSION


def is_image(path: Path | str) -> bool:
    return _extension(path) in IMAGE_EXTENSIONS


def classify(path: Path | str) -> FileClassification:
    """Classify a path by extension. Unknown or missing extensions are text."""
    extension = _extension(path)
    if extension == PDF_EXTENSION:
        return FileClassification.PDF
    if extension in IMAGE_EXTENSIONS:
        return FileClassification.IMAGE
    return FileClassification.TEXT
