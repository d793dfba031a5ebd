from pathlib import Path


class CatboardError(Exception):
    """Base exception for all catboard errors."""


class MissingFileError(CatboardError):
    """Raised when the input path does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"File not found: {self.path}")


class PermissionDeniedError(CatboardError):
    """Raised when the OS refuses to open the input file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Permission denied: {self.path}")


class BinaryFileError(CatboardError):
    """Raised when a text-classified file contains a null byte near its start."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read binary file: {self.path}")


class ExtractionError(CatboardError):
    """Raised when PDF or OCR extraction fails."""

    def __init__(self, path: Path | str, message: str) -> None:
        self.path = Path(path)
        self.message = message
        super().__init__(f"Failed to extract text from '{self.path}': {message}")


class FileReadError(CatboardError):
    """Raised when a file cannot be read or decoded."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to read file '{self.path}': {cause}")


class ClipboardError(CatboardError):
    """Raised when the clipboard cannot be read or written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Clipboard error: {message}")


class NoFilesSpecifiedError(CatboardError):
    """Raised when there is nothing to copy."""

    def __init__(self) -> None:
        super().__init__("No files specified")
