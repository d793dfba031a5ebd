from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcr(ABC):
    """Contract for all OCR backends."""

    @abstractmethod
    def extract_text(self, path: Path) -> str:
        """Recognize text in the image or PDF at ``path``.

        Args:
            path: File to recognize. PDFs are passed whole; the backend
                  renders them itself.

        Returns:
            The recognized text, never blank.

        Raises:
            ExtractionError: if the backend is missing, fails, or finds nothing.
        """

    @abstractmethod
    def is_available(self) -> bool:
        """Report whether extract_text can be attempted."""
