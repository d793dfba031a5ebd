from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType


class BasePdfDocument(ABC):
    """An open PDF document owned by a single extraction call."""

    @abstractmethod
    def page_count(self) -> int:
        """Return the number of pages.

        Raises:
            PdfBackendError: if the page tree cannot be read.
        """

    @abstractmethod
    def page_text(self, index: int) -> str:
        """Return the embedded text of the page at zero-based ``index``.

        Raises:
            PdfBackendError: if the page cannot be parsed.
        """

    @abstractmethod
    def close(self) -> None:
        """Release the underlying library handle."""

    def __enter__(self) -> "BasePdfDocument":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class BasePdfBackend(ABC):
    """Contract for all PDF parsing adapters."""

    @abstractmethod
    def open(self, path: Path) -> BasePdfDocument:
        """Open the PDF at ``path``.

        Raises:
            PdfBackendError: if the file is not a readable PDF.
        """
