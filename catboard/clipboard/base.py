from abc import ABC, abstractmethod


class BaseClipboard(ABC):
    """Contract for clipboard adapters."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace clipboard contents with ``text``.

        Raises:
            ClipboardError: if the clipboard is not reachable.
        """

    @abstractmethod
    def get_text(self) -> str:
        """Return the current clipboard text."""
