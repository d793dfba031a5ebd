from catboard.clipboard.base import BaseClipboard
from catboard.extraction.exceptions import ClipboardError


class MockClipboard(BaseClipboard):
    """In-memory clipboard; fails every call when ``should_fail`` is set."""

    def __init__(self, should_fail: bool = False) -> None:
        self._content = ""
        self._should_fail = should_fail

    def set_text(self, text: str) -> None:
        if self._should_fail:
            raise ClipboardError("Mock clipboard failure")
        self._content = text

    def get_text(self) -> str:
        if self._should_fail:
            raise ClipboardError("Mock clipboard failure")
        return self._content
