import pyperclip

from catboard.clipboard.base import BaseClipboard
from catboard.extraction.exceptions import ClipboardError


class SystemClipboard(BaseClipboard):
    """OS clipboard via pyperclip."""

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc

    def get_text(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(str(exc)) from exc
