from catboard.clipboard.base import BaseClipboard
from catboard.clipboard.mock_clipboard import MockClipboard
from catboard.clipboard.system_clipboard import SystemClipboard


def copy_to_clipboard(text: str, clipboard: BaseClipboard | None = None) -> None:
    """Copy text to the given clipboard, or the system one."""
    target = clipboard if clipboard is not None else SystemClipboard()
    target.set_text(text)


__all__ = ["BaseClipboard", "MockClipboard", "SystemClipboard", "copy_to_clipboard"]
