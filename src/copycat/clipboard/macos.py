from typing import Optional

from AppKit import NSPasteboard, NSPasteboardTypeString

from copycat.clipboard.base import ClipboardBackend


class MacOSClipboard(ClipboardBackend):

    name = "NSPasteboard"

    def __init__(self):
        self._pasteboard = NSPasteboard.generalPasteboard()

    def _read_text(self) -> Optional[str]:
        if NSPasteboardTypeString not in (self._pasteboard.types() or []):
            return None
        text = self._pasteboard.stringForType_(NSPasteboardTypeString)
        return str(text) if text else None

    def _write_text(self, text: str) -> bool:
        self._pasteboard.clearContents()
        return bool(self._pasteboard.setString_forType_(text, NSPasteboardTypeString))
