import time
from typing import Optional

import win32clipboard as wc
import win32con

from copycat.clipboard.base import ClipboardBackend, ClipboardError


class WindowsClipboard(ClipboardBackend):

    name = "win32clipboard"

    def _open(self) -> None:
        for _ in range(3):
            try:
                wc.OpenClipboard()
                return
            except Exception:
                time.sleep(0.05)
        raise ClipboardError("win32clipboard: could not open clipboard")

    def _read_text(self) -> Optional[str]:
        self._open()
        try:
            if not wc.IsClipboardFormatAvailable(win32con.CF_UNICODETEXT):
                return None
            data = wc.GetClipboardData(win32con.CF_UNICODETEXT)
            if isinstance(data, bytes):
                data = data.decode("utf-8", errors="ignore")
            return data
        finally:
            wc.CloseClipboard()

    def _write_text(self, text: str) -> bool:
        self._open()
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(win32con.CF_UNICODETEXT, text)
            return True
        finally:
            wc.CloseClipboard()
