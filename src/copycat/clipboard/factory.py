import platform
from typing import Callable, Optional, Type

from copycat.clipboard.base import ClipboardBackend, ClipboardUnavailableError


def get_clipboard_class() -> Type[ClipboardBackend]:
    system = platform.system()

    if system == "Windows":
        from copycat.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif system == "Linux":
        from copycat.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    elif system == "Darwin":
        from copycat.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    else:
        raise ClipboardUnavailableError(f"Platform '{system}' is not supported")


def get_clipboard() -> ClipboardBackend:
    try:
        return get_clipboard_class()()
    except ImportError as e:
        raise ClipboardUnavailableError(
            f"Clipboard support for {platform.system()} is not installed: {e}") from e


class LazyClipboard(ClipboardBackend):
    """Picks the platform backend on first use, so history-only commands
    work on machines without a clipboard."""

    def __init__(self, factory: Callable[[], ClipboardBackend] = get_clipboard):
        self._factory = factory
        self._backend: Optional[ClipboardBackend] = None

    @property
    def name(self) -> str:
        if self._backend is None:
            return "unresolved"
        return self._backend.name

    def resolve(self) -> ClipboardBackend:
        if self._backend is None:
            self._backend = self._factory()
        return self._backend

    def _read_text(self) -> Optional[str]:
        return self.resolve()._read_text()

    def _write_text(self, text: str) -> bool:
        return self.resolve()._write_text(text)
