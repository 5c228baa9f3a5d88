from copycat.clipboard.base import (
    ClipboardBackend,
    ClipboardError,
    ClipboardUnavailableError,
)
from copycat.clipboard.factory import LazyClipboard, get_clipboard_class, get_clipboard

__all__ = [
    'ClipboardBackend',
    'ClipboardError',
    'ClipboardUnavailableError',
    'LazyClipboard',
    'get_clipboard_class',
    'get_clipboard',
]
