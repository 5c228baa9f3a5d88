"""Service layer for CopyCat."""

from copycat.services.dispatcher import ActionDispatcher
from copycat.services.history_service import HistoryStore
from copycat.services.poller import ClipboardPoller

__all__ = ["ActionDispatcher", "ClipboardPoller", "HistoryStore"]
