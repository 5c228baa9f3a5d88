import logging
import time
from typing import Callable, Optional

from copycat.clipboard.base import ClipboardBackend, ClipboardError
from copycat.config import DEFAULT_POLL_INTERVAL_MS
from copycat.models.entry import ClipboardEntry
from copycat.services.history_service import HistoryStore

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ClipboardPoller:
    """Reads the clipboard at most once per interval and feeds new text to the store.

    Driven by the caller's update cycle; there is no background thread.
    """

    def __init__(
        self,
        clipboard: ClipboardBackend,
        store: HistoryStore,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        clock_ms: Optional[Callable[[], int]] = None,
    ) -> None:
        self.clipboard = clipboard
        self.store = store
        self.poll_interval_ms = poll_interval_ms
        self._clock_ms = clock_ms or _now_ms
        self.last_content = ""
        self.last_poll = 0

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000.0

    def poll(self, now_ms: Optional[int] = None) -> Optional[ClipboardEntry]:
        now = self._clock_ms() if now_ms is None else now_ms
        if now - self.last_poll <= self.poll_interval_ms:
            return None
        self.last_poll = now
        return self.check()

    def check(self) -> Optional[ClipboardEntry]:
        try:
            text = self.clipboard.read_text()
        except ClipboardError as e:
            logger.debug(f"Clipboard read skipped: {e}")
            return None

        if not text or text == self.last_content:
            return None

        self.last_content = text
        entry = self.store.ingest(text)
        if entry is not None:
            logger.info(f"Clipboard copied: {len(text)} chars")
        return entry
