import logging
import threading
import time
from typing import Callable, Iterable, List, Optional

from copycat.clipboard import ClipboardBackend, LazyClipboard, get_clipboard
from copycat.config import AppConfig
from copycat.models.state import ViewState
from copycat.models.view import EntryView
from copycat.services.dispatcher import ActionDispatcher, Intent
from copycat.services.history_service import HistoryStore
from copycat.services.poller import ClipboardPoller
from copycat.services.query import build_view

logger = logging.getLogger(__name__)

Presenter = Callable[[List[EntryView]], Iterable[Intent]]

# lower bound for the loop's wait when the poll interval is configured as 0
_MIN_WAIT = 0.01


class CopyCatApp:

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        clipboard: Optional[ClipboardBackend] = None,
        clock: Optional[Callable[[], float]] = None,
        clock_ms: Optional[Callable[[], int]] = None,
    ):
        self.config = config or AppConfig()
        self.clipboard = clipboard or LazyClipboard(get_clipboard)
        self._clock = clock or time.time
        self.state = ViewState()
        self.store = HistoryStore(
            self.config.history_file,
            max_history=self.config.max_history,
            clock=self._clock,
        )
        self.poller = ClipboardPoller(
            self.clipboard,
            self.store,
            poll_interval_ms=self.config.poll_interval_ms,
            clock_ms=clock_ms,
        )
        self.dispatcher = ActionDispatcher(self.store, self.clipboard, self.state)
        self._stop_event = threading.Event()
        self.running = False

        self.store.load()
        logger.info(
            f"{len(self.store)} entries loaded from {self.config.history_file}")

    def view(self) -> List[EntryView]:
        return build_view(
            self.store.snapshot(),
            search=self.state.search_query,
            favorites_only=self.state.favorites_only,
            selected_id=self.state.selected_id,
            now=self._clock(),
        )

    def update(self, present: Optional[Presenter] = None) -> List[EntryView]:
        """Run one cycle: poll, build the read-only view, then apply queued intents."""
        self.poller.poll()
        rows = self.view()
        if present is not None:
            self.dispatcher.submit_all(present(rows) or ())
        self.dispatcher.drain()
        return rows

    def status(self) -> str:
        return f"Total entries: {len(self.store)}/{self.store.max_history}"

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self.running = True

    def stop(self) -> None:
        if not self.running:
            return
        self.running = False
        self._stop_event.set()

    def run_forever(self, present: Optional[Presenter] = None) -> None:
        self.start()
        wait = max(self.poller.poll_interval, _MIN_WAIT)

        try:
            while self.running:
                self.update(present)
                self._stop_event.wait(wait)
        except KeyboardInterrupt:
            pass
        finally:
            self.stop()
