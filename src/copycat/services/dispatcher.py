import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, Union

from copycat.clipboard.base import ClipboardBackend, ClipboardError
from copycat.models.state import ViewState
from copycat.services.history_service import HistoryStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleFavorite:
    id: int


@dataclass(frozen=True)
class SelectAndCopy:
    id: int
    content: str


@dataclass(frozen=True)
class Copy:
    content: str


@dataclass(frozen=True)
class Delete:
    id: int


@dataclass(frozen=True)
class ClearAll:
    pass


@dataclass(frozen=True)
class ClearNonFavorites:
    pass


Intent = Union[ToggleFavorite, SelectAndCopy, Copy, Delete, ClearAll, ClearNonFavorites]


class ActionDispatcher:
    """Queues user intents during a cycle and applies them afterwards, in order."""

    def __init__(
        self,
        store: HistoryStore,
        clipboard: ClipboardBackend,
        state: ViewState,
    ) -> None:
        self.store = store
        self.clipboard = clipboard
        self.state = state
        self._pending: Deque[Intent] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def submit(self, intent: Intent) -> None:
        self._pending.append(intent)

    def submit_all(self, intents: Iterable[Intent]) -> None:
        for intent in intents:
            self.submit(intent)

    def drain(self) -> int:
        applied = 0
        while self._pending:
            self.apply(self._pending.popleft())
            applied += 1
        return applied

    def apply(self, intent: Intent) -> None:
        if isinstance(intent, ToggleFavorite):
            self.store.toggle_favorite(intent.id)
        elif isinstance(intent, SelectAndCopy):
            self.state.selected_id = intent.id
            self.copy_to_clipboard(intent.content)
        elif isinstance(intent, Copy):
            self.copy_to_clipboard(intent.content)
        elif isinstance(intent, Delete):
            if self.store.delete(intent.id) and self.state.selected_id == intent.id:
                self.state.selected_id = None
        elif isinstance(intent, ClearAll):
            self.store.clear_all()
            self.state.selected_id = None
        elif isinstance(intent, ClearNonFavorites):
            self.store.clear_non_favorites()
            if self.state.selected_id is not None and self.store.get(self.state.selected_id) is None:
                self.state.selected_id = None
        else:
            raise TypeError(f"Unknown intent: {intent!r}")

    def copy_to_clipboard(self, content: str) -> bool:
        try:
            self.clipboard.write_text(content)
        except ClipboardError as e:
            logger.warning(f"Failed to copy to clipboard: {e}")
            return False
        return True
