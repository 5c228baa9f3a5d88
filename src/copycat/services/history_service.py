import logging
import time
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from copycat.config import MAX_HISTORY
from copycat.database.history_file import HistoryFile, HistoryFileError
from copycat.models.entry import ClipboardEntry

logger = logging.getLogger(__name__)


class HistoryStore:
    """Bounded, newest-first clipboard history with favorites and persistence.

    Every successful mutation rewrites the history file. Failures to read or
    write the file are logged and never raised; the in-memory list stays
    authoritative.
    """

    def __init__(
        self,
        history_file: Union[HistoryFile, str, Path],
        max_history: int = MAX_HISTORY,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if max_history < 1:
            raise ValueError(f"max_history must be >= 1, got {max_history}")
        if not isinstance(history_file, HistoryFile):
            history_file = HistoryFile(history_file)
        self.history_file = history_file
        self.max_history = max_history
        self._clock = clock or time.time
        self._entries: List[ClipboardEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, content: object) -> bool:
        return any(entry.content == content for entry in self._entries)

    def snapshot(self) -> Tuple[ClipboardEntry, ...]:
        return tuple(entry.model_copy() for entry in self._entries)

    def contents(self) -> List[str]:
        return [entry.content for entry in self._entries]

    def get(self, entry_id: int) -> Optional[ClipboardEntry]:
        index = self._index_of(entry_id)
        if index is None:
            return None
        return self._entries[index].model_copy()

    def load(self) -> None:
        self._entries = []

        if not self.history_file.exists():
            logger.warning(
                f"History file {self.history_file.path} not found, starting with empty history")
            return

        try:
            entries = self.history_file.read()
        except HistoryFileError as e:
            logger.warning(f"{e}; starting with empty history")
            return

        self._entries = entries
        if len(self._entries) > self.max_history:
            logger.warning(
                f"History file holds {len(self._entries)} entries, "
                f"trimming to {self.max_history}")
            while len(self._entries) > self.max_history:
                self._evict_one()

        logger.debug(f"Loaded {len(self._entries)} entries from {self.history_file.path}")

    def save(self) -> bool:
        try:
            self.history_file.write(self._entries)
        except HistoryFileError as e:
            logger.warning(str(e))
            return False
        return True

    def ingest(self, text: str) -> Optional[ClipboardEntry]:
        if not text or text in self:
            return None

        now = self._clock()
        entry = ClipboardEntry.new(text, now=now, entry_id=self._next_id(int(now)))

        if len(self._entries) >= self.max_history:
            self._evict_one()

        self._entries.insert(0, entry)
        self.save()
        return entry.model_copy()

    def toggle_favorite(self, entry_id: int) -> bool:
        index = self._index_of(entry_id)
        if index is None:
            return False

        entry = self._entries[index]
        entry.favorite = not entry.favorite
        self.save()
        return True

    def delete(self, entry_id: int) -> bool:
        index = self._index_of(entry_id)
        if index is None:
            return False

        del self._entries[index]
        self.save()
        return True

    def clear_all(self) -> None:
        self._entries.clear()
        self.save()

    def clear_non_favorites(self) -> int:
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.favorite]
        self.save()
        return before - len(self._entries)

    def _index_of(self, entry_id: int) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def _next_id(self, candidate: int) -> int:
        # Ids come from whole seconds, so two captures in one second would
        # collide; fall back to one past the largest id in use.
        ids = {entry.id for entry in self._entries}
        if candidate not in ids:
            return candidate
        return max(ids) + 1

    def _evict_one(self) -> None:
        # newest-first, so the oldest non-favorite is the last one found
        for index in range(len(self._entries) - 1, -1, -1):
            if not self._entries[index].favorite:
                evicted = self._entries.pop(index)
                break
        else:
            evicted = self._entries.pop()
        logger.debug(f"Evicted entry {evicted.id}")
