import logging
from pathlib import Path
from typing import List, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from copycat.models.entry import ClipboardEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(List[ClipboardEntry])


class HistoryFileError(Exception):
    pass


class HistoryFile:
    """JSON array of entries on disk, newest-first, rewritten whole on save."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> List[ClipboardEntry]:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise HistoryFileError(f"Failed to read history file {self.path}: {e}") from e

        try:
            entries = _ENTRIES.validate_json(raw)
        except ValidationError as e:
            raise HistoryFileError(
                f"Failed to parse history file {self.path}: "
                f"{e.error_count()} invalid field(s)") from e

        seen = set()
        for entry in entries:
            if entry.content in seen:
                raise HistoryFileError(
                    f"Failed to parse history file {self.path}: "
                    f"duplicate content in entry {entry.id}")
            seen.add(entry.content)
        return entries

    def write(self, entries: Sequence[ClipboardEntry]) -> None:
        try:
            if self.path.parent != Path("."):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_ENTRIES.dump_json(list(entries)))
        except OSError as e:
            raise HistoryFileError(f"Failed to write history file {self.path}: {e}") from e
        logger.debug(f"Saved {len(entries)} entries to {self.path}")
