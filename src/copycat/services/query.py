import time
from typing import Iterable, List, Optional

from copycat.models.entry import ClipboardEntry
from copycat.models.view import EntryView
from copycat.utils.formatting import format_age, truncate_preview


def filter_entries(
    entries: Iterable[ClipboardEntry],
    search: str = "",
    favorites_only: bool = False,
) -> List[ClipboardEntry]:
    needle = search.lower()
    matched = []
    for entry in entries:
        if favorites_only and not entry.favorite:
            continue
        if needle and needle not in entry.content.lower():
            continue
        matched.append(entry)
    return matched


def build_view(
    entries: Iterable[ClipboardEntry],
    search: str = "",
    favorites_only: bool = False,
    selected_id: Optional[int] = None,
    now: Optional[float] = None,
) -> List[EntryView]:
    """Project entries into display rows, newest-first, without touching the store."""
    now_s = int(time.time() if now is None else now)
    return [
        EntryView(
            id=entry.id,
            content=entry.content,
            preview=truncate_preview(entry.content),
            age=format_age(entry.timestamp, now_s),
            favorite=entry.favorite,
            selected=entry.id == selected_id,
        )
        for entry in filter_entries(entries, search, favorites_only)
    ]
