from dataclasses import dataclass


@dataclass(frozen=True)
class EntryView:
    """Display-ready row handed to the presentation layer for one cycle."""
    id: int
    content: str
    preview: str
    age: str
    favorite: bool
    selected: bool
