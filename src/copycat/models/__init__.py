from copycat.models.entry import ClipboardEntry
from copycat.models.state import ViewState
from copycat.models.view import EntryView

__all__ = ["ClipboardEntry", "EntryView", "ViewState"]
