from dataclasses import dataclass
from typing import Optional


@dataclass
class ViewState:
    """Presentation state carried between update cycles; never persisted."""
    search_query: str = ""
    favorites_only: bool = False
    selected_id: Optional[int] = None
