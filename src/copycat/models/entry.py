import time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class ClipboardEntry(BaseModel):
    """One recorded clipboard snapshot.

    Fields are strict so a history file with a wrongly typed value is rejected
    instead of coerced. Empty content is rejected too.
    """
    model_config = ConfigDict(strict=True)

    id: StrictInt
    content: StrictStr = Field(min_length=1)
    timestamp: StrictInt
    favorite: StrictBool

    @classmethod
    def new(cls, content: str, now: Optional[float] = None,
            entry_id: Optional[int] = None) -> "ClipboardEntry":
        timestamp = int(time.time() if now is None else now)
        return cls(
            id=timestamp if entry_id is None else entry_id,
            content=content,
            timestamp=timestamp,
            favorite=False,
        )
