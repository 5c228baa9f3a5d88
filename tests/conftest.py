import sys
from pathlib import Path
from typing import List, Optional

import pytest

# ensure src is importable without an install
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from copycat.clipboard.base import ClipboardBackend  # noqa: E402
from copycat.services.history_service import HistoryStore  # noqa: E402


class FakeClipboard(ClipboardBackend):
    """In-memory clipboard; set ``fail_reads``/``fail_writes`` to simulate errors."""

    name = "fake"

    def __init__(self, text: Optional[str] = None):
        self.text = text
        self.fail_reads = False
        self.fail_writes = False
        self.reads = 0
        self.writes: List[str] = []

    def _read_text(self) -> Optional[str]:
        self.reads += 1
        if self.fail_reads:
            raise RuntimeError("clipboard busy")
        return self.text

    def _write_text(self, text: str) -> bool:
        if self.fail_writes:
            return False
        self.writes.append(text)
        self.text = text
        return True


class FakeClock:
    """Seconds clock that advances one second per call unless frozen."""

    def __init__(self, start: float = 1_700_000_000, step: float = 1):
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def history_path(tmp_path):
    return tmp_path / "clipboard_history.json"


@pytest.fixture
def store(history_path, clock):
    return HistoryStore(history_path, max_history=1000, clock=clock)
