from abc import ABC, abstractmethod
from typing import Optional


class ClipboardError(Exception):
    pass


class ClipboardUnavailableError(ClipboardError):
    pass


class ClipboardBackend(ABC):

    name = "base"

    @abstractmethod
    def _read_text(self) -> Optional[str]:
        pass

    @abstractmethod
    def _write_text(self, text: str) -> bool:
        pass

    def resolve(self) -> "ClipboardBackend":
        return self

    def read_text(self) -> str:
        try:
            text = self._read_text()
        except ClipboardError:
            raise
        except Exception as e:
            raise ClipboardError(f"{self.name}: clipboard read failed: {e}") from e

        if not text:
            raise ClipboardError(f"{self.name}: clipboard is empty or holds no text")
        return text

    def write_text(self, text: str) -> None:
        try:
            ok = self._write_text(text)
        except ClipboardError:
            raise
        except Exception as e:
            raise ClipboardError(f"{self.name}: clipboard write failed: {e}") from e

        if not ok:
            raise ClipboardError(f"{self.name}: clipboard could not be set")
