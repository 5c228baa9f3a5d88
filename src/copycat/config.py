import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_HISTORY_FILE = "clipboard_history.json"
MAX_HISTORY = 1000
DEFAULT_POLL_INTERVAL_MS = 500


def _to_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class AppConfig:
    history_file: Path = Path(DEFAULT_HISTORY_FILE)
    max_history: int = MAX_HISTORY
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, *, env_path: Optional[Path] = None) -> "AppConfig":
        load_dotenv(dotenv_path=env_path, override=False)

        history_file = os.getenv("COPYCAT_HISTORY_FILE") or DEFAULT_HISTORY_FILE
        log_level = (os.getenv("COPYCAT_LOG_LEVEL") or cls.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"COPYCAT_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            history_file=Path(history_file),
            max_history=_to_int("COPYCAT_MAX_HISTORY", MAX_HISTORY, minimum=1),
            poll_interval_ms=_to_int(
                "COPYCAT_POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS, minimum=0),
            log_level=log_level,
        )
