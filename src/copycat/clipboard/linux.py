import os
import shutil
import subprocess
from typing import List, Optional, Tuple

from copycat.clipboard.base import ClipboardBackend, ClipboardUnavailableError


class LinuxClipboard(ClipboardBackend):
    _READ_TIMEOUT = 1.5
    _WRITE_TIMEOUT = 2.0

    def __init__(self):
        self.name, self._read_cmd, self._write_cmd = self._detect_tool()

    def _detect_tool(self) -> Tuple[str, List[str], List[str]]:
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste") and shutil.which("wl-copy"):
            return (
                "wl-clipboard",
                ["wl-paste", "--no-newline", "--type", "text"],
                ["wl-copy", "--type", "text/plain;charset=utf-8"],
            )
        if shutil.which("xclip"):
            return (
                "xclip",
                ["xclip", "-selection", "clipboard", "-o"],
                ["xclip", "-selection", "clipboard", "-i"],
            )
        if shutil.which("xsel"):
            return (
                "xsel",
                ["xsel", "--clipboard", "--output"],
                ["xsel", "--clipboard", "--input"],
            )
        raise ClipboardUnavailableError(
            "No clipboard tool found; install wl-clipboard, xclip or xsel")

    def _read_text(self) -> Optional[str]:
        data = self._run_command(self._read_cmd, timeout=self._READ_TIMEOUT)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore")

    def _write_text(self, text: str) -> bool:
        # xclip and wl-copy fork a child that keeps serving the selection;
        # it must not inherit pipes we wait on
        try:
            subprocess.run(
                self._write_cmd,
                input=text.encode("utf-8"),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self._WRITE_TIMEOUT,
            )
            return True
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return False

    def _run_command(self, command: List[str], timeout: float) -> Optional[bytes]:
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=timeout,
            )
            return result.stdout
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError):
            return None
