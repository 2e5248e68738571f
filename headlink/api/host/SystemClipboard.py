"""Clipboard sink backed by the platform clipboard utility."""

import platform
import shutil
import subprocess

from ..link.LinkError import ClipboardWriteFailed
from ._AbstractClipboardSink import _AbstractClipboardSink

# Tried in order on Linux; first one on PATH wins
_LINUX_COMMANDS = (
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
)


class SystemClipboard(_AbstractClipboardSink):
    """Pipe text into pbcopy, clip, wl-copy, xclip or xsel."""

    def __init__(self, timeout: float = 5.0):
        self.timeout = timeout

    @staticmethod
    def _command() -> list[str] | None:
        system = platform.system().lower()
        if system == "darwin":
            return ["pbcopy"]
        if system == "windows":
            return ["clip"]
        for command in _LINUX_COMMANDS:
            if shutil.which(command[0]):
                return list(command)
        return None

    def write(self, text: str) -> None:
        command = self._command()
        if command is None:
            raise ClipboardWriteFailed("Failed to copy link to clipboard: no clipboard utility found")
        try:
            subprocess.run(command, input=text, text=True, check=True, capture_output=True, timeout=self.timeout)
        except (OSError, subprocess.SubprocessError) as exc:
            raise ClipboardWriteFailed(f"Failed to copy link to clipboard: {exc}") from exc
