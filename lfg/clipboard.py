"""System clipboard access through platform clipboard programs."""

from __future__ import annotations

import subprocess
import sys
from typing import Callable, List, Sequence


class ClipboardError(RuntimeError):
    """Raised when the clipboard program is missing or fails."""


class Clipboard:
    """Pipes text into ``pbcopy``, ``clip.exe`` or ``xclip`` depending on platform."""

    def __init__(
        self,
        runner: Callable[[Sequence[str], str], None] | None = None,
        *,
        platform: str | None = None,
    ) -> None:
        self._runner = runner or self._default_runner
        self.platform = platform or sys.platform

    def command(self) -> List[str]:
        if self.platform == "darwin":
            return ["pbcopy"]
        if self.platform == "win32":
            return ["clip.exe"]
        return ["xclip", "-selection", "clipboard"]

    def copy(self, text: str) -> None:
        args = self.command()
        try:
            self._runner(args, text)
        except FileNotFoundError as exc:
            raise ClipboardError(f"Clipboard program not found: {args[0]}") from exc
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(
                f"Clipboard program {args[0]} exited with status {exc.returncode}"
            ) from exc

    @staticmethod
    def _default_runner(args: Sequence[str], text: str) -> None:
        subprocess.run(list(args), input=text, text=True, check=True)


__all__ = ["Clipboard", "ClipboardError"]
