"""Line-oriented IO used by the command shell."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO


class ShellIO(Protocol):
    """Where the shell reads commands and text from and writes output to."""

    def read_line(self, prompt: str = "") -> Optional[str]:
        """Return one line without its terminator, or ``None`` at end of input."""
        ...

    def write(self, text: str) -> None:
        ...


class StreamIO:
    """``ShellIO`` over a pair of text streams (stdin/stdout by default)."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self, prompt: str = "") -> Optional[str]:
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()
        raw = self.stdin.readline()
        if not raw:
            return None
        return raw.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()
