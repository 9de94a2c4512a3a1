"""Console input and output helpers for the interactive calculator."""

from __future__ import annotations

import subprocess
import sys
import time
from typing import Callable, Optional, TextIO


class EndOfInput(EOFError):
    """Raised when the input stream is exhausted."""


def clear_screen() -> None:
    """Clear the terminal by running the system ``clear`` command."""
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class Console:
    """Line-oriented terminal access with replaceable streams, clearing and sleeping."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear: Optional[Callable[[], None]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_screen
        self._sleep = sleep if sleep is not None else time.sleep

    def write(self, text: str) -> None:
        """Write text and flush it immediately."""
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> str:
        """Read one line without its line ending; raise EndOfInput at end of input."""
        line = self._stdin.readline()
        if not line:
            raise EndOfInput("no more input")
        return line.rstrip("\r\n")

    def read_char(self) -> str:
        """Read a line and return its first character, discarding the rest."""
        return self.read_line()[:1]

    def clear(self) -> None:
        """Clear the screen."""
        self._clear()

    def pause(self, seconds: float) -> None:
        """Wait for the given number of seconds."""
        self._sleep(seconds)