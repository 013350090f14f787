"""
Line based console I/O for the interactive menu.

Input is read one full line at a time, so nothing typed after a number can
leak into the next read. Output goes through ``click.echo``; when no streams
are injected, sys.stdin and sys.stdout are looked up at call time.
"""

import re
import sys
from typing import Optional, TextIO

import click

from coinflip.core.setup import logger

PAUSE_PROMPT = "\nPress Enter to continue..."

# Leading integer on the line; anything after it is ignored.
_INT_RE = re.compile(r"\s*([+-]?\d+)")


class InputClosedError(EOFError):
    """Raised when the input stream ends while a value is still required."""


def parse_int(line: str) -> Optional[int]:
    """Return the leading integer of ``line`` or None if there is none."""
    match = _INT_RE.match(line)
    if match is None:
        return None
    return int(match.group(1))


class Console:
    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: bool = True,
    ):
        self._stdin = stdin
        self._stdout = stdout
        self.clear_screen = clear_screen

    @property
    def stdin(self) -> TextIO:
        if self._stdin is not None:
            return self._stdin
        return sys.stdin

    def write(self, text: str = "", nl: bool = True) -> None:
        click.echo(text, file=self._stdout, nl=nl)

    def error(self, text: str) -> None:
        click.echo(text, err=True)

    def readline(self) -> Optional[str]:
        """Read one line without its terminator; None at end of input."""
        line = self.stdin.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def get_valid_input(self, min_value: int, max_value: int) -> int:
        """Block until the user enters an integer within [min_value, max_value].

        Blank lines are skipped silently. Malformed or out of range lines get
        a re-prompt. Raises InputClosedError if input ends first.
        """
        while True:
            line = self.readline()
            if line is None:
                raise InputClosedError(
                    f"input closed while waiting for a number between {min_value} and {max_value}"
                )
            if not line.strip():
                continue
            value = parse_int(line)
            if value is not None and min_value <= value <= max_value:
                return value
            logger.trace(f"Rejected input {line!r}")
            self.write(f"Please enter a number between {min_value} and {max_value}: ", nl=False)

    def pause(self) -> None:
        """Wait for Enter. End of input simply releases the pause."""
        self.write(PAUSE_PROMPT)
        self.readline()

    def clear(self) -> None:
        if self.clear_screen:
            click.clear()


__all__ = ["Console", "InputClosedError", "PAUSE_PROMPT", "parse_int"]
