"""Line-based terminal prompts."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TextIO


def prompt(text: str, newline: bool = False, stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Print ``text`` and read one line, returned stripped.

    Raises ``EOFError`` when input is exhausted.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(f"{text}\n" if newline else text)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EOFError("input closed")
    return line.strip()


def menu(
    options: Sequence[str],
    read: Callable[[], str] | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Show numbered options and return the 1-based choice, re-asking until valid."""
    stdout = stdout or sys.stdout
    read = read or (lambda: prompt(""))

    stdout.write("\n")
    for i, option in enumerate(options, start=1):
        stdout.write(f"[{i}] {option}\n")
    stdout.flush()

    while True:
        raw = read()
        try:
            choice = int(raw)
        except ValueError:
            stdout.write("\nInvalid input, please enter a choice from the list.\n")
            continue
        if 1 <= choice <= len(options):
            return choice
        stdout.write("\nInvalid choice, please try again.\n")
