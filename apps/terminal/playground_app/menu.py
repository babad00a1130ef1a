"""Interactive module picker."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, TextIO

from colorama import Fore, Style

from playground_core import AppConfig, get_logger, prompt
from playground_games import PhraseLoadError, WordFetchError
from playground_renderer import FontLoadError

from . import sessions

_log = get_logger("menu")

# Failures a module reports to the user before returning to the menu.
REPORTED_ERRORS = (FontLoadError, PhraseLoadError, WordFetchError)


@dataclass(frozen=True)
class MenuModule:
    name: str
    run: Callable[[AppConfig], int]

    def __call__(self, cfg: AppConfig) -> int:
        print(f"Running {self.name}...")
        _log.info("module started name=%s", self.name, extra={"event": "module_started"})
        return self.run(cfg)


MODULES: list[MenuModule] = [
    MenuModule("Paragraph Guesser", sessions.run_guesser),
    MenuModule("Text Renderer", sessions.run_renderer),
    MenuModule("Typing Speed Test", sessions.run_typing),
    MenuModule("Wordle", sessions.run_wordle),
]


def run_menu(
    cfg: AppConfig,
    modules: list[MenuModule] | None = None,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Loop over module selection until ``q`` or end of input."""
    modules = MODULES if modules is None else modules
    read = read or (lambda: prompt(""))
    out = out or sys.stdout

    while True:
        out.write("\nSelect a module to run:\n")
        for i, module in enumerate(modules, start=1):
            out.write(f"[{i}] {module.name}\n")
        out.write("[q] Quit\n")
        out.flush()

        try:
            raw = read().strip()
        except EOFError:
            return 0
        if raw.lower() in ("q", "quit", "exit"):
            return 0

        try:
            choice = int(raw)
        except ValueError:
            out.write("Invalid input, please enter a number.\n")
            continue
        if not 1 <= choice <= len(modules):
            out.write("Invalid choice, please try again.\n")
            continue

        try:
            modules[choice - 1](cfg)
        except REPORTED_ERRORS as exc:
            _log.error("module failed: %s", exc, extra={"event": "module_failed"})
            out.write(f"\n{Fore.RED}{exc}{Style.RESET_ALL}\n")
