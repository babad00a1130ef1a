"""Brute-force paragraph guessers: uniform random draws versus frequency-ordered scans."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Sequence

# Ordered by how often each character shows up in English text.
CHAR_LIST: tuple[str, ...] = tuple(
    " eEaAoOiIuUtTnNsShHrRdDlLcCmM.,!?wWfFgGyYpPbBvVkKxXjJqQzZ'\"-:;()[]{}_+=@#$%^&*/1023456789<>|\\`~"
)

AttemptObserver = Callable[[str, str], None]


def smart_guess(word: str, char_list: Sequence[str] = CHAR_LIST, on_attempt: AttemptObserver | None = None) -> str:
    """Rebuild ``word`` by scanning ``char_list`` in order for every position.

    Characters that are not in the list are skipped.
    """
    guess: list[str] = []
    for character in word:
        for candidate in char_list:
            if on_attempt is not None:
                on_attempt("".join(guess), candidate)
            if candidate == character:
                guess.append(character)
                break
    return "".join(guess)


def bogo_guess(
    word: str,
    char_list: Sequence[str] = CHAR_LIST,
    rng: random.Random | None = None,
    on_attempt: AttemptObserver | None = None,
) -> str:
    """Rebuild ``word`` by drawing random candidates until each position matches."""
    available = set(char_list)
    missing = sorted({c for c in word if c not in available})
    if missing:
        raise ValueError(f"Characters not in the candidate list: {''.join(missing)!r}")

    rng = rng or random.Random()
    guess: list[str] = []
    for character in word:
        candidate = None
        while candidate != character:
            candidate = rng.choice(char_list)
            if on_attempt is not None:
                on_attempt("".join(guess), candidate)
        guess.append(character)
    return "".join(guess)


def progress_printer(label: str) -> AttemptObserver:
    def _print(guess: str, candidate: str) -> None:
        print(f"[{label}]\t{guess}{candidate}")

    return _print


@dataclass(frozen=True)
class RaceResult:
    bogo_seconds: float
    smart_seconds: float

    def summary(self) -> str:
        return (
            f"\nBogo Guess finished in: {self.bogo_seconds:.6f}s\n"
            f"Smart Guess finished in: {self.smart_seconds:.6f}s"
        )


def race(word: str, char_list: Sequence[str] = CHAR_LIST, show_progress: bool = False, rng: random.Random | None = None) -> RaceResult:
    start = time.perf_counter()
    bogo_guess(word, char_list, rng=rng, on_attempt=progress_printer("bogo guess") if show_progress else None)
    bogo_seconds = time.perf_counter() - start

    start = time.perf_counter()
    smart_guess(word, char_list, on_attempt=progress_printer("smart guess") if show_progress else None)
    smart_seconds = time.perf_counter() - start

    return RaceResult(bogo_seconds=bogo_seconds, smart_seconds=smart_seconds)
