"""Wordle scoring and random word lookup."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from enum import Enum

from colorama import Fore, Style

DEFAULT_WORD_API = "https://random-word-api.herokuapp.com/word"

_log = logging.getLogger("playground.wordle")


class WordFetchError(RuntimeError):
    pass


class LetterState(str, Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


_STATE_COLORS = {
    LetterState.CORRECT: Fore.GREEN,
    LetterState.PRESENT: Fore.YELLOW,
    LetterState.ABSENT: Fore.LIGHTBLACK_EX,
}


@dataclass(frozen=True)
class LetterResult:
    letter: str
    state: LetterState


def fetch_word(length: int = 5, api_url: str = DEFAULT_WORD_API, timeout_s: float = 10.0) -> str:
    query = urllib.parse.urlencode({"number": 1, "length": length})
    url = f"{api_url}?{query}"
    try:
        with urllib.request.urlopen(url, timeout=timeout_s) as resp:
            payload = json.loads(resp.read().decode("utf-8"))
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise WordFetchError(f"Failed to fetch a word from {api_url}: {exc}") from exc

    if not isinstance(payload, list) or not payload or not isinstance(payload[0], str):
        raise WordFetchError(f"Unexpected word API response: {payload!r}")
    word = payload[0].strip().lower()
    _log.info("word fetched length=%d", len(word), extra={"event": "word_fetched"})
    return word


def score_guess(word: str, guess: str) -> list[LetterResult]:
    """Two-pass scoring: exact matches first, then unused letters elsewhere in the word."""
    if len(word) != len(guess):
        raise ValueError(f"Guess must be {len(word)} letters long")

    remaining: list[str | None] = list(word)
    states: list[LetterState | None] = [None] * len(word)

    for i, (w, g) in enumerate(zip(word, guess)):
        if w == g:
            states[i] = LetterState.CORRECT
            remaining[i] = None

    for i, g in enumerate(guess):
        if states[i] is not None:
            continue
        if g in remaining:
            states[i] = LetterState.PRESENT
            remaining[remaining.index(g)] = None
        else:
            states[i] = LetterState.ABSENT

    return [LetterResult(letter=g, state=s) for g, s in zip(guess, states) if s is not None]


def colorize(results: list[LetterResult]) -> str:
    return "".join(f"{_STATE_COLORS[r.state]}{r.letter}{Style.RESET_ALL}" for r in results)


def length_error(length: int) -> str:
    return f"{Fore.RED}Guess must be {Fore.BLUE}{length}{Fore.RED} letters long.{Style.RESET_ALL}"


class WordleGame:
    def __init__(self, word: str) -> None:
        self.word = word
        self.guess_count = 0
        self.solved = False

    def submit(self, guess: str) -> str:
        """Score ``guess`` and return coloured feedback, or the length warning."""
        if len(guess) != len(self.word):
            return length_error(len(self.word))
        self.guess_count += 1
        if guess == self.word:
            self.solved = True
        return colorize(score_guess(self.word, guess))
