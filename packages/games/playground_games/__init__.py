"""Terminal mini-games: Wordle, typing speed test, paragraph guesser."""

from .guesser import CHAR_LIST, RaceResult, bogo_guess, race, smart_guess
from .typing_test import (
    PhraseLoadError,
    TypingResult,
    TypingSession,
    calculate_accuracy,
    calculate_wpm,
    choose_phrase,
    colour_progress,
    load_phrases,
)
from .wordle import LetterResult, LetterState, WordFetchError, WordleGame, fetch_word, score_guess

__all__ = [
    "CHAR_LIST",
    "LetterResult",
    "LetterState",
    "PhraseLoadError",
    "RaceResult",
    "TypingResult",
    "TypingSession",
    "WordFetchError",
    "WordleGame",
    "bogo_guess",
    "calculate_accuracy",
    "calculate_wpm",
    "choose_phrase",
    "colour_progress",
    "fetch_word",
    "load_phrases",
    "race",
    "score_guess",
    "smart_guess",
]
