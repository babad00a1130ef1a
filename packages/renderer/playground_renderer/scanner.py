"""Escape and formatting-marker scanner.

Turns marked-up text into a flat list of actions. Markers (``&`` or ``§``
followed by a code) and escapes (``\\`` followed by a character) are always
consumed as a pair, so the second character never gets a second reading.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .models import Rgb, StyleFlag, StyleState
from .palette import MARKER_CHARS, RESET_CODE, STYLE_CODES, lookup_color

ESCAPE_CHAR = "\\"


class ActionKind(str, Enum):
    GLYPH = "glyph"
    NEWLINE = "newline"
    COLOR = "color"
    STYLE = "style"
    RESET = "reset"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    char: str | None = None
    color: Rgb | None = None
    flag: StyleFlag | None = None


NEWLINE = Action(ActionKind.NEWLINE)
RESET = Action(ActionKind.RESET)


def _glyph(char: str) -> Action:
    return Action(ActionKind.GLYPH, char=char)


def _escape(follower: str | None) -> list[Action]:
    if follower is None:
        return [_glyph(ESCAPE_CHAR)]
    if follower == "n":
        return [NEWLINE]
    if follower == "&":
        return [_glyph("&")]
    if follower == ESCAPE_CHAR:
        return [_glyph(ESCAPE_CHAR)]
    return [_glyph(ESCAPE_CHAR), _glyph(follower)]


def _marker(code: str | None) -> list[Action]:
    # A dangling marker at the end of input and unknown codes draw nothing.
    if code is None:
        return []
    color = lookup_color(code)
    if color is not None:
        return [Action(ActionKind.COLOR, color=color)]
    if code in STYLE_CODES:
        return [Action(ActionKind.STYLE, flag=STYLE_CODES[code])]
    if code == RESET_CODE:
        return [RESET]
    return []


def iter_actions(text: str) -> Iterator[Action]:
    chars = iter(text)
    for c in chars:
        if c == ESCAPE_CHAR:
            yield from _escape(next(chars, None))
        elif c in MARKER_CHARS:
            yield from _marker(next(chars, None))
        else:
            yield _glyph(c)


def scan(text: str) -> list[Action]:
    return list(iter_actions(text))


def apply_action(style: StyleState, action: Action) -> StyleState:
    """Return the style in effect after ``action``. Draw actions leave it unchanged."""
    if action.kind is ActionKind.COLOR and action.color is not None:
        return style.with_color(action.color)
    if action.kind is ActionKind.STYLE and action.flag is not None:
        return style.with_flag(action.flag)
    if action.kind is ActionKind.RESET:
        return style.reset()
    return style


def plain_text(text: str) -> str:
    """Strip markers and resolve escapes, keeping newlines as ``\\n``."""
    out: list[str] = []
    for action in iter_actions(text):
        if action.kind is ActionKind.GLYPH and action.char is not None:
            out.append(action.char)
        elif action.kind is ActionKind.NEWLINE:
            out.append("\n")
    return "".join(out)
