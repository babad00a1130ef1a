"""Interactive runs of each mini-program."""

from __future__ import annotations

import curses
import sys
import time
from typing import Callable, TextIO

from colorama import Cursor, Fore, Style, ansi
from PIL import Image

from playground_core import AppConfig, get_logger, menu, prompt
from playground_games import (
    TypingResult,
    TypingSession,
    WordleGame,
    choose_phrase,
    colour_progress,
    fetch_word,
    load_phrases,
    race,
)
from playground_renderer import FontSet, TextRasterizer, help_text, load_background, plain_text, save_image_to_file

_log = get_logger("sessions")

Reader = Callable[[], str]


def build_rasterizer(cfg: AppConfig, point_size: float | None = None) -> TextRasterizer:
    r = cfg.renderer
    fonts = FontSet.load(r.font_paths, point_size or r.point_size)
    return TextRasterizer(fonts, left_margin=r.left_margin, baseline=r.baseline, line_spacing=r.line_spacing)


def build_background(cfg: AppConfig, name: str | None = None) -> Image.Image:
    r = cfg.renderer
    image_path = None if name else r.background_image
    return load_background(image_path, name or r.background, r.width, r.height)


def run_renderer(cfg: AppConfig, read: Reader | None = None, out: TextIO | None = None) -> int:
    from .preview import run_preview, save_image_to_clipboard

    out = out or sys.stdout
    read = read or (lambda: prompt(""))
    rasterizer = build_rasterizer(cfg)
    background = build_background(cfg)

    out.write(help_text() + "\n")
    out.flush()
    result = run_preview(rasterizer, background)
    if result is None:
        out.write("\nRender cancelled.\n")
        return 0

    text, image = result
    _log.info("render accepted chars=%d", len(plain_text(text)), extra={"event": "render_accepted"})
    choice = menu(["Save to clipboard", "Save as file"], read=read, stdout=out)
    if choice == 1:
        if save_image_to_clipboard(image):
            out.write(f"\n{Fore.GREEN}Success!{Style.RESET_ALL} Image copied to clipboard\n")
            return 0
        out.write(f"\n{Fore.RED}Failed{Style.RESET_ALL} to copy image to clipboard\n")
        return 1

    out.write("\nEnter the filename to save the image as:\n")
    out.flush()
    path = save_image_to_file(image, read(), cfg.renderer.output_dir)
    out.write(f"\n{Fore.GREEN}Success!{Style.RESET_ALL} File saved at: {path}\n")
    return 0


def run_wordle(cfg: AppConfig, read: Reader | None = None, out: TextIO | None = None, word: str | None = None) -> int:
    out = out or sys.stdout
    read = read or (lambda: prompt(""))
    game = WordleGame(word or fetch_word(cfg.wordle.word_length, cfg.wordle.api_url, cfg.wordle.timeout_s))

    out.write("\nEnter your guess:\n")
    out.flush()
    while not game.solved:
        guess = read().lower()
        # Replace the echoed guess with its scored version.
        out.write(Cursor.UP(1) + ansi.clear_line() + game.submit(guess) + "\n")
        out.flush()

    out.write(f"\nCongratulations! You guessed the word in {game.guess_count} attempts\n")
    _log.info("wordle solved guesses=%d", game.guess_count, extra={"event": "wordle_solved"})
    return 0


def run_guesser(cfg: AppConfig, read: Reader | None = None, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    read = read or (lambda: prompt(""))
    out.write("Please enter a word: \n")
    out.flush()
    word = read()

    try:
        result = race(word, show_progress=cfg.guesser.show_progress)
    except ValueError as exc:
        out.write(f"\n{exc}\n")
        return 1
    out.write(result.summary() + "\n")
    return 0


def _draw_typing(stdscr, session: TypingSession) -> None:
    stdscr.erase()
    _, width = stdscr.getmaxyx()
    cols = max(width - 1, 1)
    for i, state in enumerate(session.char_states()):
        y, x = divmod(i, cols)
        if state is None:
            stdscr.addstr(y, x, session.phrase[i], curses.A_DIM)
        else:
            stdscr.addstr(y, x, session.typed[i], curses.color_pair(1 if state else 2))
    footer = len(session.phrase) // cols + 2
    stdscr.addstr(footer, 0, "Esc to stop", curses.A_DIM)
    stdscr.refresh()


def _typing_loop(stdscr, phrase: str, poll_ms: int) -> tuple[TypingSession, TypingResult]:
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_GREEN, -1)
    curses.init_pair(2, curses.COLOR_RED, -1)
    stdscr.timeout(poll_ms)

    session = TypingSession(phrase)
    _draw_typing(stdscr, session)
    start = time.perf_counter()

    while not session.complete:
        try:
            key = stdscr.get_wch()
        except curses.error:
            # Poll timeout, no key pressed.
            continue
        if key == "\x1b":
            session.cancel()
        elif key in ("\x7f", "\b", curses.KEY_BACKSPACE):
            session.backspace()
        elif isinstance(key, str) and key.isprintable():
            session.type_char(key)
        else:
            continue
        _draw_typing(stdscr, session)

    return session, session.results(time.perf_counter() - start)


def run_typing(cfg: AppConfig, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    phrase = choose_phrase(load_phrases(cfg.typing.phrases_path))
    session, result = curses.wrapper(_typing_loop, phrase, cfg.typing.poll_ms)
    _log.info("typing test finished wpm=%.2f accuracy=%.2f", result.wpm, result.accuracy, extra={"event": "typing_finished"})
    out.write("\n" + colour_progress(session.typed, session.phrase) + "\n\n" + result.summary() + "\n")
    return 0
