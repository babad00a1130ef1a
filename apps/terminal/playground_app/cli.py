"""CLI entrypoints for the playground menu, text renderer, and mini-games."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

import colorama
from colorama import Fore, Style

from playground_core import config_path, configure_logging, get_logger, install_crash_hooks, load_config, save_config
from playground_games import PhraseLoadError, WordFetchError
from playground_renderer import BACKGROUND_NAMES, FontLoadError, help_text, save_image_to_file

from . import sessions

_log = get_logger("cli")


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def cmd_menu(_args: argparse.Namespace) -> int:
    from .menu import run_menu

    return run_menu(load_config())


def cmd_codes(_args: argparse.Namespace) -> int:
    print(help_text())
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config()
    if args.output_dir:
        cfg.renderer.output_dir = args.output_dir

    rasterizer = sessions.build_rasterizer(cfg, point_size=args.point_size)
    background = sessions.build_background(cfg, name=args.background)
    image = rasterizer.render_image(args.text, background)

    payload: dict[str, object] = {"success": True, "width": image.width, "height": image.height}
    if args.clipboard:
        from .preview import save_image_to_clipboard

        payload["clipboard"] = save_image_to_clipboard(image)
        payload["success"] = bool(payload["clipboard"])
    if args.out or not args.clipboard:
        payload["path"] = str(save_image_to_file(image, args.out or "render", cfg.renderer.output_dir))

    _print_json(payload)
    return 0 if payload["success"] else 1


def cmd_preview(_args: argparse.Namespace) -> int:
    return sessions.run_renderer(load_config())


def cmd_wordle(args: argparse.Namespace) -> int:
    cfg = load_config()
    if args.length:
        cfg.wordle.word_length = args.length
    return sessions.run_wordle(cfg)


def cmd_typing(args: argparse.Namespace) -> int:
    cfg = load_config()
    if args.phrases:
        cfg.typing.phrases_path = args.phrases
    return sessions.run_typing(cfg)


def cmd_guess(args: argparse.Namespace) -> int:
    cfg = load_config()
    if args.show_progress:
        cfg.guesser.show_progress = True
    if args.word is None:
        return sessions.run_guesser(cfg)
    return sessions.run_guesser(cfg, read=lambda: args.word)


def cmd_config(args: argparse.Namespace) -> int:
    if args.config_cmd == "path":
        print(config_path())
        return 0
    cfg = load_config()
    if args.config_cmd == "init":
        print(save_config(cfg))
        return 0
    _print_json(asdict(cfg))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="playground", description="Terminal mini-program playground")
    sub = parser.add_subparsers(dest="command", required=True)

    menu_cmd = sub.add_parser("menu", help="Pick a mini-program from the menu")
    menu_cmd.set_defaults(func=cmd_menu)

    codes_cmd = sub.add_parser("codes", help="Print the formatting code reference")
    codes_cmd.set_defaults(func=cmd_codes)

    render_cmd = sub.add_parser("render", help="Render formatting-code text to an image")
    render_cmd.add_argument("text", help="Text with &/§ codes and \\n, \\&, \\\\ escapes")
    render_cmd.add_argument("--out", default=None, help="Output file name (saved under the output directory)")
    render_cmd.add_argument("--output-dir", default=None, help="Override the configured output directory")
    render_cmd.add_argument("--clipboard", action="store_true", help="Copy the image to the clipboard")
    render_cmd.add_argument("--background", choices=list(BACKGROUND_NAMES), default=None)
    render_cmd.add_argument("--point-size", type=float, default=None)
    render_cmd.set_defaults(func=cmd_render)

    preview_cmd = sub.add_parser("preview", help="Type text with a live preview window, then save it")
    preview_cmd.set_defaults(func=cmd_preview)

    wordle_cmd = sub.add_parser("wordle", help="Play Wordle with a random word")
    wordle_cmd.add_argument("--length", type=int, default=None)
    wordle_cmd.set_defaults(func=cmd_wordle)

    typing_cmd = sub.add_parser("typing", help="Run the typing speed test")
    typing_cmd.add_argument("--phrases", default=None, help="Path to a phrases JSON file")
    typing_cmd.set_defaults(func=cmd_typing)

    guess_cmd = sub.add_parser("guess", help="Race the bogo and smart paragraph guessers")
    guess_cmd.add_argument("word", nargs="?", default=None)
    guess_cmd.add_argument("--show-progress", action="store_true", help="Print every attempt (much slower)")
    guess_cmd.set_defaults(func=cmd_guess)

    config_cmd = sub.add_parser("config", help="Inspect or initialize settings")
    config_cmd.add_argument("config_cmd", nargs="?", choices=["show", "path", "init"], default="show")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False)
    install_crash_hooks()
    colorama.just_fix_windows_console()

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (FontLoadError, PhraseLoadError, WordFetchError) as exc:
        _log.error("command failed: %s", exc, extra={"event": "command_failed"})
        print(f"{Fore.RED}{exc}{Style.RESET_ALL}", file=sys.stderr)
        return 1
    except EOFError:
        print()
        return 0
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
