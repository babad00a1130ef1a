"""Built-in 16 colour formatting palette."""

from __future__ import annotations

from colorama import Fore, Style
from colorama.ansi import code_to_chars

from .models import Rgb, StyleFlag

MARKER_CHARS = ("&", "§")

COLORS: dict[str, Rgb] = {
    "0": (0, 0, 0),
    "1": (0, 0, 170),
    "2": (0, 170, 0),
    "3": (0, 170, 170),
    "4": (170, 0, 0),
    "5": (170, 0, 170),
    "6": (255, 170, 0),
    "7": (170, 170, 170),
    "8": (85, 85, 85),
    "9": (85, 85, 255),
    "a": (85, 255, 85),
    "b": (85, 255, 255),
    "c": (255, 85, 85),
    "d": (255, 85, 255),
    "e": (255, 255, 85),
    "f": (255, 255, 255),
}

COLOR_NAMES: dict[str, str] = {
    "0": "Black",
    "1": "Dark Blue",
    "2": "Dark Green",
    "3": "Dark Aqua",
    "4": "Dark Red",
    "5": "Dark Purple",
    "6": "Gold",
    "7": "Gray",
    "8": "Dark Gray",
    "9": "Blue",
    "a": "Green",
    "b": "Aqua",
    "c": "Red",
    "d": "Light Purple",
    "e": "Yellow",
    "f": "White",
}

STYLE_CODES: dict[str, StyleFlag] = {
    "l": StyleFlag.BOLD,
    "o": StyleFlag.ITALIC,
    "m": StyleFlag.STRIKETHROUGH,
    "n": StyleFlag.UNDERLINE,
}

RESET_CODE = "r"

# ANSI approximations used when printing the code reference in a terminal.
_ANSI_COLORS: dict[str, str] = {
    "0": Fore.BLACK,
    "1": Fore.BLUE,
    "2": Fore.GREEN,
    "3": Fore.CYAN,
    "4": Fore.RED,
    "5": Fore.MAGENTA,
    "6": Fore.YELLOW,
    "7": Fore.WHITE,
    "8": Fore.LIGHTBLACK_EX,
    "9": Fore.LIGHTBLUE_EX,
    "a": Fore.LIGHTGREEN_EX,
    "b": Fore.LIGHTCYAN_EX,
    "c": Fore.LIGHTRED_EX,
    "d": Fore.LIGHTMAGENTA_EX,
    "e": Fore.LIGHTYELLOW_EX,
    "f": Fore.LIGHTWHITE_EX,
}

# colorama only names bright/dim, so italic, strike and underline use raw SGR codes.
_ANSI_STYLES: dict[str, str] = {
    "l": Style.BRIGHT,
    "o": code_to_chars(3),
    "m": code_to_chars(9),
    "n": code_to_chars(4),
}


def lookup_color(code: str) -> Rgb | None:
    return COLORS.get(code)


def help_text() -> str:
    lines = [f"{Style.BRIGHT}Help Menu:{Style.RESET_ALL}", "", "Color Codes:"]
    for code, name in COLOR_NAMES.items():
        lines.append(f"\t{_ANSI_COLORS[code]}&{code} or §{code}: {name}{Style.RESET_ALL}")
    lines += ["", "Formatting Codes:"]
    for code, flag in STYLE_CODES.items():
        lines.append(f"\t{_ANSI_STYLES[code]}&{code} or §{code}: {flag.value.capitalize()}{Style.RESET_ALL}")
    lines.append(f"\t&{RESET_CODE} or §{RESET_CODE}: Reset all formatting")
    lines += [
        "",
        "Special Characters:",
        "\t\\& for &",
        "\t\\\\ for \\",
        "\t\\n for new line",
    ]
    return "\n".join(lines)
