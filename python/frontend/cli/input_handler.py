"""Single-keypress reader for the terminal frontend.

Turns arrow keys, WASD, digits and a few letters into action strings
without waiting for Enter.  Uses tty+termios on macOS / Linux and
msvcrt on Windows.
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "v": "solve",
    "n": "hint",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve_key(ch: str) -> str:
    """Map one raw character to an action string.

    Digits come back unchanged so the caller can treat them as tile
    faces; anything unrecognised maps to ``""``.
    """
    if ch.isdigit():
        return ch
    return _KEY_MAP.get(ch.lower(), "")


def get_key() -> str:
    """Block for one keypress and return its action string.

    Possible return values:
        "up", "down", "left", "right"  — slide a tile
        "1" .. "9"                     — slide the tile with that face
        "hint", "solve", "shuffle"     — solver and board actions
        "quit"                         — q / Ctrl-C / Escape
        ""                             — anything else
    """
    ch = _getch()

    # Unix arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve_key(ch)
