"""Cross-platform single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, and the puzzle/queens command keys without
requiring Enter. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


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


# -- shared key mapping --------------------------------------------------------

KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "v": "solve",
    "n": "hint",
    "m": "mode",
    " ": "toggle",
    "\r": "toggle",
    "\n": "toggle",
    "+": "grow",
    "=": "grow",
    "-": "shrink",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return KEY_MAP.get(ch.lower(), ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement / cursor
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r (shuffle / reset)
        "solve"                        — v (run the solver)
        "hint"                         — n (next best move)
        "mode"                         — m (queens: AI ↔ manual)
        "toggle"                       — space / Enter (queens: place/remove)
        "grow", "shrink"               — + / - (queens: board size)
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds. Doubles as
    the pacing delay between solver animation steps.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")

        if ch == "\x1b":
            r2, _, _ = select.select([fd], [], [], 0.1)
            if not r2:
                return "quit"  # bare Escape
            if os.read(fd, 1).decode("utf-8", errors="ignore") != "[":
                return "quit"
            r3, _, _ = select.select([fd], [], [], 0.1)
            if not r3:
                return ""
            ch3 = os.read(fd, 1).decode("utf-8", errors="ignore")
            return _ARROW_MAP.get(ch3, "")

        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
