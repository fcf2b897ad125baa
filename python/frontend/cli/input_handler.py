"""Polled keypress reader for the Rich frontend.

The game loop never blocks on input: it polls with a timeout so that the
same loop can advance the shuffle animation between keys.  Works on
macOS / Linux (select + termios raw mode) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from typing import Callable

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "\r": "enter",
    "\n": "enter",
    " ": "enter",
    "r": "restart",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# Final byte of ``ESC [ X`` on terminals, second byte after the
# ``\xe0`` / ``\x00`` prefix from msvcrt.
_ANSI_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}
_MSVCRT_ARROWS = {"H": "up", "P": "down", "M": "right", "K": "left"}

_ESCAPE_GRACE = 0.1  # seconds to wait for the rest of an escape sequence


def _action(ch: str, follow: Callable[[], str | None]) -> str:
    """Turn the first character of a keypress into an action name.

    *follow* yields the next pending character of the same keypress, or
    ``None`` when nothing more arrives.
    """
    if ch == "\x1b":
        if follow() != "[":
            return "quit"  # bare Escape
        return _ANSI_ARROWS.get(follow() or "", "")
    if ch in ("\x00", "\xe0"):
        return _MSVCRT_ARROWS.get(follow() or "", "")
    return _KEY_MAP.get(ch.lower(), "")


def _poll_posix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def read(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # Unbuffered, so select() keeps seeing the rest of a sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = read(timeout)
        if ch is None:
            return None
        return _action(ch, lambda: read(_ESCAPE_GRACE))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _poll_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = time.monotonic() + timeout
    while not msvcrt.kbhit():
        if time.monotonic() >= end:
            return None
        time.sleep(0.005)
    return _action(
        msvcrt.getwch(),
        lambda: msvcrt.getwch() if msvcrt.kbhit() else None,
    )


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns ``None`` if no key arrived, otherwise one of ``"up"``,
    ``"down"``, ``"left"``, ``"right"`` (arrows / WASD), ``"enter"``
    (Enter / Space), ``"restart"`` (R), ``"quit"`` (Q / Esc / Ctrl-C), or
    ``""`` for keys the game does not use.
    """
    if os.name == "nt":
        return _poll_windows(timeout)
    return _poll_posix(timeout)
