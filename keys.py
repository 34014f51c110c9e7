"""Decode curses input into ``KeyEvent`` values.

curses hands back either a ``str`` (one character) or an ``int`` key code
from ``get_wch``. Alt chords arrive as Esc followed by the chord key, so a
lone Esc is told apart by peeking for a follow-up key without blocking.
"""

import curses
from dataclasses import dataclass


MOD_NONE = 0
MOD_SHIFT = 1
MOD_CTRL = 2
MOD_ALT = 4

ESC = "esc"
ENTER = "enter"
BACKSPACE = "backspace"
TAB = "tab"
RESIZE = "resize"
UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    code: str
    modifiers: int = MOD_NONE

    @property
    def is_char(self) -> bool:
        return len(self.code) == 1

    @property
    def plain(self) -> bool:
        return self.modifiers == MOD_NONE


_SPECIAL_KEYS = {
    curses.KEY_BACKSPACE: (BACKSPACE, MOD_NONE),
    curses.KEY_ENTER: (ENTER, MOD_NONE),
    curses.KEY_RESIZE: (RESIZE, MOD_NONE),
    curses.KEY_UP: ("up", MOD_NONE),
    curses.KEY_DOWN: ("down", MOD_NONE),
    curses.KEY_LEFT: ("left", MOD_NONE),
    curses.KEY_RIGHT: ("right", MOD_NONE),
    curses.KEY_HOME: ("home", MOD_NONE),
    curses.KEY_END: ("end", MOD_NONE),
    curses.KEY_PPAGE: ("pageup", MOD_NONE),
    curses.KEY_NPAGE: ("pagedown", MOD_NONE),
    curses.KEY_DC: ("delete", MOD_NONE),
    curses.KEY_IC: ("insert", MOD_NONE),
    curses.KEY_BTAB: (TAB, MOD_SHIFT),
    curses.KEY_SLEFT: ("left", MOD_SHIFT),
    curses.KEY_SRIGHT: ("right", MOD_SHIFT),
    curses.KEY_SHOME: ("home", MOD_SHIFT),
    curses.KEY_SEND: ("end", MOD_SHIFT),
    curses.KEY_SDC: ("delete", MOD_SHIFT),
}


def decode_key(raw) -> KeyEvent:
    """Map one ``get_wch`` result to a ``KeyEvent`` (Esc is not combined here)."""
    if isinstance(raw, int):
        if raw in _SPECIAL_KEYS:
            code, mods = _SPECIAL_KEYS[raw]
            return KeyEvent(code, mods)
        if curses.KEY_F0 < raw <= curses.KEY_F0 + 63:
            return KeyEvent(f"f{raw - curses.KEY_F0}")
        # getch-style byte values
        if 0 <= raw < 256:
            return decode_key(chr(raw))
        return KeyEvent(UNKNOWN)

    if not isinstance(raw, str) or len(raw) != 1:
        return KeyEvent(UNKNOWN)

    if raw == "\x1b":
        return KeyEvent(ESC)
    if raw in ("\n", "\r"):
        return KeyEvent(ENTER)
    if raw in ("\x7f", "\x08"):
        return KeyEvent(BACKSPACE)
    if raw == "\t":
        return KeyEvent(TAB)

    cp = ord(raw)
    if cp < 32:
        # Ctrl+A .. Ctrl+Z and friends
        return KeyEvent(chr(cp + 96), MOD_CTRL)
    if not raw.isprintable():
        return KeyEvent(UNKNOWN)
    return KeyEvent(raw)


def read_key(win) -> KeyEvent:
    """Block for the next key press on ``win`` and decode it."""
    event = decode_key(win.get_wch())
    if event.code != ESC:
        return event

    # Esc followed immediately by another key is an Alt chord
    win.nodelay(True)
    try:
        follow = win.get_wch()
    except curses.error:
        return event
    finally:
        win.nodelay(False)

    chord = decode_key(follow)
    return KeyEvent(chord.code, chord.modifiers | MOD_ALT)
