from typing import List

from widgets import draw_box, highlight_attr, put_text


HELP_LINES = [
    "Normal mode",
    "  i        insert a new item",
    "  j / k    select next / previous",
    "  d        delete selected item",
    "  ?        toggle this help",
    "  Esc      quit",
    "Insert mode",
    "  Enter    add the typed text to the list",
    "  Backspace  delete last character",
    "  Esc      back to normal mode (text is kept)",
    "Help",
    "  Esc / Enter / ?  close",
]


class PopupOverlay:
    TITLE = "Popup"

    def __init__(self, lines: List[str] | None = None):
        self.lines: List[str] = list(HELP_LINES if lines is None else lines)

    def draw(self, win):
        if win is None:
            return

        # wipe whatever the main layout painted underneath
        win.erase()
        attr = highlight_attr()
        draw_box(win, self.TITLE, attr)

        h, w = win.getmaxyx()
        max_visible = max(0, h - 2)
        for i, line in enumerate(self.lines[:max_visible]):
            put_text(win, 1 + i, 1, line, w - 2, attr)

        win.noutrefresh()
