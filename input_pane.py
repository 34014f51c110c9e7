import curses

from widgets import display_width, draw_box, highlight_attr, put_text, tail_to_width


class InputPane:
    TITLE = "Input"

    def visible_text(self, win, text: str) -> str:
        _, w = win.getmaxyx()
        inner_w = max(0, w - 2)
        if display_width(text) < inner_w:
            return text
        # keep the tail in view, leaving a cell for the cursor
        return tail_to_width(text, inner_w - 1)

    def cursor_col(self, win, text: str) -> int:
        """Window column right after the last visible character."""
        return 1 + display_width(self.visible_text(win, text))

    def draw(self, win, text: str, active: bool):
        win.erase()
        attr = highlight_attr() if active else 0
        draw_box(win, self.TITLE, attr)

        h, w = win.getmaxyx()
        if h >= 3:
            put_text(win, 1, 1, self.visible_text(win, text), w - 2, attr)
        win.noutrefresh()

    def place_cursor(self, win, text: str):
        h, w = win.getmaxyx()
        if h < 3:
            return
        col = min(self.cursor_col(win, text), max(0, w - 1))
        try:
            win.move(1, col)
        except curses.error:
            pass
        win.noutrefresh()
