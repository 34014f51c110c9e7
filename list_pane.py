from widgets import draw_box, highlight_attr, put_text, selected_attr


class ListPane:
    TITLE = "List"
    HIGHLIGHT_SYMBOL = ">>"

    def __init__(self):
        # first item shown in the box; kept between frames so scrolling is stable
        self.offset = 0

    def adjust_offset(self, selected: int | None, total: int, rows: int):
        if rows <= 0:
            self.offset = 0
            return
        if selected is not None:
            if selected < self.offset:
                self.offset = selected
            elif selected >= self.offset + rows:
                self.offset = selected - rows + 1
        self.offset = max(0, min(self.offset, max(0, total - rows)))

    def format_row(self, item: str, is_selected: bool) -> str:
        if is_selected:
            return f"{self.HIGHLIGHT_SYMBOL}{item}"
        return " " * len(self.HIGHLIGHT_SYMBOL) + item

    def draw(self, win, items: list[str], selected: int | None, active: bool):
        win.erase()
        base_attr = highlight_attr() if active else 0
        draw_box(win, self.TITLE, base_attr)

        h, w = win.getmaxyx()
        rows = max(0, h - 2)
        inner_w = max(0, w - 2)
        self.adjust_offset(selected, len(items), rows)

        for i, item in enumerate(items[self.offset : self.offset + rows]):
            idx = self.offset + i
            is_selected = idx == selected
            attr = base_attr | selected_attr() if is_selected else base_attr
            put_text(win, 1 + i, 1, self.format_row(item, is_selected), inner_w, attr)

        win.noutrefresh()
