import curses

from wcwidth import wcswidth, wcwidth


PAIR_HIGHLIGHT = 1


def init_colors():
    try:
        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(PAIR_HIGHLIGHT, curses.COLOR_YELLOW, -1)
    except curses.error:
        pass


def highlight_attr() -> int:
    try:
        return curses.color_pair(PAIR_HIGHLIGHT)
    except curses.error:
        return curses.A_BOLD


def selected_attr() -> int:
    return curses.A_ITALIC if hasattr(curses, "A_ITALIC") else curses.A_REVERSE


def char_width(ch: str) -> int:
    w = wcwidth(ch)
    return w if w > 0 else 0


def display_width(text: str) -> int:
    w = wcswidth(text)
    if w >= 0:
        return w
    # wcswidth gives up on control chars; count the rest
    return sum(char_width(ch) for ch in text)


def clip_to_width(text: str, width: int) -> str:
    """Longest prefix of ``text`` that fits in ``width`` terminal cells."""
    if width <= 0:
        return ""
    used = 0
    out = []
    for ch in text:
        cw = char_width(ch)
        if used + cw > width:
            break
        out.append(ch)
        used += cw
    return "".join(out)


def tail_to_width(text: str, width: int) -> str:
    """Longest suffix of ``text`` that fits in ``width`` terminal cells."""
    if width <= 0:
        return ""
    used = 0
    start = len(text)
    for idx in range(len(text) - 1, -1, -1):
        cw = char_width(text[idx])
        if used + cw > width:
            break
        used += cw
        start = idx
    return text[start:]


def put_text(win, y: int, x: int, text: str, width: int, attr: int = 0):
    clipped = clip_to_width(text, width)
    if not clipped:
        return
    try:
        win.addnstr(y, x, clipped, len(clipped), attr)
    except curses.error:
        pass


def draw_box(win, title: str | None = None, attr: int = 0):
    """Border around the whole window with an optional title in the top edge."""
    h, w = win.getmaxyx()
    if h < 2 or w < 2:
        return
    win.attron(attr)
    try:
        win.box()
    except curses.error:
        pass
    finally:
        win.attroff(attr)
    if title:
        put_text(win, 0, 1, title, w - 2, attr)
