import curses
from typing import NamedTuple, Sequence


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


MAIN_BANDS = (10, 80, 10)  # input, list, footer (percent of height)
POPUP_PERCENT_X = 60
POPUP_PERCENT_Y = 20


def inset(rect: Rect, margin: int) -> Rect:
    return Rect(
        rect.x + margin,
        rect.y + margin,
        max(0, rect.width - 2 * margin),
        max(0, rect.height - 2 * margin),
    )


def _split_lengths(total: int, percents: Sequence[int]) -> list[int]:
    # floor each share; the last segment takes whatever rounding left over
    sizes = [total * p // 100 for p in percents]
    if sizes:
        sizes[-1] = max(0, total - sum(sizes[:-1]))
    return sizes


def split_vertical(rect: Rect, percents: Sequence[int]) -> list[Rect]:
    out = []
    y = rect.y
    for h in _split_lengths(rect.height, percents):
        out.append(Rect(rect.x, y, rect.width, h))
        y += h
    return out


def split_horizontal(rect: Rect, percents: Sequence[int]) -> list[Rect]:
    out = []
    x = rect.x
    for w in _split_lengths(rect.width, percents):
        out.append(Rect(x, rect.y, w, rect.height))
        x += w
    return out


def centered_rect(percent_x: int, percent_y: int, rect: Rect) -> Rect:
    """Rect covering ``percent_x`` x ``percent_y`` of ``rect``, centered in it."""
    pad_y = (100 - percent_y) // 2
    pad_x = (100 - percent_x) // 2
    middle_row = split_vertical(rect, (pad_y, percent_y, pad_y))[1]
    return split_horizontal(middle_row, (pad_x, percent_x, pad_x))[1]


def main_bands(area: Rect, margin: int = 1) -> list[Rect]:
    return split_vertical(inset(area, margin), MAIN_BANDS)


def _new_win(rect: Rect):
    if rect.empty:
        return None
    return curses.newwin(rect.height, rect.width, rect.y, rect.x)


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()
        self.area = Rect(0, 0, self.W, self.H)

        # layout: input band, list band, reserved footer band, optional popup
        self.input_rect, self.list_rect, self.footer_rect = main_bands(self.area)
        self.popup_rect = centered_rect(POPUP_PERCENT_X, POPUP_PERCENT_Y, self.area)

        # input band owns the cursor while inserting
        self.input_win = _new_win(self.input_rect)

        self.list_win = _new_win(self.list_rect)
        if self.list_win is not None:
            self.list_win.leaveok(True)

        self.footer_win = _new_win(self.footer_rect)
        if self.footer_win is not None:
            self.footer_win.leaveok(True)

        self.popup_win = _new_win(self.popup_rect)
        if self.popup_win is not None:
            self.popup_win.leaveok(True)
