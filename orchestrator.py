import curses
import logging

from app_state import AppState, Mode
from input_pane import InputPane
from key_dispatcher import KeyDispatcher
from keys import RESIZE, read_key
from list_pane import ListPane
from overlay import PopupOverlay
from screen_layout import ScreenLayout
from widgets import draw_box, init_colors


logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(self, stdscr, app_state: AppState):
        self.stdscr = stdscr
        self.stdscr.keypad(True)
        # block until a key arrives; no timeouts
        self.stdscr.nodelay(False)
        self.stdscr.timeout(-1)
        init_colors()

        self.state = app_state
        self.layout = ScreenLayout(stdscr)
        self.dispatcher = KeyDispatcher(app_state)

        self.input = InputPane()
        self.list = ListPane()
        self.popup = PopupOverlay()

    # ---------------- UI ----------------

    def _set_cursor_visible(self, visible: bool):
        try:
            curses.curs_set(1 if visible else 0)
        except curses.error:
            pass

    def redraw(self):
        layout = self.layout
        mode = self.state.mode

        self.stdscr.erase()
        self.stdscr.noutrefresh()

        if layout.input_win is not None:
            self.input.draw(layout.input_win, self.state.input, active=(mode is Mode.INSERT))
        if layout.list_win is not None:
            self.list.draw(
                layout.list_win,
                self.state.items,
                self.state.selected,
                active=(mode is Mode.NORMAL),
            )
        if layout.footer_win is not None:
            layout.footer_win.erase()
            draw_box(layout.footer_win)
            layout.footer_win.noutrefresh()

        if mode is Mode.POPUP:
            self.popup.draw(layout.popup_win)

        inserting = mode is Mode.INSERT and layout.input_win is not None
        self._set_cursor_visible(inserting)
        if inserting:
            # input window is flushed last so the terminal cursor lands in it
            self.input.place_cursor(layout.input_win, self.state.input)

        curses.doupdate()

    def _resize(self):
        curses.update_lines_cols()
        self.layout = ScreenLayout(self.stdscr)
        self.stdscr.clear()

    # ---------------- main loop ----------------

    def run(self):
        logger.info("session started with %d items", len(self.state.items))
        self.stdscr.clear()
        self.stdscr.refresh()

        while True:
            self.redraw()
            event = read_key(self.stdscr)

            if event.code == RESIZE:
                self._resize()
                continue

            if self.dispatcher.dispatch(event):
                break

        logger.info("session ended with %d items", len(self.state.items))
