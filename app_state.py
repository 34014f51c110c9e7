import logging
from enum import Enum
from typing import Iterable


logger = logging.getLogger(__name__)


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"
    POPUP = "popup"


class AppState:
    def __init__(self, items: Iterable[str] | None = None, selected: int | None = 0):
        self.items: list[str] = list(items or [])
        self.input = ""
        self.mode = Mode.NORMAL

        self.selected: int | None = None
        if self.items:
            idx = selected if selected is not None else 0
            self.selected = max(0, min(idx, len(self.items) - 1))

    @property
    def selected_item(self) -> str | None:
        if self.selected is None:
            return None
        return self.items[self.selected]

    # ---------- modes ----------
    def enter_insert_mode(self):
        self._set_mode(Mode.INSERT)

    def enter_normal_mode(self):
        self._set_mode(Mode.NORMAL)

    def enter_popup_mode(self):
        self._set_mode(Mode.POPUP)

    def _set_mode(self, mode: Mode):
        if mode is not self.mode:
            logger.debug("mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    # ---------- selection ----------
    def select_next(self):
        if self.selected is None:
            return
        self.selected = (self.selected + 1) % len(self.items)

    def select_previous(self):
        if self.selected is None:
            return
        self.selected = (self.selected - 1 + len(self.items)) % len(self.items)

    # ---------- input buffer ----------
    def append_char(self, ch: str):
        self.input += ch

    def backspace(self):
        self.input = self.input[:-1]

    # ---------- list mutation ----------
    def commit_input(self):
        self.items.append(self.input)
        logger.debug("committed item %r (%d items)", self.input, len(self.items))
        self.input = ""
        if self.selected is None:
            self.selected = 0
        self.enter_normal_mode()

    def delete_selected(self):
        if self.selected is None:
            return
        idx = self.selected
        removed = self.items.pop(idx)
        logger.debug("deleted item %r at %d", removed, idx)

        if not self.items:
            self.selected = None
        elif idx == len(self.items):
            # removed the last row; wrap back onto the new last row
            self.select_previous()
