import logging

from app_state import AppState, Mode
from keys import BACKSPACE, ENTER, ESC, KeyEvent


logger = logging.getLogger(__name__)


class KeyDispatcher:
    """Route key events to the handler of the active mode.

    ``dispatch`` returns True when the program should quit. Keys that carry
    modifiers, and keys with no binding in the active mode, are ignored.
    """

    def __init__(self, state: AppState):
        self.state = state
        self._handlers = {
            Mode.NORMAL: self._handle_normal,
            Mode.INSERT: self._handle_insert,
            Mode.POPUP: self._handle_popup,
        }
        missing = [m for m in Mode if m not in self._handlers]
        if missing:
            raise RuntimeError(f"no key handler for modes: {missing}")

    def dispatch(self, event: KeyEvent) -> bool:
        if not event.plain:
            logger.debug("ignored chord %s (mods=%d)", event.code, event.modifiers)
            return False
        return bool(self._handlers[self.state.mode](event))

    # ---------- normal ----------
    def _handle_normal(self, event: KeyEvent):
        code = event.code
        if code == ESC:
            logger.info("quit requested")
            return True
        if code == "i":
            self.state.enter_insert_mode()
        elif code == "j":
            self.state.select_next()
        elif code == "k":
            self.state.select_previous()
        elif code == "d":
            self.state.delete_selected()
        elif code == "?":
            self.state.enter_popup_mode()
        return False

    # ---------- insert ----------
    def _handle_insert(self, event: KeyEvent):
        code = event.code
        if code == ESC:
            # draft stays in the buffer for the next insert session
            self.state.enter_normal_mode()
        elif code == ENTER:
            self.state.commit_input()
        elif code == BACKSPACE:
            self.state.backspace()
        elif event.is_char:
            self.state.append_char(code)
        return False

    # ---------- popup ----------
    def _handle_popup(self, event: KeyEvent):
        if event.code in (ESC, ENTER, "?"):
            self.state.enter_normal_mode()
        return False
