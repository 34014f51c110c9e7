import unittest

from app_state import AppState, Mode
from key_dispatcher import KeyDispatcher
from keys import BACKSPACE, ENTER, ESC, MOD_ALT, MOD_CTRL, MOD_SHIFT, KeyEvent


def key(code, mods=0):
    return KeyEvent(code, mods)


class KeyDispatcherScenarioTests(unittest.TestCase):
    def _feed(self, dispatcher, codes):
        results = [dispatcher.dispatch(key(c)) for c in codes]
        return results

    def test_navigate_wrap_and_delete(self):
        state = AppState(["aaa", "bbb", "ccc"], selected=1)
        dispatcher = KeyDispatcher(state)

        dispatcher.dispatch(key("j"))
        self.assertEqual(state.selected, 2)
        dispatcher.dispatch(key("j"))
        self.assertEqual(state.selected, 0)
        dispatcher.dispatch(key("d"))
        self.assertEqual(state.items, ["bbb", "ccc"])
        self.assertEqual(state.selected, 0)

    def test_insert_type_and_commit_on_empty_list(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)

        self._feed(dispatcher, ["i", "x", "y", "z", ENTER])

        self.assertEqual(state.items, ["xyz"])
        self.assertEqual(state.selected, 0)
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.input, "")

    def test_popup_toggles_with_question_mark(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)

        dispatcher.dispatch(key("?"))
        self.assertIs(state.mode, Mode.POPUP)
        dispatcher.dispatch(key("?"))
        self.assertIs(state.mode, Mode.NORMAL)

    def test_popup_closes_on_esc_and_enter_only(self):
        state = AppState(["a", "b"])
        dispatcher = KeyDispatcher(state)
        for closer in (ESC, ENTER):
            state.enter_popup_mode()
            self.assertFalse(dispatcher.dispatch(key(closer)))
            self.assertIs(state.mode, Mode.NORMAL)

        state.enter_popup_mode()
        self._feed(dispatcher, ["j", "d", "i", "q"])
        self.assertIs(state.mode, Mode.POPUP)
        self.assertEqual(state.items, ["a", "b"])
        self.assertEqual(state.selected, 0)

    def test_esc_in_normal_requests_quit(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)
        self.assertTrue(dispatcher.dispatch(key(ESC)))

    def test_esc_in_insert_keeps_draft(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["i", "a", "b"])

        quit_requested = dispatcher.dispatch(key(ESC))

        self.assertFalse(quit_requested)
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.input, "ab")
        self.assertEqual(state.items, [])

        self._feed(dispatcher, ["i", "c", ENTER])
        self.assertEqual(state.items, ["abc"])

    def test_insert_mode_treats_command_letters_as_text(self):
        state = AppState(["a"])
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["i", "j", "k", "d", "?", "i"])
        self.assertEqual(state.input, "jkd?i")
        self.assertIs(state.mode, Mode.INSERT)
        self.assertEqual(state.items, ["a"])

    def test_backspace_in_insert(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["i", "a", "b", BACKSPACE, BACKSPACE, BACKSPACE])
        self.assertEqual(state.input, "")
        self.assertIs(state.mode, Mode.INSERT)

    def test_insert_ignores_named_keys(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["i", "left", "tab", "f1", "a"])
        self.assertEqual(state.input, "a")

    def test_enter_commits_empty_buffer(self):
        state = AppState()
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["i", ENTER])
        self.assertEqual(state.items, [""])
        self.assertEqual(state.selected, 0)

    def test_modified_keys_are_ignored(self):
        state = AppState(["a", "b"])
        dispatcher = KeyDispatcher(state)

        for mods in (MOD_CTRL, MOD_ALT, MOD_SHIFT):
            self.assertFalse(dispatcher.dispatch(key(ESC, mods)))
            dispatcher.dispatch(key("j", mods))
            dispatcher.dispatch(key("i", mods))
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.selected, 0)

        state.enter_insert_mode()
        dispatcher.dispatch(key("x", MOD_ALT))
        dispatcher.dispatch(key(ENTER, MOD_CTRL))
        self.assertEqual(state.input, "")
        self.assertEqual(state.items, ["a", "b"])

    def test_unbound_normal_keys_do_nothing(self):
        state = AppState(["a", "b"], selected=1)
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["x", ENTER, BACKSPACE, "J", "up"])
        self.assertEqual(state.items, ["a", "b"])
        self.assertEqual(state.selected, 1)
        self.assertIs(state.mode, Mode.NORMAL)

    def test_delete_until_empty(self):
        state = AppState(["a", "b", "c"], selected=2)
        dispatcher = KeyDispatcher(state)
        self._feed(dispatcher, ["d"])
        self.assertEqual(state.selected, 1)
        self._feed(dispatcher, ["d", "d", "d"])
        self.assertEqual(state.items, [])
        self.assertIsNone(state.selected)


if __name__ == "__main__":
    unittest.main()
