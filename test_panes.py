import unittest

from app_state import AppState
from buffer_pane import BufferPane, visible_rows
from ingestion import LineParser, ingest
from navigation import NavigationController
from temporal_store import TemporalStore
from variables_pane import VariablesPane, variable_rows


class DummyWin:
    def __init__(self, h=24, w=80):
        self._h = h
        self._w = w
        self.writes = []

    def getmaxyx(self):
        return self._h, self._w

    def erase(self):
        self.writes = []

    def addnstr(self, y, x, text, n, attr=0):
        self.writes.append((y, x, text[:n]))

    def noutrefresh(self):
        pass


def _state(lines, viewport_height=24):
    store = TemporalStore()
    state = AppState(store, viewport_height=viewport_height, start_time=0)
    parser = LineParser()
    for ts, raw in lines:
        ingest(store, state, parser, raw, ts)
    return state, NavigationController(state)


class BufferPaneTests(unittest.TestCase):
    def test_frozen_view_hides_lines_after_selection(self):
        state, nav = _state([(i, f"line {i}") for i in range(6)])
        nav.move_up()
        nav.move_up()

        self.assertEqual(list(visible_rows(state, 10)), [0, 1, 2, 3])

    def test_rows_start_at_offset(self):
        state, _ = _state([(i, f"line {i}") for i in range(30)], viewport_height=10)
        rows = list(visible_rows(state, 9))
        self.assertEqual(rows[0], state.buffer_offset)
        self.assertEqual(rows[-1], 29)

    def test_draw_paints_text(self):
        state, _ = _state([(1, "hello"), (2, "world")])
        win = DummyWin(5, 20)
        BufferPane().draw(win, state)
        self.assertEqual([w[2] for w in win.writes], ["hello", "world"])

    def test_empty_buffer(self):
        state, _ = _state([])
        self.assertEqual(list(visible_rows(state, 10)), [])


class VariablesPaneTests(unittest.TestCase):
    LINES = [(100, ".b=1"), (150, ".a=x"), (200, ".b=2")]

    def test_rows_in_first_seen_order_with_positions(self):
        state, _ = _state(self.LINES)
        rows = variable_rows(state)
        self.assertEqual(rows, [(">", "b", "2", "2/2"), (" ", "a", "x", "1/1")])

    def test_not_yet_active_variable_has_no_value(self):
        state, nav = _state(self.LINES)
        nav.move_up()
        nav.move_up()

        rows = variable_rows(state)
        self.assertEqual(rows[0], (">", "b", "1", "1/2"))
        self.assertEqual(rows[1], (" ", "a", "", ""))

    def test_scrolls_to_keep_selection_visible(self):
        state, nav = _state([(i, f".v{i}={i}") for i in range(10)])
        nav.switch_pane()
        for _ in range(7):
            nav.move_down()
        pane = VariablesPane()
        win = DummyWin(3, 40)
        pane.draw(win, state, active=True)
        self.assertEqual(pane.row_offset, 5)
        self.assertIn((0, 1, "v5"), win.writes)


if __name__ == "__main__":
    unittest.main()
