import unittest

from history_table import history_frame, history_lines
from temporal_store import VariableHistory


def _history():
    history = VariableHistory("speed")
    history.append("10", 1_000_000_000, 0)
    history.append("12", 1_500_000_000, 4)
    history.append("15", 3_250_000_000, 9)
    return history


class HistoryFrameTests(unittest.TestCase):
    def test_frame_columns_and_elapsed_time(self):
        df = history_frame(_history(), start_time=0)

        self.assertEqual(list(df.columns), ["#", "t", "line", "value"])
        self.assertEqual(list(df["#"]), [1, 2, 3])
        self.assertEqual(list(df["line"]), [1, 5, 10])
        self.assertEqual(list(df["value"]), ["10", "12", "15"])
        self.assertAlmostEqual(df["t"].iloc[2].total_seconds(), 3.25)

    def test_frame_keeps_only_newest_rows(self):
        df = history_frame(_history(), start_time=0, max_rows=2)

        self.assertEqual(list(df["#"]), [2, 3])
        self.assertEqual(list(df["value"]), ["12", "15"])

    def test_empty_history(self):
        lines = history_lines(VariableHistory("x"), start_time=0)
        self.assertEqual(lines, ["x: 0 value(s)"])


class HistoryLinesTests(unittest.TestCase):
    def test_focused_value_is_marked(self):
        history = _history()
        history.focus = 1
        lines = history_lines(history, start_time=0)

        self.assertEqual(lines[0], "speed: 3 value(s)")
        self.assertEqual(len(lines), 2 + 3)
        marked = [line for line in lines[2:] if line.startswith(">")]
        self.assertEqual(len(marked), 1)
        self.assertIn("12", marked[0])
        self.assertIn("1.500s", marked[0])

    def test_elapsed_is_formatted_in_seconds(self):
        history = VariableHistory("x")
        history.append("a", 5, 0)
        lines = history_lines(history, start_time=5)

        self.assertIn("0.000s", lines[2])

    def test_marker_respects_row_limit(self):
        history = _history()
        history.focus = 0
        lines = history_lines(history, start_time=0, max_rows=2)

        self.assertFalse(any(line.startswith(">") for line in lines[2:]))


if __name__ == "__main__":
    unittest.main()
