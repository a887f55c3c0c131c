import curses

from seek_engine import is_active_at


def variable_rows(state):
    """One ``(marker, name, value, position)`` tuple per registry entry.

    Frozen before a variable's first value, its value and position are
    blank.
    """
    rows = []
    for idx, history in enumerate(state.registry):
        marker = ">" if idx == state.selected_variable_index else " "
        if len(history) == 0 or (
            not state.realtime and not is_active_at(history, state.timecursor)
        ):
            rows.append((marker, history.name, "", ""))
            continue
        pos = f"{history.focus + 1}/{len(history)}"
        rows.append((marker, history.name, history.focused_value, pos))
    return rows


class VariablesPane:
    def __init__(self):
        self.row_offset = 0

    def _adjust_offset(self, selected, height):
        if selected < self.row_offset:
            self.row_offset = selected
        elif selected >= self.row_offset + height:
            self.row_offset = selected - height + 1
        self.row_offset = max(0, self.row_offset)

    def draw(self, win, state, active=False):
        win.erase()
        h, w = win.getmaxyx()
        self._adjust_offset(state.selected_variable_index, h)

        rows = variable_rows(state)
        for y, (marker, name, value, pos) in enumerate(
            rows[self.row_offset : self.row_offset + h]
        ):
            name_attr = curses.A_BOLD if (active and marker == ">") else 0
            try:
                win.addnstr(y, 0, marker, w)
                win.addnstr(y, 1, name, max(0, w - 1), name_attr)
                value_x = 1 + len(name) + 1
                room = w - value_x - len(pos) - 1
                if value and room > 0:
                    win.addnstr(y, value_x, value, room)
                if pos and len(pos) < w:
                    win.addnstr(y, w - len(pos) - 1, pos, len(pos))
            except curses.error:
                pass

        win.noutrefresh()
