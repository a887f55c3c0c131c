import curses


def visible_rows(state, height):
    """Buffer line indices to paint, top to bottom.

    Lines after the selected one belong to the future of the frozen
    instant and are not painted.
    """
    store = state.store
    if len(store) == 0 or height <= 0:
        return range(0)
    start = state.buffer_offset
    end = min(start + height, len(store), state.selected_buffer_line + 1)
    return range(start, max(start, end))


class BufferPane:
    def draw(self, win, state, active=False):
        win.erase()
        h, w = win.getmaxyx()
        store = state.store

        for row, idx in enumerate(visible_rows(state, h)):
            attr = 0
            if not state.realtime and idx == state.selected_buffer_line:
                attr = curses.A_REVERSE if active else curses.A_BOLD
            try:
                win.addnstr(row, 0, store.lines[idx], w, attr)
            except curses.error:
                pass

        win.noutrefresh()
