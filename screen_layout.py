import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: buffer (left) | divider | variables (right), status bar (1 line)
        self.status_h = 1
        self.pane_h = max(1, self.H - self.status_h)

        self.buffer_w = max(1, self.W // 2)
        self.divider_x = self.buffer_w
        self.variables_x = min(self.W - 1, self.divider_x + 1)
        self.variables_w = max(1, self.W - self.variables_x)

        self.buffer_win = curses.newwin(self.pane_h, self.buffer_w, 0, 0)
        # panes must never own cursor
        self.buffer_win.leaveok(True)

        self.variables_win = curses.newwin(
            self.pane_h, self.variables_w, 0, self.variables_x
        )
        self.variables_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.pane_h, 0)
        self.status_win.leaveok(True)

    def new_overlay_win(self, height, y):
        # overlay is a modal window over the pane region and never owns cursor
        win = curses.newwin(height, self.W, y, 0)
        win.leaveok(True)
        return win

    def pane_origin(self, pane_index):
        """Column where the given pane's half of the status bar starts."""
        return 0 if pane_index == 0 else self.variables_x

    def draw_divider(self):
        for y in range(self.H):
            try:
                self.stdscr.addch(y, self.divider_x, "|")
            except curses.error:
                pass
        self.stdscr.noutrefresh()
