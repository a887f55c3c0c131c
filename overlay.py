import curses
from typing import List


HELP_LINES = [
    "pfdb - keys",
    "",
    "  space       switch pane (buffer / variables)",
    "  up/down     buffer: scroll and freeze time",
    "              variables: select variable",
    "  left/right  variables: step selected variable back/forward in time",
    "  enter       variables: show history of selected variable",
    "  ctrl-r      resume realtime",
    "  ?           this help",
    "  esc         quit",
    "",
    "  overlay: up/down, pgup/pgdn, home/end scroll; esc/q/enter/? close",
]


class OverlayView:
    def __init__(self, layout):
        self.layout = layout
        self.visible = False
        self.lines: List[str] = []
        self.scroll = 0
        self.win = None
        self.mode: str | None = None

    def open_help(self):
        self._open(list(HELP_LINES), mode="help")

    def open_history(self, lines: List[str]):
        self._open(lines, mode="history")

    def _open(self, lines: List[str], *, mode: str):
        self.mode = mode
        self.lines = lines
        self.scroll = 0

        max_h = max(3, self.layout.pane_h)
        overlay_h = max(3, min(len(lines) + 2, max_h))
        overlay_y = max(0, (self.layout.pane_h - overlay_h) // 2)
        self.win = self.layout.new_overlay_win(overlay_h, overlay_y)

        # a history opened on the focused value starts with it in view
        if mode == "history":
            for idx, line in enumerate(lines[2:], start=2):
                if line.startswith(">"):
                    self.scroll = max(0, idx - (overlay_h - 2) // 2)
                    break
            self.scroll = min(self.scroll, self._max_scroll())

        self.visible = True

    def close(self):
        self.visible = False
        self.lines = []
        self.scroll = 0
        self.win = None
        self.mode = None

    def _content_rows(self):
        if self.win is None:
            return 0
        h, _ = self.win.getmaxyx()
        return max(0, h - 2)

    def _max_scroll(self):
        return max(0, len(self.lines) - self._content_rows())

    def handle_key(self, ch):
        if not self.visible or self.win is None:
            return
        if ch == -1:
            return

        max_scroll = self._max_scroll()
        half_page = max(1, self._content_rows() // 2)

        # close
        if ch in (27, ord("q"), 10, 13, curses.KEY_ENTER, ord("?")):
            self.close()
            return

        if ch == curses.KEY_NPAGE:
            self.scroll = min(max_scroll, self.scroll + half_page)
        elif ch == curses.KEY_PPAGE:
            self.scroll = max(0, self.scroll - half_page)
        elif ch == curses.KEY_HOME:
            self.scroll = 0
        elif ch == curses.KEY_END:
            self.scroll = max_scroll
        elif ch in (ord("j"), curses.KEY_DOWN):
            self.scroll = min(max_scroll, self.scroll + 1)
        elif ch in (ord("k"), curses.KEY_UP):
            self.scroll = max(0, self.scroll - 1)

    def draw(self):
        if not self.visible or not self.win:
            return

        win = self.win
        win.erase()
        h, w = win.getmaxyx()
        try:
            win.box()
        except curses.error:
            pass

        max_visible = max(0, h - 2)
        start = self.scroll
        end = start + max_visible
        for i, line in enumerate(self.lines[start:end]):
            try:
                win.addnstr(1 + i, 1, line, max(0, w - 2))
            except curses.error:
                pass

        win.noutrefresh()
