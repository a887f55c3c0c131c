import curses
import time

from app_state import PANE_BUFFER, PANE_VARIABLES
from buffer_pane import BufferPane
from event_feed import EndOfInput, KeyEvent, LineEvent
from history_table import history_lines
from ingestion import ingest
from navigation import NavigationController
from overlay import OverlayView
from screen_layout import ScreenLayout
from status_bar import render_status
from variables_pane import VariablesPane


KEY_ESC = 27
KEY_CTRL_C = 3
KEY_CTRL_R = 18
KEY_SPACE = 32
ENTER_KEYS = (10, 13, curses.KEY_ENTER)


class Orchestrator:
    def __init__(self, stdscr, app_state, parser, feed, config=None, layout_factory=ScreenLayout):
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
            curses.raw()
        except curses.error:
            pass
        self.stdscr.nodelay(True)

        self.state = app_state
        self.parser = parser
        self.feed = feed
        self.config = config or {}

        self.layout_factory = layout_factory
        self.layout = layout_factory(stdscr)
        self.state.set_viewport_height(self.layout.H)

        self.nav = NavigationController(app_state)
        self.buffer_pane = BufferPane()
        self.variables_pane = VariablesPane()
        self.overlay = OverlayView(self.layout)

        # ---- status ----
        self.status_msg = None
        self.status_msg_until = 0

    # ---------------- helpers ----------------

    def _set_status(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def _relayout(self):
        try:
            curses.update_lines_cols()
        except (AttributeError, curses.error):
            pass
        self.stdscr.clear()
        self.layout = self.layout_factory(self.stdscr)
        self.overlay.close()
        self.overlay.layout = self.layout
        self.nav.resize(self.layout.H)

    def _open_history(self):
        history = self.state.selected_history()
        if history is None:
            self._set_status("No variables yet", 3)
            return
        lines = history_lines(
            history,
            self.state.start_time,
            max_rows=self.config.get("HISTORY_OVERLAY_MAX_ROWS"),
        )
        self.overlay.open_history(lines)

    # ---------------- events ----------------

    def handle_event(self, event):
        """Apply one event to the state. Returns False when the loop should end."""
        if isinstance(event, LineEvent):
            ingest(self.state.store, self.state, self.parser, event.raw, event.timestamp)
            return True
        if isinstance(event, EndOfInput):
            self.state.input_closed = True
            self._set_status("Input closed; still browsing", 3)
            return True
        if isinstance(event, KeyEvent):
            return self.handle_key(event.key)
        return True

    def handle_key(self, ch):
        if ch == curses.KEY_RESIZE:
            self._relayout()
            return True

        if self.overlay.visible:
            self.overlay.handle_key(ch)
            return True

        if ch in (KEY_ESC, KEY_CTRL_C):
            return False

        if ch == curses.KEY_DOWN:
            self.nav.move_down()
        elif ch == curses.KEY_UP:
            self.nav.move_up()
        elif ch == curses.KEY_LEFT:
            self.nav.move_left()
        elif ch == curses.KEY_RIGHT:
            self.nav.move_right()
        elif ch == KEY_SPACE:
            self.nav.switch_pane()
        elif ch == KEY_CTRL_R:
            was_frozen = not self.state.realtime
            self.nav.resume()
            if was_frozen:
                self._set_status("Realtime resumed", 2)
        elif ch == ord("?"):
            self.overlay.open_help()
        elif ch in ENTER_KEYS and self.state.focused_pane == PANE_VARIABLES:
            self._open_history()
        return True

    # ---------------- UI ----------------

    def redraw(self):
        focus = self.state.focused_pane
        self.layout.draw_divider()
        self.buffer_pane.draw(
            self.layout.buffer_win, self.state, active=(focus == PANE_BUFFER)
        )
        self.variables_pane.draw(
            self.layout.variables_win, self.state, active=(focus == PANE_VARIABLES)
        )

        sw = self.layout.status_win
        sw.erase()
        _, w = sw.getmaxyx()
        origin = self.layout.pane_origin(focus)
        width = self.layout.buffer_w if focus == PANE_BUFFER else w - origin
        text = render_status(
            {
                "status_msg": self.status_msg,
                "status_until": self.status_msg_until,
                "focus": focus,
                "realtime": self.state.realtime,
                "frozen_seconds": self.state.frozen_seconds(),
                "input_closed": self.state.input_closed,
            },
            max(0, width),
        )
        try:
            sw.addnstr(0, origin, text, max(0, w - origin), curses.A_REVERSE)
        except curses.error:
            pass
        sw.noutrefresh()

        if self.overlay.visible:
            self.overlay.draw()
        curses.doupdate()

    # ---------------- main loop ----------------

    def _pump_keys(self):
        # curses is not thread-safe; keys are polled on the drawing thread
        while True:
            ch = self.stdscr.getch()
            if ch == -1:
                return
            self.feed.post_key(ch)

    def run(self):
        self.stdscr.clear()
        self.stdscr.refresh()
        self.redraw()

        status_shown = False
        while True:
            self._pump_keys()
            event = self.feed.get(timeout=0.05)
            if event is None:
                # let an expired status message fall back to the mode line
                if status_shown and time.time() >= self.status_msg_until:
                    self.redraw()
                    status_shown = False
                continue

            if not self.handle_event(event):
                break
            self.redraw()
            status_shown = time.time() < self.status_msg_until
