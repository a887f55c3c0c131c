from app_state import PANE_BUFFER, PANE_VARIABLES
from seek_engine import seek_variables


class NavigationController:
    def __init__(self, state):
        self.state = state
        self.store = state.store

    def _freeze_at(self, timestamp):
        self.state.realtime = False
        self.state.timecursor = timestamp

    # ---------- pane ----------
    def switch_pane(self):
        if self.state.focused_pane == PANE_BUFFER:
            self.state.focused_pane = PANE_VARIABLES
        else:
            self.state.focused_pane = PANE_BUFFER

    # ---------- vertical ----------
    def _move_buffer_line(self, delta):
        if len(self.store) == 0:
            return
        state = self.state
        state.selected_buffer_line = max(
            0, min(self.store.last_line, state.selected_buffer_line + delta)
        )
        self._freeze_at(self.store.timestamps[state.selected_buffer_line])
        state.sync_offset()
        seek_variables(state.registry, state.timecursor)

    def _move_variable_selection(self, delta):
        count = len(self.state.registry)
        if count == 0:
            return
        self.state.selected_variable_index = max(
            0, min(count - 1, self.state.selected_variable_index + delta)
        )

    def move_down(self):
        if self.state.focused_pane == PANE_BUFFER:
            self._move_buffer_line(1)
        else:
            self._move_variable_selection(1)

    def move_up(self):
        if self.state.focused_pane == PANE_BUFFER:
            self._move_buffer_line(-1)
        else:
            self._move_variable_selection(-1)

    # ---------- horizontal ----------
    def _step_selected_variable(self, delta):
        if self.state.focused_pane != PANE_VARIABLES:
            return
        history = self.state.selected_history()
        if history is None or len(history) == 0:
            return
        state = self.state
        history.step(delta)
        self._freeze_at(history.timestamps[history.focus])
        # the recorded line, not a timestamp search: one batch can share a stamp
        state.selected_buffer_line = history.lines[history.focus]
        state.sync_offset()
        focus = history.focus
        seek_variables(state.registry, state.timecursor)
        # values sharing one timestamp would otherwise snap the step back
        history.focus = focus

    def move_left(self):
        self._step_selected_variable(-1)

    def move_right(self):
        self._step_selected_variable(1)

    # ---------- realtime ----------
    def resume(self):
        self.state.realtime = True
        for history in self.state.registry:
            history.focus_latest()
        self.state.follow_tail()

    def resize(self, height):
        self.state.set_viewport_height(height)
