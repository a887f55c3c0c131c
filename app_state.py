import time


PANE_BUFFER = 0
PANE_VARIABLES = 1


class AppState:
    def __init__(self, store, viewport_height=24, start_time=None):
        self.store = store

        self.buffer_offset = 0
        self.selected_buffer_line = 0
        self.selected_variable_index = 0
        self.focused_pane = PANE_BUFFER

        self.realtime = True
        self.start_time = time.monotonic_ns() if start_time is None else start_time
        self.timecursor = self.start_time

        self.viewport_height = max(1, viewport_height)
        self.input_closed = False

    @property
    def registry(self):
        return self.store.registry

    def offset_for(self, line: int) -> int:
        return max(line - self.viewport_height + 2, 0)

    def sync_offset(self):
        self.buffer_offset = self.offset_for(self.selected_buffer_line)

    def follow_tail(self):
        self.selected_buffer_line = self.store.last_line
        self.sync_offset()

    def set_viewport_height(self, height: int):
        self.viewport_height = max(1, height)
        self.sync_offset()

    def selected_history(self):
        return self.registry.at(self.selected_variable_index)

    def frozen_seconds(self) -> float:
        return (self.timecursor - self.start_time) / 1e9
