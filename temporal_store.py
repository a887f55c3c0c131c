from typing import Dict, List, Optional


class VariableHistory:
    """Every value one variable has taken, oldest first.

    ``values``, ``timestamps`` and ``lines`` are parallel. ``focus`` is the
    display cursor and is not part of the recorded content.
    """

    def __init__(self, name: str):
        self.name = name
        self.values: List[str] = []
        self.timestamps: List[int] = []
        self.lines: List[int] = []
        self.focus = 0

    def __len__(self):
        return len(self.values)

    def append(self, value: str, timestamp: int, line: int) -> None:
        if self.timestamps:
            timestamp = max(timestamp, self.timestamps[-1])
        self.values.append(value)
        self.timestamps.append(timestamp)
        self.lines.append(line)

    @property
    def last_index(self) -> int:
        return max(0, len(self.values) - 1)

    @property
    def focused_value(self) -> Optional[str]:
        if not self.values:
            return None
        return self.values[self.focus]

    @property
    def focused_timestamp(self) -> Optional[int]:
        if not self.timestamps:
            return None
        return self.timestamps[self.focus]

    def focus_latest(self) -> None:
        self.focus = self.last_index

    def step(self, delta: int) -> int:
        self.focus = max(0, min(self.last_index, self.focus + delta))
        return self.focus


class VariableRegistry:
    """Name -> history mapping plus first-seen display order."""

    def __init__(self):
        self._histories: Dict[str, VariableHistory] = {}
        self.names: List[str] = []

    def __len__(self):
        return len(self.names)

    def __contains__(self, name):
        return name in self._histories

    def __iter__(self):
        for name in self.names:
            yield self._histories[name]

    def get(self, name: str) -> Optional[VariableHistory]:
        return self._histories.get(name)

    def at(self, index: int) -> Optional[VariableHistory]:
        if index < 0 or index >= len(self.names):
            return None
        return self._histories[self.names[index]]

    def get_or_create(self, name: str) -> VariableHistory:
        history = self._histories.get(name)
        if history is None:
            history = VariableHistory(name)
            self._histories[name] = history
            self.names.append(name)
        return history


class TemporalStore:
    """Append-only line buffer and the variable histories pulled out of it."""

    def __init__(self):
        self.lines: List[str] = []
        self.timestamps: List[int] = []
        self.registry = VariableRegistry()

    def __len__(self):
        return len(self.lines)

    @property
    def last_line(self) -> int:
        return max(0, len(self.lines) - 1)

    def append_line(self, text: str, timestamp: int) -> int:
        # a stamp older than the tail is pulled up to it; ties are allowed
        if self.timestamps:
            timestamp = max(timestamp, self.timestamps[-1])
        self.lines.append(text)
        self.timestamps.append(timestamp)
        return len(self.lines) - 1

    def record(self, name: str, value: str, timestamp: int, line: int) -> VariableHistory:
        history = self.registry.get_or_create(name)
        history.append(value, timestamp, line)
        return history
