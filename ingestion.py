from typing import Optional, Tuple


DEFAULT_PREFIX = "."
DEFAULT_DELIMITER = "="


class LineParser:
    def __init__(self, prefix: str = DEFAULT_PREFIX, delimiter: str = DEFAULT_DELIMITER):
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self.prefix = prefix or ""
        self.delimiter = delimiter

    def parse(self, line: str) -> Optional[Tuple[str, str]]:
        """Return ``(name, value)`` for a variable line, else None."""
        if not line or not line.startswith(self.prefix):
            return None
        rest = line[len(self.prefix) :]
        parts = rest.split(self.delimiter, 1)
        if len(parts) != 2:
            return None
        return parts[0], parts[1]


def decode_line(raw) -> str:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return raw.rstrip("\r\n")


def ingest(store, state, parser: LineParser, raw, timestamp: int):
    """Record one arrived line; returns the touched history or None."""
    text = decode_line(raw)
    line = store.append_line(text, timestamp)

    history = None
    parsed = parser.parse(text)
    if parsed is not None:
        name, value = parsed
        history = store.record(name, value, store.timestamps[line], line)
        if state.realtime:
            history.focus_latest()

    if state.realtime:
        state.follow_tail()
    return history
