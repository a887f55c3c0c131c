import queue
import threading
import time
from dataclasses import dataclass


@dataclass
class LineEvent:
    raw: bytes
    timestamp: int


@dataclass
class KeyEvent:
    key: int


@dataclass
class EndOfInput:
    pass


class EventFeed:
    """Serializes stdin lines and key presses into one ordered stream.

    Producers only ever ``put``; the single consumer ``get``s and applies
    each event to completion before taking the next.
    """

    def __init__(self, clock=time.monotonic_ns):
        self._fifo: "queue.Queue" = queue.Queue()
        self._clock = clock
        self._reader = None

    def start_reader(self, stream):
        self._reader = threading.Thread(
            target=self._read_lines, args=(stream,), daemon=True
        )
        self._reader.start()

    def _read_lines(self, stream):
        try:
            for raw in iter(stream.readline, b""):
                self._fifo.put(LineEvent(raw, self._clock()))
        except (OSError, ValueError):
            pass
        self._fifo.put(EndOfInput())

    def post_key(self, key: int):
        self._fifo.put(KeyEvent(key))

    def get(self, timeout=None):
        """Next event, or None once ``timeout`` passes with nothing queued."""
        try:
            return self._fifo.get(timeout=timeout)
        except queue.Empty:
            return None
