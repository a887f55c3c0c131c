import io
import itertools

from event_feed import EndOfInput, EventFeed, KeyEvent, LineEvent


def _drain(feed, timeout=1.0):
    events = []
    while True:
        event = feed.get(timeout=timeout)
        if event is None:
            return events
        events.append(event)
        if isinstance(event, EndOfInput):
            return events


def test_reader_posts_lines_then_end_of_input():
    clock = itertools.count(100)
    feed = EventFeed(clock=lambda: next(clock))
    feed.start_reader(io.BytesIO(b".x=1\nplain\n.x=2"))

    events = _drain(feed)

    assert [type(e) for e in events] == [LineEvent, LineEvent, LineEvent, EndOfInput]
    assert [e.raw for e in events[:3]] == [b".x=1\n", b"plain\n", b".x=2"]
    stamps = [e.timestamp for e in events[:3]]
    assert stamps == sorted(stamps)


def test_keys_and_lines_share_one_ordered_queue():
    feed = EventFeed()
    feed.post_key(258)
    feed.post_key(32)

    assert feed.get(timeout=0.1) == KeyEvent(258)
    assert feed.get(timeout=0.1) == KeyEvent(32)
    assert feed.get(timeout=0.01) is None


def test_empty_stream_only_ends():
    feed = EventFeed()
    feed.start_reader(io.BytesIO(b""))
    assert _drain(feed) == [EndOfInput()]
