import time

from app_state import PANE_BUFFER, PANE_VARIABLES
from status_bar import render_status


def test_running_buffer_pane():
    text = render_status({"realtime": True, "focus": PANE_BUFFER}, 80)
    assert text.startswith("Running. [space] switch pane, [up/down] scroll")
    assert "ctrl-r" not in text
    assert len(text) == 80


def test_frozen_variables_pane():
    text = render_status(
        {"realtime": False, "frozen_seconds": 1.234, "focus": PANE_VARIABLES}, 200
    )
    assert text.startswith("Frozen @ 1.23s. [space] toggle pane")
    assert "[left/right] select frame, [ctrl-r] resume" in text


def test_eof_marker():
    text = render_status({"realtime": True, "input_closed": True}, 80)
    assert text.startswith("Running [eof].")


def test_transient_message_wins_until_expiry():
    ctx = {"status_msg": "Realtime resumed", "status_until": time.time() + 60}
    assert render_status(ctx, 30) == " Realtime resumed".ljust(30)

    ctx["status_until"] = time.time() - 1
    assert render_status(ctx, 30).startswith("Running")


def test_truncates_to_width():
    assert render_status({}, 7) == "Running"
