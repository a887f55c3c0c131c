import time

from app_state import PANE_BUFFER


def render_status(context, width):
    """
    context keys: status_msg, status_until, focus, realtime, frozen_seconds,
                  input_closed
    """
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        return f" {context['status_msg']}".ljust(width)[:width]

    if context.get("realtime", True):
        status = "Running"
        extra = ""
    else:
        status = f"Frozen @ {context.get('frozen_seconds', 0.0):0.2f}s"
        extra = ", [ctrl-r] resume"
    if context.get("input_closed"):
        status += " [eof]"

    if context.get("focus", PANE_BUFFER) == PANE_BUFFER:
        text = f"{status}. [space] switch pane, [up/down] scroll{extra}"
    else:
        text = (
            f"{status}. [space] toggle pane, [up/down] select variable, "
            f"[left/right] select frame{extra}"
        )

    return text.ljust(width)[:width]
