"""Keep variable focuses and the buffer cursor pinned to one instant."""


def seek_history(history, target: int) -> int:
    """Walk ``history.focus`` from where it is to the value active at ``target``."""
    ts = history.timestamps
    if not ts:
        history.focus = 0
        return 0

    focus = max(0, min(history.focus, len(ts) - 1))
    while focus > 0 and ts[focus] > target:
        focus -= 1
    while focus < len(ts) - 1 and ts[focus + 1] <= target:
        focus += 1
    history.focus = focus
    return focus


def seek_variables(registry, target: int) -> None:
    for history in registry:
        seek_history(history, target)


def scroll_to_time(timestamps, target: int, current_line: int) -> int:
    """Map ``target`` to a buffer line, starting from ``current_line``.

    Lands on a line stamped ``target`` when one exists. Otherwise lands on
    the last line stamped before it, or line 0 when ``target`` predates the
    buffer.
    """
    if not timestamps:
        return 0
    last = len(timestamps) - 1
    line = max(0, min(current_line, last))
    while line < last and timestamps[line] < target:
        line += 1
    while line > 0 and timestamps[line] > target:
        line -= 1
    return line


def is_active_at(history, timestamp: int) -> bool:
    return bool(history.timestamps) and history.timestamps[0] <= timestamp
