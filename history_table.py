import pandas as pd


def history_frame(history, start_time, max_rows=None):
    """Tabulate one variable's history as ``#``, ``t`` (elapsed) and ``value``."""
    count = len(history)
    first = 0 if not max_rows or count <= max_rows else count - max_rows
    elapsed = [ts - start_time for ts in history.timestamps[first:]]
    df = pd.DataFrame(
        {
            "#": range(first + 1, count + 1),
            "t": pd.to_timedelta(elapsed, unit="ns"),
            "line": [ln + 1 for ln in history.lines[first:]],
            "value": history.values[first:],
        }
    )
    return df


def _format_elapsed(td):
    return f"{td.total_seconds():.3f}s"


def history_lines(history, start_time, max_rows=None, focus_marker=">"):
    """Render the history table as text rows, marking the focused value."""
    df = history_frame(history, start_time, max_rows=max_rows)
    header = [f"{history.name}: {len(history)} value(s)"]
    if df.empty:
        return header

    shown = df.assign(t=df["t"].map(_format_elapsed))
    body = shown.to_string(index=False).splitlines()
    first = int(df["#"].iloc[0]) - 1

    lines = header + ["  " + body[0]]
    for offset, row in enumerate(body[1:]):
        mark = focus_marker if first + offset == history.focus else " "
        lines.append(f"{mark} {row}")
    return lines
