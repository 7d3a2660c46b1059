"""Low-level text helpers shared by the record formatters (stdlib only)."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    s = str(s)
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _clean(value, fallback="N/A"):
    """Render a record value for display: strip control chars, apply fallback.

    ``False`` and ``0`` are real values and are rendered, not replaced.
    """
    if value is None or value == "":
        return fallback
    if isinstance(value, bool):
        return "true" if value else "false"
    return _CONTROL_RE.sub("", str(value))


def _heading_list(title, items, render, empty):
    """``# Title (n)`` followed by one rendered block per item."""
    if not items:
        return empty
    blocks = "\n\n".join(render(item) for item in items)
    return f"# {title} ({len(items)})\n\n{blocks}"


def _table(columns, rows, footer=None):
    """Build a fixed-width table.
    columns: list of (name, width) tuples. Last column has no width (fills).
    rows: list of tuples matching columns."""
    last = len(columns) - 1
    header = " ".join(name if i == last else f"{name:<{w}}" for i, (name, w) in enumerate(columns))
    lines = [header, "-" * max(len(header), 60)]
    for row in rows:
        cells = []
        for i, val in enumerate(row):
            safe = _clean(val, "-")
            cells.append(safe if i == last else f"{_trunc(safe, columns[i][1]):<{columns[i][1]}}")
        lines.append(" ".join(cells))
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)
