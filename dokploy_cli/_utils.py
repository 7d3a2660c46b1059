"""
Shared pure-utility functions for dokploy-cli.

These helpers have no business logic and no side effects.
They are used across the formatters, commands.py and the MCP tools.
"""

from datetime import datetime, timezone


def _parse_iso_timestamp(ts):
    """Parse an ISO timestamp from the API into a datetime."""
    if not ts:
        return None
    try:
        # Handle both "2026-01-15T10:30:00Z" and "2026-01-15T10:30:00.000Z"
        clean = ts.replace("Z", "+00:00")
        return datetime.fromisoformat(clean)
    except (ValueError, TypeError, AttributeError):
        return None


def format_date(ts):
    """Render an API timestamp as ``YYYY-MM-DD HH:MM:SS UTC``."""
    if not ts:
        return "N/A"
    parsed = _parse_iso_timestamp(ts)
    if parsed is None:
        return str(ts)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.strftime("%Y-%m-%d %H:%M:%S UTC")


def status_label(status):
    """Bracketed status tag used in listings."""
    if not status:
        return "[UNKNOWN]"
    s = str(status).lower()
    if s in ("running", "done", "idle"):
        return "[RUNNING]"
    if s in ("error", "failed"):
        return "[ERROR]"
    if s == "stopped":
        return "[STOPPED]"
    return f"[{str(status).upper()}]"


def snake_to_camel(name):
    """``application_id`` -> ``applicationId``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)
