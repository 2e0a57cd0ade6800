"""Timestamp formatting utilities."""

from datetime import datetime, timezone


def now_exact() -> str:
    """
    Current UTC time as an ISO 8601 string with millisecond precision.

    The fixed width and trailing "Z" keep string comparison equivalent to
    chronological comparison, which the record stores rely on for ordering.

    Returns:
        Timestamp such as "2025-11-13T18:45:40.572Z"
    """
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def today() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return now_exact()[:10]


def session_stamp() -> str:
    """Local time as YYYYMMDD_HHMMSS, for naming per-run log directories."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Format ISO 8601 timestamp to readable format.

    Args:
        iso_timestamp: ISO 8601 formatted timestamp string
        relative: If True, show relative time (e.g., "2h ago")
                 If False, show absolute time (e.g., "2025-11-13 18:45:40")

    Returns:
        Human-readable timestamp

    Examples:
        format_timestamp("2025-11-13T18:45:40.572Z")
        # "2025-11-13 18:45:40"

        format_timestamp("2025-11-13T18:45:40.572Z", relative=True)
        # "2h ago"
    """
    try:
        dt = datetime.fromisoformat(iso_timestamp.replace("Z", "+00:00"))

        if relative:
            return _format_relative_time(dt)
        else:
            return dt.strftime("%Y-%m-%d %H:%M:%S")

    except (ValueError, AttributeError):
        # Return original if parsing fails
        return iso_timestamp


def _format_relative_time(dt: datetime) -> str:
    """
    Format datetime as relative time in compact format (e.g., "2h ago").

    Args:
        dt: datetime object to format (naive values are treated as UTC)

    Returns:
        Compact relative time string
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    diff = datetime.now(timezone.utc) - dt

    # Future times
    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = diff.days

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{days}d {suffix}"
