"""
Text processing utilities for formatting and display.

Date ranges, profile links and export file names as they appear on a
rendered resume.
"""

import re

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

MONTH_YEAR_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")
PRESENT_PATTERN = re.compile(r"present", re.IGNORECASE)
URL_SCHEME_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def format_month_year(value: str) -> str:
    """
    Format a YYYY-MM date string for display.

    Anything containing "present" (any case) becomes "Present". Values that are
    not YYYY-MM, or have an out-of-range month, pass through unchanged.

    Example:
        >>> format_month_year("2025-06")
        'Jun 2025'
        >>> format_month_year("Summer 2024")
        'Summer 2024'
    """
    if not value:
        return ""
    if PRESENT_PATTERN.search(value):
        return "Present"
    match = MONTH_YEAR_PATTERN.match(value.strip())
    if not match:
        return value
    year = match.group(1)
    month_index = int(match.group(2)) - 1
    if month_index < 0 or month_index > 11:
        return value
    return f"{MONTHS[month_index]} {year}"


def format_date_range(start: str, end: str) -> str:
    """
    Format a start/end pair as "Jun 2025 - Aug 2025".

    Falls back to whichever side is present; empty when both are missing.
    """
    left = format_month_year(start)
    right = format_month_year(end)
    if not left and not right:
        return ""
    if left and right:
        return f"{left} - {right}"
    return left or right


def normalize_url(value: str) -> str:
    """Prefix bare profile links with https:// so they render as links."""
    if not value:
        return ""
    if URL_SCHEME_PATTERN.match(value):
        return value
    return f"https://{value}"


def sanitize_file_name(value: str, fallback: str = "resume") -> str:
    """
    Reduce arbitrary text to a lowercase, dash-separated file stem.

    Example:
        >>> sanitize_file_name("  Product Intern @ Northstar!  ")
        'product-intern-northstar'
    """
    cleaned = re.sub(r"[^a-z0-9]+", "-", value.strip().lower())
    cleaned = cleaned.strip("-")
    return cleaned or fallback
