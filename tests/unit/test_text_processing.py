"""Unit tests for display formatting helpers."""

import pytest

from vitae.utils.report_formatter import Column, TableFormatter, format_percentage
from vitae.utils.text_processing import (
    format_date_range,
    format_month_year,
    normalize_url,
    sanitize_file_name,
)
from vitae.utils.timestamp import format_timestamp, now_exact, today


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [
        ("2025-06", "Jun 2025"),
        ("2024-12", "Dec 2024"),
        ("present", "Present"),
        ("Present", "Present"),
        ("2025-13", "2025-13"),
        ("Summer 2024", "Summer 2024"),
        ("", ""),
    ],
)
def test_format_month_year(value, expected):
    """Test month/year display."""
    assert format_month_year(value) == expected


@pytest.mark.unit
def test_format_date_range():
    """Test ranges with one or both ends missing."""
    assert format_date_range("2025-06", "2025-08") == "Jun 2025 - Aug 2025"
    assert format_date_range("2025-10", "Present") == "Oct 2025 - Present"
    assert format_date_range("", "2027-05") == "May 2027"
    assert format_date_range("", "") == ""


@pytest.mark.unit
def test_normalize_url():
    """Test that bare links get a scheme."""
    assert normalize_url("linkedin.com/in/tobechanow") == "https://linkedin.com/in/tobechanow"
    assert normalize_url("http://tobechanow.com") == "http://tobechanow.com"
    assert normalize_url("") == ""


@pytest.mark.unit
def test_sanitize_file_name():
    """Test file stem sanitizing."""
    assert sanitize_file_name("  Product Intern @ Northstar!  ") == "product-intern-northstar"
    assert sanitize_file_name("---", fallback="draft") == "draft"


@pytest.mark.unit
def test_now_exact_format():
    """Test millisecond UTC timestamp shape."""
    stamp = now_exact()

    assert stamp.endswith("Z")
    assert len(stamp) == len("2025-11-13T18:45:40.572Z")
    assert today() == stamp[:10] or today() > stamp[:10]


@pytest.mark.unit
def test_format_timestamp():
    """Test absolute formatting and passthrough of unparseable values."""
    assert format_timestamp("2025-11-13T18:45:40.572Z") == "2025-11-13 18:45:40"
    assert format_timestamp("not a time") == "not a time"
    assert format_timestamp(now_exact(), relative=True).endswith("ago")


@pytest.mark.unit
def test_table_formatter_aligns_and_truncates():
    """Test fixed-width rows."""
    table = TableFormatter([Column("Score", 5, ">"), Column("Bullet", 10)], total_width=16)
    table.add_table_header().add_row([21, "Built weekly KPI tracker"])

    lines = table.render().split("\n")

    assert lines[0] == "Score Bullet    "
    assert lines[1] == "-" * 16
    assert lines[2] == "   21 Built w..."


@pytest.mark.unit
def test_table_formatter_rejects_wrong_row_length():
    """Test row validation."""
    table = TableFormatter([Column("A", 3)])
    with pytest.raises(ValueError, match="Expected 1 values, got 2"):
        table.add_row([1, 2])


@pytest.mark.unit
def test_format_percentage():
    """Test percentage formatting."""
    assert format_percentage(3, 12) == "25.0%"
    assert format_percentage(0, 0) == "0.0%"
    assert format_percentage(1, 3, decimal_places=2) == "33.33%"
