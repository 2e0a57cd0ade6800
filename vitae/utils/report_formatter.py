"""
Fixed-width text tables for terminal reports.

Used by the scripts to list ranked bullet matches, saved resume versions and
preview counts.
"""

from typing import Any, List


class Column:
    """
    Column definition for table formatting.

    Values longer than the column width are cut and end with "..." so rows
    never wrap.
    """

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def _fit(self, text: str) -> str:
        if len(text) <= self.width:
            return text
        if self.width <= 3:
            return text[: self.width]
        return text[: self.width - 3] + "..."

    def format_header(self) -> str:
        return f"{self._fit(self.name):{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{self._fit(str(value)):{self.align}{self.width}}"


class TableFormatter:
    """
    Builder for a text report made of titled, aligned tables.

    Example:
        >>> table = TableFormatter([Column("Score", 5, ">"), Column("Bullet", 40)], total_width=46)
        >>> print(table.add_title("Matches").add_table_header().add_row([21, "Built KPI tracker"]).render())
    """

    def __init__(self, columns: List[Column], total_width: int = 100):
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_title(self, title: str) -> "TableFormatter":
        """Add a title framed by '=' rules."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add the column header row followed by a '-' rule."""
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        return self.add_separator()

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add a data row.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_text(self, text: str = "") -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        return "\n".join(self.lines)


def format_percentage(count: int, total: int, decimal_places: int = 1) -> str:
    """
    Format count as percentage of total ("0.0%" when total is zero).

    Example:
        >>> format_percentage(3, 12)
        '25.0%'
    """
    if total == 0:
        return f"{0:.{decimal_places}f}%"
    return f"{count / total * 100:.{decimal_places}f}%"
