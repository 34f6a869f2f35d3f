"""
Utility functions for formatting text-based reports and tables.

Provides consistent table and bullet-list formatting for match reports.
"""

from typing import Any, Iterable, List


class Column:
    """Column definition for table formatting."""

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

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        text = str(value)
        # Truncate overflowing cells so columns stay aligned
        if len(text) > self.width:
            text = text[: max(self.width - 3, 0)] + "..."
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned columns and bullet lists."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        """
        Args:
            columns: List of Column definitions (only needed for table rows)
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header framed by separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_subheader(self, title: str) -> "TableFormatter":
        """Add a lighter '--- Title ---' header preceded by a blank line."""
        self.lines.append("")
        self.lines.append(f"--- {title} ---")
        return self

    def with_columns(self, columns: List[Column]) -> "TableFormatter":
        """Switch the active column layout (for reports holding several tables)."""
        self.columns = columns
        return self

    def add_table_header(self) -> "TableFormatter":
        self.lines.append(" ".join(col.format_header() for col in self.columns))
        self.lines.append("-" * min(self.total_width, sum(c.width + 1 for c in self.columns)))
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        self.lines.append(" ".join(col.format_value(val) for col, val in zip(self.columns, values)))
        return self

    def add_bullets(self, items: Iterable[str], marker: str = "*", empty: str = None) -> "TableFormatter":
        """
        Add one indented line per item.

        Args:
            items: Text items
            marker: Bullet marker placed before each item
            empty: Line to emit when there are no items (nothing emitted if None)
        """
        items = list(items)
        if not items and empty is not None:
            self.lines.append(f"  {empty}")
        for item in items:
            self.lines.append(f"  {marker} {item}")
        return self

    def add_key_value(self, key: str, value: Any) -> "TableFormatter":
        self.lines.append(f"{key}: {value}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)


def format_percentage(value: float, decimal_places: int = 0) -> str:
    """
    Format a [0, 1] ratio as a percentage string.

    Examples:
        >>> format_percentage(0.8125)
        '81%'
        >>> format_percentage(0.8125, decimal_places=1)
        '81.2%'
    """
    return f"{value * 100:.{decimal_places}f}%"
