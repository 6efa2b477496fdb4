"""Markdown rendering of a ``MarkdownTable`` as an aligned pipe table.

Every column is padded to the width of its widest cell (never narrower than
``MIN_COLUMN_WIDTH``) so the table lines up in a plain-text editor.
"""

from md_sheet.config import MIN_COLUMN_WIDTH
from md_sheet.tables.schema import Alignment, MarkdownTable


def column_widths(table: MarkdownTable) -> list[int]:
    """Return the display width of each column: its widest header or body cell, at least MIN_COLUMN_WIDTH."""
    widths = [max(MIN_COLUMN_WIDTH, len(header)) for header in table.headers]
    for row in table.rows:
        for col, cell in enumerate(row[: len(widths)]):
            widths[col] = max(widths[col], len(cell))
    return widths


def _render_row(cells: list[str], widths: list[int]) -> str:
    """'| a   | bb  |' for cells ['a', 'bb'] and widths [3, 3]."""
    parts = ["|"]
    for col, width in enumerate(widths):
        cell = cells[col] if col < len(cells) else ""
        parts.append(f" {cell.ljust(width)} |")
    return "".join(parts)


def _render_separator_cell(alignment: Alignment, width: int) -> str:
    """Alignment marker for one column, e.g. ':----:|' for a centred column of width 4."""
    dashes = "-" * width
    if alignment == Alignment.LEFT:
        return f":{dashes}-|"
    if alignment == Alignment.RIGHT:
        return f" {dashes}:|"
    if alignment == Alignment.CENTER:
        return f":{dashes}:|"
    return f" {dashes}-|"


def serialize_table(table: MarkdownTable) -> str:
    """Render the table as header row, separator row and body rows, each newline-terminated."""
    widths = column_widths(table)
    lines: list[str] = [_render_row(table.headers, widths)]

    # Separator cells are ":" or " ", w dashes, then ":" or "-", so they run one char wider than the cells
    lines.append("|" + "".join(_render_separator_cell(table.alignment(col), width) for col, width in enumerate(widths)))

    for row in table.rows:
        lines.append(_render_row(row, widths))

    return "".join(line + "\n" for line in lines)
