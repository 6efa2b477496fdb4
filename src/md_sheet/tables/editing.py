"""Cell, row and column edits plus search/replace over a list of tables.

Every operation returns a NEW list of deep-copied tables and leaves its input
alone, so the previous list can be kept as an undo snapshot (see history.py).
The header row is addressed as row ``HEADER_ROW`` (-1).

Edits never touch ``start_line``/``end_line``: those stay offsets into the
original document lines, and ``rebuild_document`` replaces the whole original
span with however many rows the edited table now has.
"""

import logging
import re
from typing import NamedTuple

from md_sheet.tables.patterns import INLINE_WRAPPERS, PASTE_CELL_SEPARATOR
from md_sheet.tables.schema import Alignment, MarkdownTable

logger = logging.getLogger(__name__)

HEADER_ROW = -1

ROW_POSITIONS = ("above", "below")
COLUMN_POSITIONS = ("left", "right")


class CellMatch(NamedTuple):
    """Location and current value of a cell that matched a search."""

    table_index: int
    row: int
    col: int
    value: str


# ─── Helpers ─────────────────────────────────────────────────────────────────


def _copy(tables: list[MarkdownTable]) -> list[MarkdownTable]:
    """Deep-copy every table so edits cannot leak into the caller's snapshot."""
    return [table.model_copy(deep=True) for table in tables]


def _check_index(index: int, size: int, what: str) -> None:
    """Raise IndexError unless 0 <= index < size."""
    if not 0 <= index < size:
        raise IndexError(f"{what} index {index} out of range (0..{size - 1})")


def _check_position(position: str, allowed: tuple[str, ...]) -> None:
    if position not in allowed:
        raise ValueError(f"position must be one of {allowed}, got {position!r}")


# ─── Cell Edits ──────────────────────────────────────────────────────────────


def update_cell(tables: list[MarkdownTable], table_index: int, row: int, col: int, value: str) -> list[MarkdownTable]:
    """Set one header cell (``row == HEADER_ROW``) or body cell to *value*."""
    _check_index(table_index, len(tables), "table")
    result = _copy(tables)
    table = result[table_index]
    if row == HEADER_ROW:
        _check_index(col, len(table.headers), "column")
        table.headers[col] = value
    else:
        _check_index(row, len(table.rows), "row")
        _check_index(col, len(table.rows[row]), "column")
        table.rows[row][col] = value
    return result


def _cell_value(table: MarkdownTable, row: int, col: int) -> str:
    """Current text of a header or body cell (indices already checked)."""
    return table.headers[col] if row == HEADER_ROW else table.rows[row][col]


def _cell_exists(table: MarkdownTable, row: int, col: int) -> bool:
    if row == HEADER_ROW:
        return 0 <= col < len(table.headers)
    return 0 <= row < len(table.rows) and 0 <= col < len(table.rows[row])


def toggle_wrap(text: str, wrapper: str) -> str:
    """Add or remove an inline marker around a cell's text.

    'bold' -> '**bold**' -> 'bold' for wrapper '**'.
    """
    if len(text) >= 2 * len(wrapper) and text.startswith(wrapper) and text.endswith(wrapper):
        return text[len(wrapper) : -len(wrapper)]
    return f"{wrapper}{text}{wrapper}"


def toggle_cell_format(tables: list[MarkdownTable], table_index: int, row: int, col: int, wrapper: str) -> list[MarkdownTable]:
    """Toggle bold/italic/strikethrough/code markers (one of INLINE_WRAPPERS) around one cell."""
    if wrapper not in INLINE_WRAPPERS:
        raise ValueError(f"wrapper must be one of {INLINE_WRAPPERS}, got {wrapper!r}")
    _check_index(table_index, len(tables), "table")
    table = tables[table_index]
    if not _cell_exists(table, row, col):
        raise IndexError(f"cell ({row}, {col}) out of range")
    return update_cell(tables, table_index, row, col, toggle_wrap(_cell_value(table, row, col), wrapper))


def fill_down(tables: list[MarkdownTable], table_index: int, row: int, col: int) -> list[MarkdownTable]:
    """Copy the value of the body cell above into (*row*, *col*).

    The first body row (and the header) has nothing above it to copy from, so
    the tables come back unchanged.
    """
    _check_index(table_index, len(tables), "table")
    table = tables[table_index]
    if row <= 0:
        return _copy(tables)
    _check_index(row, len(table.rows), "row")
    _check_index(col, table.column_count, "column")
    above = table.rows[row - 1][col] if col < len(table.rows[row - 1]) else ""
    return update_cell(tables, table_index, row, col, above)


def paste_grid(tables: list[MarkdownTable], table_index: int, row: int, col: int, text: str) -> list[MarkdownTable]:
    """Paste clipboard text starting at cell (*row*, *col*).

    Multi-line or tab-separated text is spread over the grid (rows on
    newlines, cells on tabs, blank lines dropped); cells that would fall
    outside the table are ignored.  Anything else is pasted trimmed into the
    single target cell.
    """
    _check_index(table_index, len(tables), "table")
    if not _cell_exists(tables[table_index], row, col):
        raise IndexError(f"cell ({row}, {col}) out of range")

    lines = [line for line in text.split("\n") if line.strip()]
    if len(lines) <= 1 and not (lines and PASTE_CELL_SEPARATOR in lines[0]):
        return update_cell(tables, table_index, row, col, text.strip())

    result = _copy(tables)
    table = result[table_index]
    written = 0
    for ri, line in enumerate(lines):
        target_row = row + ri
        if target_row >= len(table.rows):
            break
        for ci, cell in enumerate(line.split(PASTE_CELL_SEPARATOR)):
            target_col = col + ci
            if target_col >= table.column_count:
                break
            if target_row == HEADER_ROW:
                table.headers[target_col] = cell.strip()
            else:
                table.rows[target_row][target_col] = cell.strip()
            written += 1
    logger.debug("Table %d: pasted %d cells from (%d, %d)", table_index, written, row, col)
    return result


# ─── Row Edits ───────────────────────────────────────────────────────────────


def add_row(tables: list[MarkdownTable], table_index: int, row: int, position: str = "below") -> list[MarkdownTable]:
    """Insert an empty body row above or below *row*.

    ``row`` may be HEADER_ROW with position "below" to insert at the top of the
    body, which is how a row gets added to a table that has none.
    """
    _check_position(position, ROW_POSITIONS)
    _check_index(table_index, len(tables), "table")
    result = _copy(tables)
    table = result[table_index]
    insert_at = row if position == "above" else row + 1
    _check_index(insert_at, len(table.rows) + 1, "row insert")
    table.rows.insert(insert_at, [""] * table.column_count)
    logger.debug("Table %d: inserted row at %d (%d rows)", table_index, insert_at, len(table.rows))
    return result


def delete_row(tables: list[MarkdownTable], table_index: int, row: int) -> list[MarkdownTable]:
    """Remove body row *row*.  The last remaining body row is never removed."""
    _check_index(table_index, len(tables), "table")
    result = _copy(tables)
    table = result[table_index]
    _check_index(row, len(table.rows), "row")
    if len(table.rows) <= 1:
        logger.debug("Table %d: refusing to delete its only row", table_index)
        return result
    del table.rows[row]
    return result


# ─── Column Edits ────────────────────────────────────────────────────────────


def add_column(tables: list[MarkdownTable], table_index: int, col: int, position: str = "right") -> list[MarkdownTable]:
    """Insert an empty, unaligned column left or right of *col*."""
    _check_position(position, COLUMN_POSITIONS)
    _check_index(table_index, len(tables), "table")
    result = _copy(tables)
    table = result[table_index]
    insert_at = col if position == "left" else col + 1
    _check_index(insert_at, table.column_count + 1, "column insert")

    # Fill short alignment lists first so the new NONE lands at the right position
    while len(table.alignments) < insert_at:
        table.alignments.append(Alignment.NONE)
    table.headers.insert(insert_at, "")
    table.alignments.insert(insert_at, Alignment.NONE)
    for cells in table.rows:
        cells.insert(insert_at, "")
    logger.debug("Table %d: inserted column at %d (%d columns)", table_index, insert_at, table.column_count)
    return result


def delete_column(tables: list[MarkdownTable], table_index: int, col: int) -> list[MarkdownTable]:
    """Remove column *col* from headers, alignments and rows.  The last column is never removed."""
    _check_index(table_index, len(tables), "table")
    result = _copy(tables)
    table = result[table_index]
    _check_index(col, table.column_count, "column")
    if table.column_count <= 1:
        logger.debug("Table %d: refusing to delete its only column", table_index)
        return result
    del table.headers[col]
    if col < len(table.alignments):
        del table.alignments[col]
    for cells in table.rows:
        if col < len(cells):
            del cells[col]
    return result


# ─── Search / Replace ────────────────────────────────────────────────────────


def find_cells(tables: list[MarkdownTable], query: str) -> list[CellMatch]:
    """Return every header and body cell containing *query*, case-insensitively, in table order."""
    if not query:
        return []
    needle = query.lower()
    matches: list[CellMatch] = []
    for ti, table in enumerate(tables):
        for ci, header in enumerate(table.headers):
            if needle in header.lower():
                matches.append(CellMatch(ti, HEADER_ROW, ci, header))
        for ri, cells in enumerate(table.rows):
            for ci, cell in enumerate(cells):
                if needle in cell.lower():
                    matches.append(CellMatch(ti, ri, ci, cell))
    return matches


def replace_in_cells(
    tables: list[MarkdownTable],
    query: str,
    replacement: str,
    matches: list[CellMatch] | None = None,
) -> list[MarkdownTable]:
    """Replace every case-insensitive occurrence of *query* in the matched cells.

    *query* is taken literally (no regex syntax).  When *matches* is omitted,
    all cells found by ``find_cells`` are rewritten.
    """
    if not query:
        return _copy(tables)
    if matches is None:
        matches = find_cells(tables, query)
    pattern = re.compile(re.escape(query), re.IGNORECASE)

    result = _copy(tables)
    for match in matches:
        table = result[match.table_index]
        if match.row == HEADER_ROW:
            table.headers[match.col] = pattern.sub(lambda _: replacement, table.headers[match.col])
        else:
            table.rows[match.row][match.col] = pattern.sub(lambda _: replacement, table.rows[match.row][match.col])
    logger.debug("Replaced %r in %d cells", query, len(matches))
    return result
