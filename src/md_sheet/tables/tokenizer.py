"""Line classification and tokenizing helpers for pipe tables.

Each function takes a single raw document line.  ``parse_row`` and
``parse_alignments`` split it into cells; ``is_table_line`` and
``is_separator_line`` decide which role the line can play in a table.
"""

from md_sheet.tables.patterns import PIPE, SEPARATOR_CELL_RE
from md_sheet.tables.schema import Alignment


def _split_cells(line: str) -> list[str]:
    """Strip one optional leading and one optional trailing pipe, then split on the rest (untrimmed)."""
    inner = line.strip()
    if inner.startswith(PIPE):
        inner = inner[1:]
    if inner.endswith(PIPE):
        inner = inner[:-1]
    return inner.split(PIPE)


def parse_row(line: str) -> list[str]:
    """Return the trimmed cell strings of a pipe-delimited row.

    '| a | b |' -> ['a', 'b'];  'a | b' -> ['a', 'b'];  '|||' -> ['', '']
    """
    return [cell.strip() for cell in _split_cells(line)]


def is_table_line(line: str) -> bool:
    """Return True if the line is non-blank and contains at least one pipe."""
    stripped = line.strip()
    return bool(stripped) and PIPE in stripped


def is_separator_line(line: str) -> bool:
    """Return True for an alignment row such as '|---|:--:|--:|'.

    Every cell must be non-empty and made only of '-' and ':', so a bare '||'
    or '| | |' is never taken for a separator.
    """
    if PIPE not in line:
        return False
    cells = [cell.strip() for cell in _split_cells(line)]
    return all(SEPARATOR_CELL_RE.match(cell) for cell in cells)


def _cell_alignment(cell: str) -> Alignment:
    """Map one separator cell to its alignment."""
    starts = cell.startswith(":")
    ends = cell.endswith(":")
    if starts and ends:
        return Alignment.CENTER
    if ends:
        return Alignment.RIGHT
    if starts:
        return Alignment.LEFT
    return Alignment.NONE


def parse_alignments(line: str) -> list[Alignment]:
    """Return the per-column alignments of a line already known to be a separator."""
    return [_cell_alignment(cell.strip()) for cell in _split_cells(line)]
