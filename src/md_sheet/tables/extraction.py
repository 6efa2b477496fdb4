"""Table extraction: find every pipe table in a Markdown document.

Single forward pass over the document lines.  A table starts at a table line
immediately followed by a separator line, and runs over the contiguous body
rows after it.  The most recent ATX heading is carried along so each table
knows which section it sits in.  Lines that are not part of a table are left
untouched in ``ParsedDocument.lines``.
"""

import logging

from md_sheet.tables.patterns import HEADING_MARKER
from md_sheet.tables.schema import MarkdownTable, ParsedDocument
from md_sheet.tables.tokenizer import is_separator_line, is_table_line, parse_alignments, parse_row

logger = logging.getLogger(__name__)


# ─── Line Splitting ──────────────────────────────────────────────────────────


def split_lines(content: str) -> list[str]:
    """Split a document into lines without line terminators.

    A final terminator does not produce an extra empty line, so
    'a\\nb\\n' -> ['a', 'b'] while 'a\\nb\\n\\n' -> ['a', 'b', ''].  CRLF endings
    are normalised.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


# ─── Row Helpers ─────────────────────────────────────────────────────────────


def _fit_row(cells: list[str], n_cols: int) -> list[str]:
    """Pad a body row with empty cells, or truncate it, to exactly *n_cols* cells."""
    if len(cells) < n_cols:
        return cells + [""] * (n_cols - len(cells))
    return cells[:n_cols]


def _heading_text(stripped: str) -> str:
    """'## Results ' -> 'Results'."""
    return stripped.lstrip(HEADING_MARKER).strip()


def _starts_table(lines: list[str], idx: int) -> bool:
    """Return True if a header row at *idx* is followed by a separator row."""
    return idx + 1 < len(lines) and is_table_line(lines[idx]) and is_separator_line(lines[idx + 1])


def _read_table(lines: list[str], start: int, heading: str | None) -> MarkdownTable:
    """Build the table whose header row is at *start* (caller checked ``_starts_table``)."""
    headers = parse_row(lines[start])
    alignments = parse_alignments(lines[start + 1])

    # Body rows run until a non-table line or a second separator
    rows: list[list[str]] = []
    j = start + 2
    while j < len(lines) and is_table_line(lines[j]) and not is_separator_line(lines[j]):
        rows.append(_fit_row(parse_row(lines[j]), len(headers)))
        j += 1

    return MarkdownTable(
        heading=heading,
        headers=headers,
        alignments=alignments,
        rows=rows,
        start_line=start,
        end_line=j - 1,
    )


# ─── Main Entry Point ────────────────────────────────────────────────────────


def parse_markdown(content: str) -> ParsedDocument:
    """Parse a Markdown document into its lines and the tables found in it.

    Never fails: malformed tables are simply not recognised and stay ordinary
    text.  Tables come back in document order and never overlap, because the
    scan resumes after each table's last line.
    """
    lines = split_lines(content)
    tables: list[MarkdownTable] = []
    last_heading: str | None = None

    i = 0
    while i < len(lines):
        stripped = lines[i].strip()

        if stripped.startswith(HEADING_MARKER):
            last_heading = _heading_text(stripped)
            i += 1
            continue

        if _starts_table(lines, i):
            table = _read_table(lines, i, last_heading)
            logger.debug(
                "Table at lines %d-%d: %d columns, %d rows (heading=%r)",
                table.start_line,
                table.end_line,
                table.column_count,
                len(table.rows),
                table.heading,
            )
            tables.append(table)
            i = table.end_line + 1
            continue

        i += 1

    logger.debug("Parsed %d lines, found %d tables", len(lines), len(tables))
    return ParsedDocument(lines=lines, tables=tables)


# Short name for the parse boundary operation
parse = parse_markdown
