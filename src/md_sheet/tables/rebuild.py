"""Document reconstruction: splice re-rendered tables back into the original text.

Text outside the tables is copied verbatim from the original line list; each
table's ``[start_line, end_line]`` span is replaced by ``serialize_table``
output built from the table's current (possibly edited) contents.
"""

import logging

from md_sheet.tables.rendering import serialize_table
from md_sheet.tables.schema import MarkdownTable

logger = logging.getLogger(__name__)


def rebuild_document(original_lines: list[str], tables: list[MarkdownTable]) -> str:
    """Return the full document text with every table re-rendered in place.

    *tables* must be sorted by ``start_line``, must not overlap, and their line
    spans must refer to *original_lines*.  This is not re-checked; a caller that
    shifted lines without re-parsing gets unspecified output.

    The result ends with a newline only if the original's last line was blank,
    so a file's trailing-newline shape survives a save.
    """
    if not tables:
        return "\n".join(original_lines)

    parts: list[str] = []
    cursor = 0

    for table in tables:
        # Verbatim text before the table
        for line in original_lines[cursor : table.start_line]:
            parts.append(line + "\n")
        parts.append(serialize_table(table))
        cursor = table.end_line + 1

    # Verbatim text after the last table
    for line in original_lines[cursor:]:
        parts.append(line + "\n")

    result = "".join(parts)
    ends_blank = bool(original_lines) and original_lines[-1] == ""
    if result.endswith("\n") and not ends_blank:
        result = result[:-1]

    logger.debug("Rebuilt document from %d lines with %d tables", len(original_lines), len(tables))
    return result


# Short name for the rebuild boundary operation
rebuild = rebuild_document
