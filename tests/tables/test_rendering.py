"""Unit tests for column widths and pipe-table rendering."""

# pylint: disable=missing-class-docstring,missing-function-docstring

from md_sheet.tables.rendering import column_widths, serialize_table
from md_sheet.tables.schema import Alignment, MarkdownTable


def make_table(headers, rows, alignments=None) -> MarkdownTable:
    """Build a table with a span consistent with its row count."""
    return MarkdownTable(
        headers=headers,
        alignments=alignments if alignments is not None else [Alignment.NONE] * len(headers),
        rows=rows,
        start_line=0,
        end_line=1 + len(rows),
    )


# ===========================================================================
# column_widths tests
# ===========================================================================


class TestColumnWidths:

    def test_minimum_width(self):
        assert column_widths(make_table(["A", "B"], [["1", "2"]])) == [3, 3]

    def test_header_wider(self):
        assert column_widths(make_table(["Name"], [["x"]])) == [4]

    def test_cell_wider(self):
        assert column_widths(make_table(["A"], [["apple"], ["kiwi"]])) == [5]

    def test_extra_cells_ignored(self):
        assert column_widths(make_table(["A"], [["1", "very long extra cell"]])) == [3]


# ===========================================================================
# serialize_table tests
# ===========================================================================


class TestSerializeTable:

    def test_basic(self):
        table = make_table(["A", "B"], [["1", "2"]])
        assert serialize_table(table) == "| A   | B   |\n| ----| ----|\n| 1   | 2   |\n"

    def test_alignment_markers(self):
        table = make_table(
            ["Name", "Qty", "Note", "X"],
            [["apple", "10", "ok", "y"]],
            [Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER, Alignment.NONE],
        )
        assert serialize_table(table).splitlines() == [
            "| Name  | Qty | Note | X   |",
            "|:------| ---:|:----:| ----|",
            "| apple | 10  | ok   | y   |",
        ]

    def test_missing_alignments_render_as_none(self):
        table = make_table(["A", "B"], [], [Alignment.RIGHT])
        assert serialize_table(table).splitlines()[1] == "| ---:| ----|"

    def test_short_row_rendered_with_empty_cells(self):
        table = make_table(["A", "B"], [["1"]])
        assert serialize_table(table).splitlines()[2] == "| 1   |     |"

    def test_no_body_rows(self):
        table = make_table(["Header"], [])
        assert serialize_table(table) == "| Header |\n| -------|\n"

    def test_ends_with_newline(self):
        assert serialize_table(make_table(["A"], [["1"]])).endswith("|\n")

    def test_all_rows_same_length(self):
        table = make_table(["A", "Long header"], [["wide cell value", ""], ["", "x"]])
        lengths = {len(line) for line in serialize_table(table).splitlines()}
        assert len(lengths) == 1
