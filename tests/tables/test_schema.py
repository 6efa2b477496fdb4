"""Unit tests for the MarkdownTable / ParsedDocument models."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from md_sheet.tables.extraction import parse_markdown
from md_sheet.tables.schema import Alignment, MarkdownTable, ParsedDocument


class TestMarkdownTable:

    def test_span_must_cover_separator(self):
        with pytest.raises(ValidationError):
            MarkdownTable(headers=["A"], start_line=3, end_line=3)

    def test_negative_start_rejected(self):
        with pytest.raises(ValidationError):
            MarkdownTable(headers=["A"], start_line=-1, end_line=0)

    def test_defaults(self):
        table = MarkdownTable(headers=["A", "B"], start_line=0, end_line=1)
        assert table.heading is None
        assert table.rows == []
        assert table.column_count == 2

    def test_alignment_out_of_range_is_none(self):
        table = MarkdownTable(headers=["A", "B"], alignments=["left"], start_line=0, end_line=1)
        assert table.alignment(0) == Alignment.LEFT
        assert table.alignment(1) == Alignment.NONE
        assert table.alignment(-1) == Alignment.NONE

    def test_unknown_alignment_rejected(self):
        with pytest.raises(ValidationError):
            MarkdownTable(headers=["A"], alignments=["diagonal"], start_line=0, end_line=1)

    def test_mutation_not_revalidated(self):
        table = MarkdownTable(headers=["A"], rows=[["1"]], start_line=0, end_line=2)
        table.rows.append(["2", "extra"])
        assert len(table.rows) == 2


class TestParsedDocumentJson:

    def test_json_round_trip(self):
        doc = parse_markdown("# H\n| A |\n|:-:|\n| 1 |\n")
        payload = doc.model_dump(mode="json")
        assert payload["tables"][0] == {
            "heading": "H",
            "headers": ["A"],
            "alignments": ["center"],
            "rows": [["1"]],
            "start_line": 1,
            "end_line": 3,
        }
        assert ParsedDocument.model_validate(payload) == doc
