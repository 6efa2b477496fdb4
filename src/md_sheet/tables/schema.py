"""Pydantic models for pipe tables and parsed Markdown documents.

``MarkdownTable`` is what the extractor emits, what an editor mutates, and
what the rebuilder renders back into the document.  Its ``start_line`` and
``end_line`` are offsets into the ORIGINAL line list of the document it was
parsed from; edits to headers, alignments or rows never move them.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Alignment(str, Enum):
    """Column alignment declared by the separator row."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    NONE = "none"


class MarkdownTable(BaseModel):
    """One pipe table found in a Markdown document.

    The parser guarantees that every row has exactly ``len(headers)`` cells
    and that ``end_line - start_line - 1 == len(rows)``.  Neither is enforced
    after construction: the model is not validated on assignment, so an editor
    can add or drop rows and columns before handing the table to
    ``rebuild_document``.  Only the line span itself is checked, since a table
    always owns at least its header and separator lines.
    """

    heading: str | None = None
    headers: list[str]
    alignments: list[Alignment] = Field(default_factory=list)
    rows: list[list[str]] = Field(default_factory=list)
    start_line: int
    end_line: int

    @model_validator(mode="after")
    def validate_line_span(self) -> "MarkdownTable":
        """Ensure the span covers at least a header row and a separator row."""
        if self.start_line < 0:
            raise ValueError(f"start_line must be >= 0, got {self.start_line}")
        if self.end_line < self.start_line + 1:
            raise ValueError(f"end_line {self.end_line} must be at least start_line + 1 ({self.start_line + 1})")
        return self

    @property
    def column_count(self) -> int:
        """Number of columns, as defined by the header row."""
        return len(self.headers)

    def alignment(self, col: int) -> Alignment:
        """Return the alignment of column *col*, or NONE if the separator row had no cell for it."""
        if 0 <= col < len(self.alignments):
            return Alignment(self.alignments[col])
        return Alignment.NONE


class ParsedDocument(BaseModel):
    """A Markdown document split into lines plus the tables found in it."""

    lines: list[str]
    tables: list[MarkdownTable] = Field(default_factory=list)
