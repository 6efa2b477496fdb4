"""Pipe-table parsing, rendering, document rebuilding and editing.

Submodules:
  patterns    -- compiled regex patterns and grammar constants
  tokenizer   -- row splitting, table/separator line classification, alignments
  schema      -- MarkdownTable / ParsedDocument Pydantic models
  extraction  -- parse_markdown(): find every table in a document
  rendering   -- serialize_table(): aligned, padded pipe-table text
  rebuild     -- rebuild_document(): splice rendered tables into the original lines
  editing     -- copy-on-write cell/row/column edits and search/replace
  history     -- undo/redo snapshots of edited tables
  outline     -- heading outline with anchor IDs
"""

from md_sheet.tables.extraction import parse, parse_markdown
from md_sheet.tables.rebuild import rebuild, rebuild_document
from md_sheet.tables.rendering import serialize_table
from md_sheet.tables.schema import Alignment, MarkdownTable, ParsedDocument

__all__ = [
    "Alignment",
    "MarkdownTable",
    "ParsedDocument",
    "parse",
    "parse_markdown",
    "rebuild",
    "rebuild_document",
    "serialize_table",
]
