"""Compiled regex patterns and constants for pipe-table detection.

These describe the only grammar the parser understands: ATX headings (used to
label the table that follows them) and pipe-delimited rows with a single
dash/colon alignment row under the header.  Used by tokenizer.py,
extraction.py and outline.py.
"""

import re

# ─── Row Patterns ─────────────────────────────────────────────────────────────

# Cell delimiter inside a table row.  There is no escape syntax for a literal pipe.
PIPE = "|"

# One cell of an alignment row, e.g. "---", ":--", "--:", ":-:" (also "::" and ":")
SEPARATOR_CELL_RE = re.compile(r"^[-:]+$")


# ─── Heading Patterns ─────────────────────────────────────────────────────────

# Any line whose trimmed text starts with "#" is treated as a heading marker
HEADING_MARKER = "#"

# Outline headings: levels 1-4 with at least one space before the title
OUTLINE_HEADING_RE = re.compile(r"^(#{1,4})\s+(.+)")


# ─── Anchor Slug Patterns ─────────────────────────────────────────────────────

# Characters dropped from heading anchors (keeps ASCII word chars, whitespace, "-" and kana/CJK)
ANCHOR_STRIP_RE = re.compile(r"[^0-9A-Za-z_\s\u3040-\u9fff-]")

# Whitespace runs collapsed to a single "-" in anchors
ANCHOR_SPACE_RE = re.compile(r"\s+")

ANCHOR_PREFIX = "heading-"


# ─── Front Matter / Inline Format Constants ──────────────────────────────────

# YAML front matter opens with this exact first line and closes at the next line starting with it
FRONT_MATTER_FENCE = "---"

# Inline Markdown markers a cell can be wrapped in (bold, italic, strikethrough, code)
INLINE_WRAPPERS = ("**", "*", "~~", "`")

# Pasted blocks: rows split on newlines, cells on tabs (spreadsheet clipboard format)
PASTE_CELL_SEPARATOR = "\t"
