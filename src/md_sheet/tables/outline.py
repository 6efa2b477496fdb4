"""Heading outline of a Markdown document, with anchor IDs for navigation."""

from typing import NamedTuple

from md_sheet.tables.patterns import (
    ANCHOR_PREFIX,
    ANCHOR_SPACE_RE,
    ANCHOR_STRIP_RE,
    FRONT_MATTER_FENCE,
    OUTLINE_HEADING_RE,
)


class Heading(NamedTuple):
    """One outline entry: heading level (1-4), title text, anchor ID, zero-based line index."""

    level: int
    text: str
    anchor: str
    line: int


def heading_id(text: str) -> str:
    """Build the anchor ID for a heading title.

    'Hello, World!' -> 'heading-hello-world'
    """
    slug = ANCHOR_STRIP_RE.sub("", text.lower())
    return ANCHOR_PREFIX + ANCHOR_SPACE_RE.sub("-", slug)


def _body_start(lines: list[str]) -> int:
    """Index of the first line after a leading YAML front matter block (0 if there is none).

    An unclosed block is not front matter, so the whole document is scanned.
    """
    if not lines or lines[0].rstrip("\r") != FRONT_MATTER_FENCE:
        return 0
    for idx in range(1, len(lines)):
        if lines[idx].startswith(FRONT_MATTER_FENCE):
            return idx + 1
    return 0


def extract_outline(lines: list[str]) -> list[Heading]:
    """Return the level 1-4 ATX headings of a document in order, skipping front matter."""
    headings: list[Heading] = []
    for idx in range(_body_start(lines), len(lines)):
        match = OUTLINE_HEADING_RE.match(lines[idx])
        if match is None:
            continue
        text = match.group(2).strip()
        headings.append(Heading(len(match.group(1)), text, heading_id(text), idx))
    return headings
