"""File-system layer around the table core: file tree, read and save.

These are thin wrappers.  ``read_markdown_file`` hands the file text to
``parse_markdown``; ``save_markdown_file`` writes whatever
``rebuild_document`` returns.  Failures are reported as ``MarkdownFileError``
with a plain message, logged, and never retried.
"""

import logging
from pathlib import Path

from pydantic import BaseModel

from md_sheet.config import MARKDOWN_SUFFIX, MAX_TREE_DEPTH
from md_sheet.tables.extraction import parse_markdown
from md_sheet.tables.rebuild import rebuild_document
from md_sheet.tables.schema import MarkdownTable, ParsedDocument

logger = logging.getLogger(__name__)


class MarkdownFileError(Exception):
    """A Markdown file or directory could not be read or written."""


class DirectoryNotFoundError(MarkdownFileError):
    """The requested tree root does not exist or is not a directory."""


class FileEntry(BaseModel):
    """One node of the file tree; ``children`` is None for files."""

    name: str
    path: str
    is_dir: bool
    children: list["FileEntry"] | None = None


# ---------------------------------------------------------------------------
# File tree
# ---------------------------------------------------------------------------


def _read_dir_recursive(directory: Path, depth: int) -> list[FileEntry]:
    """List Markdown files and the directories containing them, sorted by name."""
    if depth > MAX_TREE_DEPTH:
        return []
    try:
        items = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        return []

    entries: list[FileEntry] = []
    for path in items:
        # Hidden files and folders (.git, .venv, ...) are never shown
        if path.name.startswith("."):
            continue
        if path.is_dir():
            children = _read_dir_recursive(path, depth + 1)
            # Only folders that contain Markdown somewhere below
            if children:
                entries.append(FileEntry(name=path.name, path=str(path), is_dir=True, children=children))
        elif path.name.endswith(MARKDOWN_SUFFIX):
            entries.append(FileEntry(name=path.name, path=str(path), is_dir=False))
    return entries


def get_file_tree(dir_path: str | Path) -> list[FileEntry]:
    """Return the Markdown file tree under *dir_path*.

    Raises DirectoryNotFoundError if the path is missing or not a directory.
    """
    root = Path(dir_path)
    if not root.is_dir():
        logger.error("Directory does not exist: %s", root)
        raise DirectoryNotFoundError(f"Directory does not exist: {root}")
    entries = _read_dir_recursive(root, 0)
    logger.info("Listed %d top-level entries under %s", len(entries), root)
    return entries


# ---------------------------------------------------------------------------
# Read / save
# ---------------------------------------------------------------------------


def read_markdown_file(file_path: str | Path) -> ParsedDocument:
    """Read a Markdown file and parse its tables."""
    try:
        with open(file_path, "r", encoding="utf-8") as fopen:
            content = fopen.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", file_path, exc)
        raise MarkdownFileError(str(exc)) from exc

    document = parse_markdown(content)
    logger.info("Read %s: %d lines, %d tables", file_path, len(document.lines), len(document.tables))
    return document


def save_markdown_file(file_path: str | Path, original_lines: list[str], tables: list[MarkdownTable]) -> None:
    """Re-render *tables* into *original_lines* and write the result to *file_path*."""
    content = rebuild_document(original_lines, tables)
    try:
        with open(file_path, "w", encoding="utf-8", newline="") as fopen:
            fopen.write(content)
    except OSError as exc:
        logger.error("Could not write %s: %s", file_path, exc)
        raise MarkdownFileError(str(exc)) from exc
    logger.info("Saved %s (%d tables)", file_path, len(tables))
