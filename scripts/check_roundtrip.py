"""Check that every Markdown file under a directory survives a parse/rebuild round trip.

For each file, parses the tables, rebuilds the document without edits, parses
the result again and compares headers and rows cell by cell.  Files whose
tables change (or whose table count changes) are listed at the end.  Nothing
is written to disk.

Usage:
  python scripts/check_roundtrip.py docs/
"""

import argparse
import logging
from pathlib import Path

from tqdm import tqdm

from md_sheet.config import MARKDOWN_SUFFIX
from md_sheet.files import MarkdownFileError, read_markdown_file
from md_sheet.tables.extraction import parse_markdown
from md_sheet.tables.rebuild import rebuild_document

logger = logging.getLogger(__name__)


def check_file(path: Path) -> list[str]:
    """Return a list of problems found for one file (empty if it round-trips)."""
    document = read_markdown_file(path)
    reparsed = parse_markdown(rebuild_document(document.lines, document.tables))

    if len(reparsed.tables) != len(document.tables):
        return [f"table count {len(document.tables)} -> {len(reparsed.tables)}"]

    problems: list[str] = []
    for idx, (before, after) in enumerate(zip(document.tables, reparsed.tables)):
        if before.headers != after.headers:
            problems.append(f"table {idx} (line {before.start_line + 1}): headers differ")
        if before.rows != after.rows:
            problems.append(f"table {idx} (line {before.start_line + 1}): rows differ")
    return problems


def main():
    """Walk the directory and report files that do not round-trip."""
    parser = argparse.ArgumentParser(description="Check Markdown tables survive parse -> rebuild -> parse")
    parser.add_argument("directory", type=Path, help="Directory to scan recursively")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    files = sorted(p for p in args.directory.rglob(f"*{MARKDOWN_SUFFIX}") if p.is_file())
    logger.info("Checking %d files under %s", len(files), args.directory)

    failures: dict[Path, list[str]] = {}
    for path in tqdm(files, desc="Round-trip"):
        try:
            problems = check_file(path)
        except MarkdownFileError as exc:
            problems = [f"unreadable: {exc}"]
        if problems:
            failures[path] = problems

    for path, problems in failures.items():
        print(f"{path}:")
        for problem in problems:
            print(f"  - {problem}")
    logger.info("%d/%d files round-trip cleanly", len(files) - len(failures), len(files))


if __name__ == "__main__":
    main()
