"""Command-line access to the Markdown table tools.

Usage:
    python -m md_sheet.cli tree docs/
    python -m md_sheet.cli show README.md
    python -m md_sheet.cli format README.md --in-place
    python -m md_sheet.cli outline README.md
"""

import argparse
import json
import logging
import sys

from md_sheet.files import MarkdownFileError, get_file_tree, read_markdown_file, save_markdown_file
from md_sheet.tables.outline import extract_outline
from md_sheet.tables.rebuild import rebuild_document

logger = logging.getLogger(__name__)


def _cmd_tree(args: argparse.Namespace) -> None:
    entries = get_file_tree(args.dir_path)
    print(json.dumps([entry.model_dump() for entry in entries], indent=2, ensure_ascii=False))


def _cmd_show(args: argparse.Namespace) -> None:
    document = read_markdown_file(args.file_path)
    print(json.dumps([table.model_dump(mode="json") for table in document.tables], indent=2, ensure_ascii=False))


def _cmd_format(args: argparse.Namespace) -> None:
    """Re-render every table with aligned columns; text outside tables is untouched."""
    document = read_markdown_file(args.file_path)
    if args.in_place:
        save_markdown_file(args.file_path, document.lines, document.tables)
        logger.info("Formatted %d tables in %s", len(document.tables), args.file_path)
    else:
        sys.stdout.write(rebuild_document(document.lines, document.tables))


def _cmd_outline(args: argparse.Namespace) -> None:
    document = read_markdown_file(args.file_path)
    for heading in extract_outline(document.lines):
        indent = "  " * (heading.level - 1)
        print(f"{indent}{heading.text}  (#{heading.anchor}, line {heading.line + 1})")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(prog="md-sheet", description="Inspect and reformat pipe tables in Markdown files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tree = subparsers.add_parser("tree", help="List Markdown files under a directory as JSON")
    tree.add_argument("dir_path")
    tree.set_defaults(func=_cmd_tree)

    show = subparsers.add_parser("show", help="Print the tables of a Markdown file as JSON")
    show.add_argument("file_path")
    show.set_defaults(func=_cmd_show)

    fmt = subparsers.add_parser("format", help="Re-render all tables with aligned columns")
    fmt.add_argument("file_path")
    fmt.add_argument("--in-place", action="store_true", help="Overwrite the file instead of printing to stdout")
    fmt.set_defaults(func=_cmd_format)

    outline = subparsers.add_parser("outline", help="Print the heading outline of a Markdown file")
    outline.add_argument("file_path")
    outline.set_defaults(func=_cmd_outline)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(asctime)s - %(levelname)s - %(message)s")

    try:
        args.func(args)
    except MarkdownFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
