"""FastAPI command layer for a Markdown table editor frontend.

Exposes the three editor commands over HTTP: list the Markdown file tree,
read-and-parse a file, and rebuild-and-save a file from edited tables.  Each
route only forwards to ``md_sheet.files``; collaborator errors come back as
HTTP errors carrying the plain message in ``detail``.

Usage:
    python -m md_sheet.web.app
    # => Uvicorn running on http://127.0.0.1:8000
"""

import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from md_sheet.config import HOST, PORT
from md_sheet.files import (
    DirectoryNotFoundError,
    FileEntry,
    MarkdownFileError,
    get_file_tree,
    read_markdown_file,
    save_markdown_file,
)
from md_sheet.tables.schema import MarkdownTable, ParsedDocument

logger = logging.getLogger(__name__)

app = FastAPI(title="Markdown Sheet")


class SaveRequest(BaseModel):
    """Body of a save command: the file's original lines plus its edited tables."""

    file_path: str
    original_lines: list[str]
    tables: list[MarkdownTable]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/api/tree", response_model=list[FileEntry])
def file_tree(dir_path: str):
    """List Markdown files and folders under *dir_path*."""
    try:
        return get_file_tree(dir_path)
    except DirectoryNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@app.get("/api/file", response_model=ParsedDocument)
def read_file(file_path: str):
    """Read a Markdown file and return its lines and parsed tables."""
    try:
        return read_markdown_file(file_path)
    except MarkdownFileError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.put("/api/file")
def save_file(body: SaveRequest):
    """Splice the edited tables into the original lines and write the file."""
    try:
        save_markdown_file(body.file_path, body.original_lines, body.tables)
    except MarkdownFileError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"ok": True}


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------


def main():
    """Start the web server via uvicorn."""
    import uvicorn  # pylint: disable=import-outside-toplevel

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    main()
