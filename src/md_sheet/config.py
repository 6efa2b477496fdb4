"""Shared configuration for the markdown-sheet file layer, renderer and web server."""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Only files with this suffix show up in the file tree
MARKDOWN_SUFFIX = os.getenv("MD_SHEET_SUFFIX", ".md")

# Directory levels below the tree root that are still listed
MAX_TREE_DEPTH = int(os.getenv("MD_SHEET_MAX_DEPTH", "5"))

# Narrowest rendered column, so the separator row is never shorter than "---"
MIN_COLUMN_WIDTH = 3

HOST = os.getenv("MD_SHEET_HOST", "127.0.0.1")
PORT = int(os.getenv("MD_SHEET_PORT", "8000"))
