"""Shared test configuration and fixtures."""

from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def sample_markdown() -> str:
    """A document with prose, two headings and two tables."""
    return (
        "# Inventory\n"
        "\n"
        "Some intro text.\n"
        "\n"
        "| Item | Qty |\n"
        "|:-----|----:|\n"
        "| apple | 3 |\n"
        "| pear | 10 |\n"
        "\n"
        "## Prices\n"
        "\n"
        "| Item | Price | Note |\n"
        "|---|:---:|---|\n"
        "| apple | 1.20 |\n"
        "\n"
        "Trailing paragraph.\n"
    )
