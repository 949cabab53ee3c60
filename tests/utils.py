"""Test utilities for the blockdown test suite.

Helpers for writing HTML fixtures to disk and checking invariants every
Markdown output must satisfy.
"""

import shutil
import tempfile
from pathlib import Path


def assert_markdown_valid(markdown: str) -> None:
    """Assert the document-level guarantees of converter output."""
    assert "\n\n\n" not in markdown, f"blank-line run in output: {markdown!r}"
    assert markdown == markdown.strip(" \t\n\v\f\r\0"), f"untrimmed output: {markdown!r}"


def write_html_file(directory: Path, content: str, name: str = "page.html", encoding: str = "utf-8") -> Path:
    """Write HTML content to a file and return its path."""
    path = directory / name
    path.write_bytes(content.encode(encoding))
    return path


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
