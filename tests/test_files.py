"""Unit tests for the file tree, read and save wrappers."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest

from md_sheet import files
from md_sheet.files import (
    DirectoryNotFoundError,
    MarkdownFileError,
    get_file_tree,
    read_markdown_file,
    save_markdown_file,
)
from md_sheet.tables.editing import update_cell


def touch(path, text="# x\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


# ===========================================================================
# get_file_tree tests
# ===========================================================================


class TestGetFileTree:

    def test_markdown_files_only_sorted(self, tmp_path):
        touch(tmp_path / "b.md")
        touch(tmp_path / "a.md")
        touch(tmp_path / "notes.txt")
        entries = get_file_tree(tmp_path)
        assert [e.name for e in entries] == ["a.md", "b.md"]
        assert all(not e.is_dir and e.children is None for e in entries)
        assert entries[0].path == str(tmp_path / "a.md")

    def test_hidden_entries_skipped(self, tmp_path):
        touch(tmp_path / ".hidden.md")
        touch(tmp_path / ".git" / "inside.md")
        touch(tmp_path / "shown.md")
        assert [e.name for e in get_file_tree(tmp_path)] == ["shown.md"]

    def test_directories_without_markdown_omitted(self, tmp_path):
        touch(tmp_path / "empty_ish" / "data.csv")
        (tmp_path / "really_empty").mkdir()
        touch(tmp_path / "docs" / "guide.md")
        entries = get_file_tree(tmp_path)
        assert [e.name for e in entries] == ["docs"]
        assert entries[0].is_dir is True
        assert [c.name for c in entries[0].children] == ["guide.md"]

    def test_nested_directories(self, tmp_path):
        touch(tmp_path / "a" / "b" / "c.md")
        entries = get_file_tree(tmp_path)
        assert entries[0].name == "a"
        assert entries[0].children[0].name == "b"
        assert entries[0].children[0].children[0].name == "c.md"

    def test_depth_cap(self, tmp_path, monkeypatch):
        monkeypatch.setattr(files, "MAX_TREE_DEPTH", 1)
        touch(tmp_path / "a" / "b" / "too_deep.md")
        touch(tmp_path / "a" / "shallow.md")
        entries = get_file_tree(tmp_path)
        assert [c.name for c in entries[0].children] == ["shallow.md"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DirectoryNotFoundError):
            get_file_tree(tmp_path / "nope")

    def test_file_is_not_a_directory(self, tmp_path):
        touch(tmp_path / "a.md")
        with pytest.raises(DirectoryNotFoundError):
            get_file_tree(tmp_path / "a.md")


# ===========================================================================
# read_markdown_file / save_markdown_file tests
# ===========================================================================


class TestReadAndSave:

    def test_read_parses_tables(self, tmp_path, sample_markdown):
        path = tmp_path / "doc.md"
        touch(path, sample_markdown)
        doc = read_markdown_file(path)
        assert len(doc.tables) == 2
        assert doc.lines[0] == "# Inventory"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(MarkdownFileError):
            read_markdown_file(tmp_path / "missing.md")

    def test_save_writes_rebuilt_document(self, tmp_path):
        path = tmp_path / "doc.md"
        touch(path, "intro\n| A |\n|---|\n| 1 |\n")
        doc = read_markdown_file(path)
        edited = update_cell(doc.tables, 0, 0, 0, "42")
        save_markdown_file(path, doc.lines, edited)
        assert path.read_text(encoding="utf-8") == "intro\n| A   |\n| ----|\n| 42  |"

    def test_save_into_missing_directory(self, tmp_path):
        with pytest.raises(MarkdownFileError):
            save_markdown_file(tmp_path / "no_dir" / "doc.md", ["x"], [])
