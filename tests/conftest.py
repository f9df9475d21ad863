"""Shared fixtures for easychangedirectory tests."""

from pathlib import Path

import pytest

from easychangedirectory.items import DirectorySource, Entry, Kind


@pytest.fixture
def project(tmp_path):
    """Create a small project tree in a temp directory.

    Sorted listing of the project: docs/, README.md, src/.
    """
    root = tmp_path / "home" / "user" / "project"
    root.mkdir(parents=True)

    (root / "README.md").write_text("a\nb\nc")

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("print('hi')\n")
    (src / "pkg").mkdir()
    (src / "pkg" / "mod.py").write_text("x = 1\n")

    docs = root / "docs"
    docs.mkdir()
    (docs / "guide.md").write_text("# Guide\n")

    return root.resolve()


@pytest.fixture
def source():
    """Filesystem-backed entry source."""
    return DirectorySource()


class FakeSource:
    """In-memory entry source that records every call."""

    def __init__(self, dirs: dict[Path, list[str]], files: dict[Path, str] | None = None):
        self.dirs = dirs
        self.files = files or {}
        self.listed: list[Path | None] = []
        self.read: list[Path] = []

    def list_children(self, path):
        self.listed.append(path)
        if path not in self.dirs:
            return [Entry.empty()]
        entries = []
        for name in self.dirs[path]:
            child = path / name
            kind = Kind.DIR if child in self.dirs else Kind.FILE
            entries.append(Entry(child, kind))
        return entries or [Entry.empty()]

    def read_lines(self, path):
        self.read.append(path)
        if path not in self.files:
            return None
        return [Entry.content(line) for line in self.files[path].splitlines()]


@pytest.fixture
def fake_source_factory():
    return FakeSource
