"""Navigable entries and the filesystem capabilities that produce them."""

import logging
import stat
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Larger files are not split into content lines
MAX_READ_BYTES = 1024 * 1024


class Kind(Enum):
    """What an entry represents, which decides whether it can be entered."""

    FILE = "file"
    DIR = "dir"
    RELATION_DIR = "relation_dir"  # ancestor of the live pwd
    CONTENT = "content"  # one line of a file's text
    EMPTY = "empty"


@dataclass(frozen=True)
class Entry:
    """One row in a pane."""

    path: Path
    kind: Kind
    line: str = ""

    @classmethod
    def empty(cls) -> "Entry":
        """Placeholder for a pane with nothing to show."""
        return cls(Path(), Kind.EMPTY)

    @classmethod
    def content(cls, line: str) -> "Entry":
        """Wrap one line of file text as a synthetic entry."""
        return cls(Path(line), Kind.CONTENT, line)

    @property
    def is_dir(self) -> bool:
        return self.kind in (Kind.DIR, Kind.RELATION_DIR)

    @property
    def name(self) -> str:
        """Label shown in a pane."""
        if self.kind is Kind.CONTENT:
            return self.line
        if self.kind is Kind.EMPTY:
            return ""
        return self.path.name or str(self.path)

    def with_kind(self, kind: Kind) -> "Entry":
        return replace(self, kind=kind)


@runtime_checkable
class EntrySource(Protocol):
    """Where the navigator gets fresh listings and file text from."""

    def list_children(self, path: Path | None) -> list[Entry]: ...
    def read_lines(self, path: Path) -> list[Entry] | None: ...


def parent_of(path: Path) -> Path | None:
    """Get the parent of a path, or None at the filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


def _sort_key(path: Path) -> tuple[str, str]:
    return (path.name.lower(), path.name)


def _classify(path: Path) -> Kind:
    """Classify a listed child, treating anything that cannot be stat'ed as a file."""
    try:
        return Kind.DIR if path.is_dir() else Kind.FILE
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return Kind.FILE


class DirectorySource:
    """EntrySource backed by the local filesystem.

    Listing and reading never raise: failures degrade to a single EMPTY entry
    (listings) or None (file text) so the navigator can keep going.
    """

    def __init__(self, show_hidden: bool = True) -> None:
        self.show_hidden = show_hidden

    def list_children(self, path: Path | None) -> list[Entry]:
        """List the immediate children of a directory, classified as DIR or FILE."""
        if path is None:
            return [Entry.empty()]

        try:
            children = sorted(path.iterdir(), key=_sort_key)
        except OSError as e:
            logger.debug("Cannot list %s: %s", path, e)
            return [Entry.empty()]

        entries = []
        for child in children:
            if not self.show_hidden and child.name.startswith("."):
                continue
            entries.append(Entry(child, _classify(child)))

        return entries or [Entry.empty()]

    def read_lines(self, path: Path) -> list[Entry] | None:
        """Split a file's text into CONTENT entries, or None if unreadable.

        Only regular files up to MAX_READ_BYTES are read; pipes, sockets and
        devices could block or never end.
        """
        try:
            info = path.stat()
            if not stat.S_ISREG(info.st_mode):
                logger.debug("Not a regular file: %s", path)
                return None
            if info.st_size > MAX_READ_BYTES:
                logger.debug("Too large to read: %s (%d bytes)", path, info.st_size)
                return None
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Cannot read %s: %s", path, e)
            return None

        entries = [Entry.content(line) for line in text.splitlines()]
        return entries or [Entry.empty()]


def preview_for(entry: Entry, source: EntrySource) -> list[Entry]:
    """Build the child preview for a focused entry.

    Directories preview their listing and files preview their lines. Content
    lines and empty placeholders are leaves and never touch the filesystem.
    """
    if entry.is_dir:
        return source.list_children(entry.path)

    if entry.kind is Kind.FILE:
        lines = source.read_lines(entry.path)
        if lines is not None:
            return lines

    return [Entry.empty()]
