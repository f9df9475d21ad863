"""A pane's entries together with a wrap-around cursor."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable

from .items import Entry


@dataclass(frozen=True)
class SelectableList:
    """Ordered, never-empty entries plus the index of the selected one.

    Moving the cursor returns a new list; instances are never changed in place.
    """

    items: tuple[Entry, ...]
    index: int = 0

    @classmethod
    def of(cls, items: Iterable[Entry], index: int = 0) -> "SelectableList":
        """Build a list, substituting the EMPTY placeholder for no entries."""
        entries = tuple(items) or (Entry.empty(),)
        return cls(entries, _clamp(index, len(entries)))

    def __len__(self) -> int:
        return len(self.items)

    @property
    def selected(self) -> Entry:
        return self.items[self.index]

    def advance(self) -> "SelectableList":
        """Move the cursor forward, wrapping to the top after the last entry."""
        return replace(self, index=(self.index + 1) % len(self.items))

    def retreat(self) -> "SelectableList":
        """Move the cursor back, wrapping to the bottom before the first entry."""
        return replace(self, index=(self.index - 1 + len(self.items)) % len(self.items))

    def select(self, index: int) -> "SelectableList":
        return replace(self, index=_clamp(index, len(self.items)))

    def index_of(self, path: Path) -> int | None:
        """Find the first entry with the given path."""
        for i, entry in enumerate(self.items):
            if entry.path == path:
                return i
        return None


def _clamp(index: int, length: int) -> int:
    return max(0, min(index, length - 1))
