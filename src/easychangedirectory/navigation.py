"""Navigation state for the grandparent / parent / current / preview panes.

A NavigationState is an immutable snapshot. Every transition takes the
current snapshot plus an EntrySource for any fresh data it needs and returns
the next snapshot, so the panes can never be seen half-updated.
"""

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Iterable, Mapping

from .items import Entry, EntrySource, Kind, parent_of, preview_for
from .selectable import SelectableList

logger = logging.getLogger(__name__)


class StartupError(Exception):
    """The starting directory could not be resolved."""


def _mark_relation(entries: Iterable[Entry], path: Path | None) -> tuple[Entry, ...]:
    """Mark the directory entry at `path` as RELATION_DIR and demote any others."""
    marked = []
    for entry in entries:
        if entry.is_dir:
            kind = Kind.RELATION_DIR if entry.path == path else Kind.DIR
            entry = entry.with_kind(kind)
        marked.append(entry)
    return tuple(marked)


def resolve_start(pwd: Path | None = None) -> Path:
    """Resolve the directory to start in, defaulting to the process cwd."""
    try:
        start = Path.cwd() if pwd is None else Path(pwd)
        start = start.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise StartupError(f"Cannot resolve working directory: {e}") from e

    if not start.is_dir():
        raise StartupError(f"Not a directory: {start}")
    return start


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of all panes plus the path they are anchored to.

    `current` lists the children of `pwd`, `parent` those of `parent_path`
    and `grandparent` those of `grandparent_path`. Paths above the
    filesystem root are None and their panes hold a single EMPTY entry.
    """

    child_preview: tuple[Entry, ...]
    current: SelectableList
    parent: tuple[Entry, ...]
    grandparent: tuple[Entry, ...]
    pwd: Path
    parent_path: Path | None
    grandparent_path: Path | None
    # Last focused child per visited directory, for this session only
    recall: Mapping[Path, Path] = field(default_factory=dict)

    @classmethod
    def start(cls, source: EntrySource, pwd: Path | None = None) -> "NavigationState":
        """Build the first snapshot for `pwd` (or the process cwd).

        Raises:
            StartupError: If the starting directory cannot be resolved.
        """
        pwd = resolve_start(pwd)
        parent_path = parent_of(pwd)
        grandparent_path = parent_of(parent_path) if parent_path is not None else None

        current = SelectableList.of(source.list_children(pwd))
        logger.info("Starting navigation at %s", pwd)

        return cls(
            child_preview=tuple(preview_for(current.selected, source)),
            current=current,
            parent=_mark_relation(source.list_children(parent_path), pwd),
            grandparent=_mark_relation(
                source.list_children(grandparent_path), parent_path
            ),
            pwd=pwd,
            parent_path=parent_path,
            grandparent_path=grandparent_path,
        )

    @property
    def focus(self) -> Entry:
        """The entry selected in the current pane."""
        return self.current.selected

    @property
    def in_content(self) -> bool:
        """Whether the current pane shows file lines instead of a directory."""
        return not self._anchor().is_dir

    def _anchor(self) -> Entry:
        """The parent-pane entry for pwd, which tells what pwd is."""
        for entry in self.parent:
            if entry.kind is not Kind.EMPTY and entry.path == self.pwd:
                return entry
        return Entry(self.pwd, Kind.DIR)

    def _remember(self) -> Mapping[Path, Path]:
        focus = self.focus
        if focus.kind is Kind.EMPTY:
            return self.recall
        return {**self.recall, self.pwd: focus.path}

    def _reselect(self, current: SelectableList, source: EntrySource) -> "NavigationState":
        return replace(
            self,
            current=current,
            child_preview=tuple(preview_for(current.selected, source)),
        )

    def move_down(self, source: EntrySource) -> "NavigationState":
        """Select the next entry in the current pane and refresh the preview."""
        return self._reselect(self.current.advance(), source)

    def move_up(self, source: EntrySource) -> "NavigationState":
        """Select the previous entry in the current pane and refresh the preview."""
        return self._reselect(self.current.retreat(), source)

    def enter(self, source: EntrySource) -> "NavigationState":
        """Shift the window one level down into the focused entry.

        Directories become the new current pane. Files are entered as a
        content view of their lines; content lines are entered as a leaf
        with nothing below. An EMPTY focus cannot be entered.
        """
        focus = self.focus
        if focus.kind is Kind.EMPTY:
            return self

        current = SelectableList.of(self.child_preview)
        remembered = self.recall.get(focus.path)
        if remembered is not None:
            index = current.index_of(remembered)
            if index is not None:
                current = current.select(index)

        logger.debug("Entering %s (%s)", focus.path, focus.kind.value)
        return NavigationState(
            child_preview=tuple(preview_for(current.selected, source)),
            current=current,
            parent=_mark_relation(self.current.items, focus.path),
            grandparent=self.parent,
            pwd=focus.path,
            parent_path=self.pwd,
            grandparent_path=self.parent_path,
            recall=self._remember(),
        )

    def leave(self, source: EntrySource) -> "NavigationState":
        """Shift the window one level up, refocusing the entry just left.

        A no-op at the filesystem root. The grandparent pane is the only one
        that needs a fresh listing.
        """
        if self.parent_path is None:
            return self

        current = SelectableList.of(_mark_relation(self.parent, None))
        index = current.index_of(self.pwd)
        if index is not None:
            current = current.select(index)
            child_preview = self.current.items
        else:
            child_preview = tuple(preview_for(current.selected, source))

        if self.grandparent_path is not None:
            grandparent_path = parent_of(self.grandparent_path)
        else:
            grandparent_path = None

        logger.debug("Leaving %s for %s", self.pwd, self.parent_path)
        return NavigationState(
            child_preview=child_preview,
            current=current,
            parent=self.grandparent,
            grandparent=_mark_relation(
                source.list_children(grandparent_path), self.grandparent_path
            ),
            pwd=self.parent_path,
            parent_path=self.grandparent_path,
            grandparent_path=grandparent_path,
            recall=self._remember(),
        )

    def refresh(self, source: EntrySource) -> "NavigationState":
        """Re-read every pane for the same pwd, keeping the focus by path.

        In content view only the current pane and preview are re-read, since
        the ancestor panes are not directory listings of their paths there.
        """
        current = SelectableList.of(preview_for(self._anchor(), source))
        index = current.index_of(self.focus.path)
        if index is not None:
            current = current.select(index)

        state = self._reselect(current, source)
        if self.in_content:
            return state

        logger.debug("Refreshed %s", self.pwd)
        return replace(
            state,
            parent=_mark_relation(source.list_children(self.parent_path), self.pwd),
            grandparent=_mark_relation(
                source.list_children(self.grandparent_path), self.parent_path
            ),
        )
