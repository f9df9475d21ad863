"""Pane widget showing one column of entries."""

from typing import Sequence

from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, ListItem, ListView, Static

from ..items import Entry, Kind

# Panes without a cursor stop listing after this many entries
MAX_PREVIEW_ENTRIES = 500

KIND_STYLES = {
    Kind.FILE: "",
    Kind.DIR: "bold blue",
    Kind.RELATION_DIR: "bold cyan",
    Kind.CONTENT: "green",
    Kind.EMPTY: "dim italic",
}

EMPTY_LABEL = "(empty)"


def entry_label(entry: Entry) -> str:
    """Get the text shown for an entry."""
    if entry.kind is Kind.EMPTY:
        return EMPTY_LABEL
    if entry.is_dir:
        return f"{entry.name}/"
    return entry.name


class EntryItem(ListItem):
    """A list item representing one entry."""

    def __init__(self, entry: Entry) -> None:
        super().__init__(classes=f"kind-{entry.kind.value.replace('_', '-')}")
        self.entry = entry

    def compose(self) -> ComposeResult:
        # Blank file lines still take up a row
        label = entry_label(self.entry) or " "
        yield Label(
            Text(
                label,
                style=KIND_STYLES[self.entry.kind],
                no_wrap=True,
                overflow="ellipsis",
            )
        )


class MoreEntriesItem(ListItem):
    """A list item standing in for entries past the display cap."""

    DEFAULT_CSS = """
    MoreEntriesItem {
        color: $text-muted;
        text-style: italic;
    }
    """

    def __init__(self, remaining: int) -> None:
        super().__init__()
        self.remaining = remaining

    def compose(self) -> ComposeResult:
        yield Label(f"... {self.remaining} more")


class EntryListView(ListView, can_focus=False):
    """ListView that never takes focus; the app owns all key handling."""


class EntryPane(Vertical):
    """Widget displaying one pane: a header and its entries."""

    DEFAULT_CSS = """
    EntryPane {
        width: 1fr;
        height: 100%;
        border: solid $primary;
    }

    EntryPane > .pane-header {
        background: $primary-background;
        color: $accent;
        text-style: bold;
        padding: 0 1;
        height: 1;
    }

    EntryPane > EntryListView {
        height: 1fr;
    }

    EntryPane ListItem {
        padding: 0 1;
    }

    EntryPane ListItem.--highlight {
        background: $accent;
    }
    """

    def __init__(self, title: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._title = title
        self.entries: tuple[Entry, ...] = ()

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="pane-header")
        yield EntryListView(initial_index=None)

    @property
    def list_view(self) -> ListView:
        return self.query_one(EntryListView)

    async def show(
        self,
        entries: Sequence[Entry],
        selected: int | None = None,
        title: str | None = None,
    ) -> None:
        """Display entries, optionally highlighting one and renaming the header.

        The list is only rebuilt when the entries change, so moving the
        cursor over an unchanged listing just moves the highlight.
        """
        if title is not None:
            self.query_one(".pane-header", Static).update(title)

        entries = tuple(entries)
        list_view = self.list_view
        if entries != self.entries:
            self.entries = entries
            await list_view.clear()

            shown = entries
            if selected is None and len(entries) > MAX_PREVIEW_ENTRIES:
                shown = entries[:MAX_PREVIEW_ENTRIES]

            items: list[ListItem] = [EntryItem(entry) for entry in shown]
            if len(shown) < len(entries):
                items.append(MoreEntriesItem(len(entries) - len(shown)))
            await list_view.extend(items)

        list_view.index = selected
