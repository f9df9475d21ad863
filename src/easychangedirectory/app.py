"""Main Textual application for easychangedirectory."""

import logging
from pathlib import Path
from typing import Callable

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer

from .config import Config
from .items import DirectorySource, EntrySource
from .navigation import NavigationState
from .session import Action, SessionResult
from .widgets import EntryPane, PathBar

logger = logging.getLogger(__name__)

Transition = Callable[[EntrySource], NavigationState]


def _pane_title(path: Path | None) -> str:
    if path is None:
        return ""
    return path.name or str(path)


class NavigatorApp(App[SessionResult]):
    """easychangedirectory - pick a directory with the keyboard."""

    TITLE = "easychangedirectory"

    CSS = """
    #panes {
        width: 100%;
        height: 1fr;
    }

    #grandparent-pane {
        width: 1fr;
    }

    #parent-pane {
        width: 1fr;
    }

    #current-pane {
        width: 2fr;
        border: solid yellow;
    }

    #preview-pane {
        width: 2fr;
        border: solid $success;
    }
    """

    BINDINGS = [
        Binding("j,down", "move_down", "Down", show=False),
        Binding("k,up", "move_up", "Up", show=False),
        Binding("h,left", "leave", "Parent", show=False),
        Binding("l,right", "enter", "Open", show=False),
        Binding("enter", "confirm", "Change dir"),
        Binding("p", "print_path", "Print"),
        Binding("r", "refresh", "Reload"),
        Binding("escape,backspace,q", "cancel", "Cancel"),
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    def __init__(self, state: NavigationState, source: EntrySource) -> None:
        super().__init__()
        self.state = state
        self.source = source
        self.origin = state.pwd

    def compose(self) -> ComposeResult:
        yield PathBar(id="path-bar")
        with Horizontal(id="panes"):
            yield EntryPane("", id="grandparent-pane")
            yield EntryPane("", id="parent-pane")
            yield EntryPane("", id="current-pane")
            yield EntryPane("", id="preview-pane")
        yield Footer()

    async def on_mount(self) -> None:
        await self._render_state()

    async def _render_state(self) -> None:
        """Redraw every pane from the current state."""
        state = self.state
        self.query_one("#path-bar", PathBar).update_path(state)
        await self.query_one("#grandparent-pane", EntryPane).show(
            state.grandparent, title=_pane_title(state.grandparent_path)
        )
        await self.query_one("#parent-pane", EntryPane).show(
            state.parent, title=_pane_title(state.parent_path)
        )
        await self.query_one("#current-pane", EntryPane).show(
            state.current.items,
            selected=state.current.index,
            title=_pane_title(state.pwd),
        )
        await self.query_one("#preview-pane", EntryPane).show(
            state.child_preview, title=state.focus.name
        )

    async def _apply(self, transition: Transition) -> None:
        """Replace the state with the result of one transition and redraw."""
        self.state = transition(self.source)
        await self._render_state()

    async def action_move_down(self) -> None:
        await self._apply(self.state.move_down)

    async def action_move_up(self) -> None:
        await self._apply(self.state.move_up)

    async def action_enter(self) -> None:
        await self._apply(self.state.enter)

    async def action_leave(self) -> None:
        await self._apply(self.state.leave)

    async def action_refresh(self) -> None:
        await self._apply(self.state.refresh)
        self.notify("Reloaded")

    def action_confirm(self) -> None:
        """Finish, changing to the live pwd."""
        if self.state.in_content:
            self.notify("Not a directory", severity="warning")
            return
        self.exit(SessionResult(Action.CHANGE, self.state.pwd))

    def action_print_path(self) -> None:
        """Finish, printing the live pwd."""
        self.exit(SessionResult(Action.PRINT, self.state.pwd))

    def action_cancel(self) -> None:
        """Finish, keeping the directory the session started in."""
        self.exit(SessionResult(Action.KEEP, self.origin))


def run_app(config: Config, start: Path | None = None) -> SessionResult:
    """Run the navigator and return how the session ended.

    Raises:
        StartupError: If the starting directory cannot be resolved.
    """
    source = DirectorySource(show_hidden=config.show_hidden)
    state = NavigationState.start(source, start)

    app = NavigatorApp(state, source)
    result = app.run()
    if result is None:
        result = SessionResult(Action.KEEP, state.pwd)

    logger.info("Session ended: %s %s", result.action.value, result.path)
    return result
