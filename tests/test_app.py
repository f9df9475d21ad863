"""Tests for the NavigatorApp key bindings, driven through Textual's pilot."""

from textual.widgets import ListItem

from easychangedirectory.app import NavigatorApp
from easychangedirectory.items import Entry
from easychangedirectory.navigation import NavigationState
from easychangedirectory.session import Action, SessionResult
from easychangedirectory.widgets import EntryPane
from easychangedirectory.widgets.entry_pane import MAX_PREVIEW_ENTRIES, MoreEntriesItem


def make_app(project, source) -> NavigatorApp:
    return NavigatorApp(NavigationState.start(source, project), source)


class TestNavigatorApp:
    async def test_enter_and_confirm(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("j", "j", "l")
            assert app.state.pwd == project / "src"

            current = app.query_one("#current-pane", EntryPane)
            assert [e.path.name for e in current.entries] == ["main.py", "pkg"]

            await pilot.press("enter")

        assert app.return_value == SessionResult(Action.CHANGE, project / "src")

    async def test_arrow_keys(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("up", "right", "left")
            assert app.state.pwd == project
            assert app.state.focus.path == project / "src"

            await pilot.press("down")
            assert app.state.focus.path == project / "docs"

    async def test_cancel_keeps_starting_directory(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("h", "escape")

        assert app.return_value == SessionResult(Action.KEEP, project)

    async def test_print(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("l", "p")

        assert app.return_value == SessionResult(Action.PRINT, project / "docs")

    async def test_confirm_refused_in_content_view(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("j", "l")
            assert app.state.in_content

            await pilot.press("enter")
            assert app.return_value is None

            preview = app.query_one("#preview-pane", EntryPane)
            assert list(preview.entries) == [Entry.empty()]

            await pilot.press("q")

        assert app.return_value == SessionResult(Action.KEEP, project)

    async def test_refresh(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            (project / "added").mkdir()
            await pilot.press("r")
            assert app.state.current.items[0].path == project / "added"
            assert app.state.focus.path == project / "docs"

    async def test_highlight_follows_cursor(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            current = app.query_one("#current-pane", EntryPane).list_view
            assert current.index == 0

            await pilot.press("j")
            assert current.index == app.state.current.index == 1
            assert current.highlighted_child.entry.path == project / "README.md"

            await pilot.press("k", "k")
            assert current.index == app.state.current.index == 2

    async def test_panes_never_take_focus(self, project, source):
        app = make_app(project, source)
        async with app.run_test() as pilot:
            await pilot.press("j")
            for pane in app.query(EntryPane):
                assert not pane.list_view.can_focus
            assert app.focused is None

    async def test_long_preview_is_capped(self, tmp_path, source):
        big = tmp_path / "big"
        big.mkdir()
        for i in range(MAX_PREVIEW_ENTRIES + 5):
            (big / f"f{i:04d}").touch()

        app = NavigatorApp(NavigationState.start(source, tmp_path), source)
        async with app.run_test():
            preview = app.query_one("#preview-pane", EntryPane)
            items = list(preview.list_view.query(ListItem))

            assert len(preview.entries) == MAX_PREVIEW_ENTRIES + 5
            assert len(items) == MAX_PREVIEW_ENTRIES + 1
            assert isinstance(items[-1], MoreEntriesItem)
            assert items[-1].remaining == 5
