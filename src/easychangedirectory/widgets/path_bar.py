"""One-line header showing where the navigator is."""

from rich.text import Text

from textual.widgets import Static

from ..navigation import NavigationState


def build_path_text(state: NavigationState) -> Text:
    """Build the header text for a navigation state."""
    text = Text(no_wrap=True, overflow="ellipsis")
    text.append(str(state.pwd), style="bold bright_cyan")
    if state.in_content:
        text.append("  [content]", style="green")
    return text


class PathBar(Static):
    """Header displaying the live pwd."""

    DEFAULT_CSS = """
    PathBar {
        width: 100%;
        height: 1;
        background: $primary-background;
        padding: 0 1;
    }
    """

    def update_path(self, state: NavigationState) -> None:
        self.update(build_path_text(state))
