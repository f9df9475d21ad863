"""easychangedirectory widgets."""

from .entry_pane import EntryItem, EntryPane, entry_label
from .path_bar import PathBar, build_path_text

__all__ = [
    "EntryItem",
    "EntryPane",
    "PathBar",
    "build_path_text",
    "entry_label",
]
