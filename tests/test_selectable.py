"""Tests for easychangedirectory.selectable module."""

from pathlib import Path

import pytest

from easychangedirectory.items import Entry, Kind
from easychangedirectory.selectable import SelectableList


def _entries(*names: str) -> list[Entry]:
    return [Entry(Path("/tmp") / name, Kind.FILE) for name in names]


class TestConstruction:
    def test_empty_sequence_gets_placeholder(self):
        lst = SelectableList.of([])
        assert lst.items == (Entry.empty(),)
        assert lst.index == 0

    def test_index_clamped(self):
        assert SelectableList.of(_entries("a", "b"), index=5).index == 1
        assert SelectableList.of(_entries("a", "b"), index=-3).index == 0

    def test_selected(self):
        lst = SelectableList.of(_entries("a", "b"), index=1)
        assert lst.selected.path == Path("/tmp/b")


class TestCursor:
    def test_advance_wraps(self):
        lst = SelectableList.of(_entries("a", "b", "c"), index=2)
        assert lst.advance().index == 0

    def test_retreat_wraps(self):
        lst = SelectableList.of(_entries("a", "b", "c"))
        assert lst.retreat().index == 2

    def test_single_entry_stays_put(self):
        lst = SelectableList.of(_entries("a"))
        assert lst.advance().index == 0
        assert lst.retreat().index == 0

    @pytest.mark.parametrize("length", [1, 2, 5, 17])
    @pytest.mark.parametrize("start", [0, 1, 4])
    def test_advance_len_times_is_identity(self, length, start):
        lst = SelectableList.of(_entries(*map(str, range(length))), index=start)
        moved = lst
        for _ in range(length):
            moved = moved.advance()
        assert moved.index == lst.index

    def test_retreat_undoes_advance(self):
        lst = SelectableList.of(_entries("a", "b", "c"), index=1)
        assert lst.advance().retreat() == lst

    def test_moves_do_not_mutate(self):
        lst = SelectableList.of(_entries("a", "b"))
        lst.advance()
        lst.select(1)
        assert lst.index == 0

    def test_select(self):
        lst = SelectableList.of(_entries("a", "b", "c"))
        assert lst.select(2).index == 2
        assert lst.select(99).index == 2


class TestIndexOf:
    def test_found(self):
        lst = SelectableList.of(_entries("a", "b", "c"))
        assert lst.index_of(Path("/tmp/c")) == 2

    def test_missing(self):
        lst = SelectableList.of(_entries("a"))
        assert lst.index_of(Path("/tmp/z")) is None
