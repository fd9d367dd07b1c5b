"""Editable list of test-flow steps, as shown in the flow table."""

from __future__ import annotations

from typing import Iterable, Iterator

from acrotester.config_items import TestItem

FLOW_HEADERS: tuple[str, ...] = (
    "序号",
    "ID",
    "Class Name",
    "Alias",
    "Loop Count",
    "Test Mode",
    "Pass Do",
    "Fail Do",
    "Comment",
)

TEST_MODES: tuple[str, ...] = ("Skip", "Test")

MODE_COLORS: dict[str, str] = {"Test": "green", "Skip": "red"}


class FlowTableError(Exception):
    """An edit of the flow table refers to a row it cannot act on."""


def _new_item() -> TestItem:
    return TestItem(
        id="",
        class_name="NewClass",
        alias="NewAlias",
        test_mode="Test",
        loop_count="1",
        pass_do="",
        fail_do="",
        comment="",
    )


class FlowTable:
    """Ordered test items with the add, insert, delete and move edits."""

    def __init__(self, items: Iterable[TestItem] = ()) -> None:
        self._items: list[TestItem] = list(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TestItem]:
        return iter(self._items)

    def __getitem__(self, row: int) -> TestItem:
        return self._items[row]

    @property
    def items(self) -> list[TestItem]:
        """A copy of the items in table order."""
        return list(self._items)

    def _renumber(self) -> None:
        for number, item in enumerate(self._items, start=1):
            item.id = str(number)

    def add(self) -> int:
        """Append a default item, renumber all ids from 1 and return its row."""
        self._items.append(_new_item())
        self._renumber()
        return len(self._items) - 1

    def insert(self, row: int) -> int:
        """Insert a default item before ``row``, renumber ids and return ``row``."""
        if not 0 <= row < len(self._items):
            raise FlowTableError("select the position to insert at first")
        self._items.insert(row, _new_item())
        self._renumber()
        return row

    def delete(self, row: int) -> TestItem:
        """Remove and return the item at ``row``; ids are left as they are."""
        if not 0 <= row < len(self._items):
            raise FlowTableError("select the row to delete first")
        return self._items.pop(row)

    def move_up(self, row: int) -> int:
        """Swap ``row`` with the row above it and return the new row."""
        if row <= 0 or row >= len(self._items):
            raise FlowTableError("cannot move up: first row or nothing selected")
        items = self._items
        items[row - 1], items[row] = items[row], items[row - 1]
        return row - 1

    def move_down(self, row: int) -> int:
        """Swap ``row`` with the row below it and return the new row."""
        if row < 0 or row >= len(self._items) - 1:
            raise FlowTableError("cannot move down: last row or nothing selected")
        items = self._items
        items[row], items[row + 1] = items[row + 1], items[row]
        return row + 1

    def set_test_mode(self, row: int, mode: str) -> str:
        """Set the test mode of ``row`` and return the colour it is shown in."""
        if not 0 <= row < len(self._items):
            raise FlowTableError(f"row {row} out of range")
        if mode not in TEST_MODES:
            raise FlowTableError(f"unknown test mode: {mode!r}")
        self._items[row].test_mode = mode
        return MODE_COLORS[mode]

    def rows(self) -> list[tuple[str, ...]]:
        """Return the displayed cells of each row, in :data:`FLOW_HEADERS` order."""
        return [
            (
                str(number),
                item.id,
                item.class_name,
                item.alias,
                item.loop_count,
                item.test_mode,
                item.pass_do,
                item.fail_do,
                item.comment,
            )
            for number, item in enumerate(self._items, start=1)
        ]