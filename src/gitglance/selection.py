"""Single-selection cursor over a fixed sequence of items."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectableList(Generic[T]):
    """Ordered items plus an optional selected index with wrap-around navigation.

    The item sequence is fixed at construction. To show a different dataset,
    build a new SelectableList instead of mutating this one.

    Example:
        files = SelectableList(["a", "b", "c"])
        files.next()      # selects 0
        files.previous()  # wraps to 2
        files.unselect()  # nothing selected
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: tuple[T, ...] = tuple(items)
        self._selected: int | None = None

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    def current(self) -> int | None:
        """Return the selected index, or None if nothing is selected."""
        return self._selected

    def selected_item(self) -> T | None:
        if self._selected is None:
            return None
        return self._items[self._selected]

    def next(self) -> None:
        """Select the following item, wrapping from the last to the first."""
        if not self._items:
            return
        if self._selected is None or self._selected >= len(self._items) - 1:
            self._selected = 0
        else:
            self._selected += 1

    def previous(self) -> None:
        """Select the preceding item, wrapping from the first to the last.

        With nothing selected this selects the first item, not the last.
        """
        if not self._items:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = len(self._items) - 1
        else:
            self._selected -= 1

    def unselect(self) -> None:
        self._selected = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SelectableList(len={len(self._items)}, selected={self._selected})"
