"""A binary min-heap over items that support ``<``."""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Array-backed binary min-heap.

    Items are inserted one at a time in the order given, so the internal
    layout (and hence the order in which equal items come out) is
    deterministic.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        for item in items or ():
            self.push(item)

    def push(self, item: T) -> None:
        """Add an item to the heap."""
        self._items.append(item)
        self._sift_up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the smallest item without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _sift_up(self, pos: int) -> None:
        items = self._items
        while pos > 0:
            parent = (pos - 1) >> 1
            if not items[pos] < items[parent]:
                break
            items[pos], items[parent] = items[parent], items[pos]
            pos = parent

    def _sift_down(self, pos: int) -> None:
        items = self._items
        size = len(items)
        while pos < size:
            smallest = pos
            left = 2 * pos + 1
            right = 2 * pos + 2
            if left < size and items[left] < items[smallest]:
                smallest = left
            if right < size and items[right] < items[smallest]:
                smallest = right
            if smallest == pos:
                break
            items[pos], items[smallest] = items[smallest], items[pos]
            pos = smallest