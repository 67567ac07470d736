"""
Indexed binary min-heap used as the A* open set.
"""

from __future__ import annotations
from typing import Generic, List, Optional, Protocol, TypeVar


class HeapItem(Protocol):
    """Anything that can sit in an IndexedMinHeap."""

    heap_index: int

    def __lt__(self, other) -> bool: ...


T = TypeVar("T", bound=HeapItem)


class HeapCapacityError(RuntimeError):
    """Raised when adding to a heap that is already full."""


class IndexedMinHeap(Generic[T]):
    """
    Fixed-capacity binary min-heap whose items remember their own slot.

    Each item carries a ``heap_index`` that the heap keeps in sync, which
    makes membership tests O(1) and lets a decreased item be sifted up in
    place instead of being pushed a second time.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = int(capacity)
        self._items: List[Optional[T]] = [None] * self.capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __contains__(self, item: T) -> bool:
        return self.contains(item)

    def add(self, item: T) -> None:
        """Insert item at the next free slot and restore heap order."""
        if self._count >= self.capacity:
            raise HeapCapacityError(
                f"Heap capacity {self.capacity} exceeded; "
                "size the heap to the grid's cell count"
            )
        item.heap_index = self._count
        self._items[self._count] = item
        self._count += 1
        self._sort_up(item)

    def contains(self, item: T) -> bool:
        index = getattr(item, "heap_index", -1)
        if index < 0 or index >= self._count:
            return False
        return self._items[index] is item

    def remove_first(self) -> T:
        """Remove and return the lowest-priority item."""
        if self._count == 0:
            raise IndexError("remove_first from empty heap")
        first = self._items[0]
        self._count -= 1
        last = self._items[self._count]
        self._items[self._count] = None
        first.heap_index = -1
        if self._count > 0:
            last.heap_index = 0
            self._items[0] = last
            self._sort_down(last)
        return first

    def update_item(self, item: T) -> None:
        """Re-position an item whose priority has just decreased."""
        self._sort_up(item)

    def _sort_up(self, item: T) -> None:
        while item.heap_index > 0:
            parent = self._items[(item.heap_index - 1) // 2]
            if not item < parent:
                break
            self._swap(item, parent)

    def _sort_down(self, item: T) -> None:
        while True:
            left = item.heap_index * 2 + 1
            right = left + 1
            if left >= self._count:
                return
            child = self._items[left]
            if right < self._count and self._items[right] < child:
                child = self._items[right]
            if not child < item:
                return
            self._swap(item, child)

    def _swap(self, a: T, b: T) -> None:
        self._items[a.heap_index] = b
        self._items[b.heap_index] = a
        a.heap_index, b.heap_index = b.heap_index, a.heap_index
