from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .slot_array import SlotArray

T = TypeVar("T")

logger = logging.getLogger(__name__)


class MinHeap(Generic[T]):
    """A binary min-heap over a growable slot array.

    Every parent is <= its children. Live elements occupy slots [0, size);
    `None` is reserved as the "no value" result of `peek()` and `pop()` and
    cannot be stored.
    """

    __slots__ = ("_slots", "_size")

    # Initial allocated capacity when no hint is given.
    INIT_CAPACITY = 16

    def __init__(self, it: Optional[Iterable[Optional[T]]] = None, capacity: int = INIT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._slots: SlotArray[T] = SlotArray(capacity)
        self._size = 0
        if it is not None:
            self.heapify(it)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _grow_if_full(self) -> None:
        if self._size >= self._slots.capacity:
            old = self._slots.capacity
            self._slots.grow()
            logger.debug("heap storage grown from %d to %d slots", old, self._slots.capacity)

    def _sift_up(self, idx: int) -> None:
        slots = self._slots
        while idx > 0:
            parent = (idx - 1) // 2
            if not slots[idx] < slots[parent]:
                break
            slots.swap(parent, idx)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        slots = self._slots
        n = self._size
        while True:
            left = 2 * idx + 1
            right = 2 * idx + 2
            smallest = idx
            # Left wins ties; right only replaces it when strictly smaller.
            if left < n and slots[left] < slots[smallest]:
                smallest = left
            if right < n and slots[right] < slots[smallest]:
                smallest = right
            if smallest == idx:
                break
            slots.swap(idx, smallest)
            idx = smallest

    def _index_of(self, element: T) -> int:
        for i in range(self._size):
            if self._slots[i] == element:
                return i
        return -1

    def _reheapify(self) -> None:
        """Rebuild by re-adding every live element in its current slot order."""
        size = self._size
        self._size = 0
        for i in range(size):
            self.add(self._slots[i])

    # -----------------------------
    # Public API
    # -----------------------------
    def add(self, element: T) -> None:
        """Insert `element` (O(log n) worst case, O(1) on average)."""
        if element is None:
            raise ValueError("cannot add None to MinHeap")
        self._grow_if_full()
        self._slots[self._size] = element
        self._size += 1
        self._sift_up(self._size - 1)

    def peek(self) -> Optional[T]:
        """Return the smallest element without removing it, or None if empty (O(1))."""
        return self._slots[0] if self._size else None

    def pop(self) -> Optional[T]:
        """Remove and return the smallest element, or None if empty (O(log n))."""
        if not self._size:
            return None
        slots = self._slots
        top = slots[0]
        last = self._size - 1
        slots[0] = slots[last]
        slots.clear(last)
        self._size = last
        self._sift_down(0)
        return top

    def delete(self, element: T) -> bool:
        """Remove the first slot equal to `element` and rebuild the heap.

        The scan runs over internal slot order, not sorted or insertion order.
        Later elements are shifted left to close the gap, then every survivor
        is re-added (O(n log n)). Returns False, without touching the heap,
        when nothing matches.
        """
        k = self._index_of(element)
        if k < 0:
            return False
        slots = self._slots
        for j in range(k, self._size - 1):
            slots[j] = slots[j + 1]
        slots.clear(self._size - 1)
        self._size -= 1
        self._reheapify()
        return True

    def heapify(self, elements: Iterable[Optional[T]]) -> None:
        """Add every non-None element of `elements`, one insertion at a time."""
        for element in elements:
            if element is None:
                continue
            self.add(element)

    def levels(self) -> List[List[T]]:
        """Return the tree as a list of levels, root first."""
        out: List[List[T]] = []
        start, width = 0, 1
        while start < self._size:
            stop = min(start + width, self._size)
            out.append([self._slots[i] for i in range(start, stop)])
            start, width = stop, width * 2
        return out

    def depth(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return self._size.bit_length()

    @property
    def capacity(self) -> int:
        return self._slots.capacity

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __contains__(self, element: object) -> bool:
        return self._index_of(element) >= 0  # type: ignore[arg-type]

    def to_list(self) -> List[T]:
        return [self._slots[i] for i in range(self._size)]

    def __iter__(self) -> Iterator[T]:
        # Iterate over the internal array (heap order, not sorted order)
        for i in range(self._size):
            yield self._slots[i]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"MinHeap({self.to_list()!r})"
