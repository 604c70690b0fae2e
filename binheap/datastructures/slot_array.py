from __future__ import annotations
import ctypes
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class SlotArray(Generic[T]):
    """Fixed-capacity buffer of raw slots with explicit doubling.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • The array has no notion of a logical size; the owner tracks how many
      leading slots are live and never reads past that boundary.
    • `grow()` doubles capacity and keeps every slot at its index.
    • Vacated slots are reset with `clear()` so removed elements are released.
    """

    __slots__ = ("_buf", "_capacity")

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = capacity
        self._buf = self._make_array(capacity)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        buf = (capacity * ctypes.py_object)()
        # Fresh py_object slots are NULL and raise ValueError on read.
        for i in range(capacity):
            buf[i] = None
        return buf

    def _check(self, idx: int) -> int:
        if idx < 0 or idx >= self._capacity:
            raise IndexError("slot index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    def grow(self) -> None:
        """Double the capacity, copying every existing slot into the new buffer."""
        new_capacity = self._capacity * 2
        new_buf = self._make_array(new_capacity)
        for i in range(self._capacity):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def clear(self, idx: int) -> None:
        """Empty the slot at `idx`."""
        self._buf[self._check(idx)] = None

    def swap(self, i: int, j: int) -> None:
        self._check(i)
        self._check(j)
        buf = self._buf
        buf[i], buf[j] = buf[j], buf[i]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._check(idx)] = value

    def __len__(self) -> int:
        """Allocated slot count, live or not."""
        return self._capacity

    def __iter__(self) -> Iterator[T]:
        for i in range(self._capacity):
            yield self._buf[i]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SlotArray(capacity={self._capacity})"
