"""Array-backed binary min-heap."""

from .datastructures import MinHeap, SlotArray

__version__ = "0.1.0"

__all__ = [
    "MinHeap",
    "SlotArray",
]
