from .slot_array import SlotArray
from .heap import MinHeap

__all__ = [
    "SlotArray",
    "MinHeap",
]
