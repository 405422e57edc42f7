"""
Fixed-capacity ring buffer for Lean-Signals.

Used both for indicator output history and for the raw sample windows the
indicators average over. Storage is allocated once; appending to a full
buffer overwrites the oldest slot.
"""

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Bounded, order-preserving sequence with oldest-first eviction."""

    def __init__(self, capacity: int):
        """Initialize the buffer.

        Args:
            capacity (int): Maximum number of items held

        Raises:
            ValueError: If capacity is not a positive integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"Ring buffer capacity must be a positive integer, got {capacity!r}")

        self._capacity = capacity
        self._slots: List[Optional[T]] = [None] * capacity
        self._start = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._size == self._capacity

    def append(self, item: T) -> Optional[T]:
        """Append an item, evicting the oldest one when full.

        Args:
            item: Item to append

        Returns:
            The evicted item, or None if nothing was evicted
        """
        if self._size < self._capacity:
            self._slots[(self._start + self._size) % self._capacity] = item
            self._size += 1
            return None

        evicted = self._slots[self._start]
        self._slots[self._start] = item
        self._start = (self._start + 1) % self._capacity
        return evicted

    def recent(self, offset: int = 0) -> T:
        """Return the item ``offset`` positions back from the newest.

        Raises:
            IndexError: If offset is outside the stored range
        """
        if offset < 0 or offset >= self._size:
            raise IndexError(f"Offset {offset} out of range for {self._size} items")
        return self._slots[(self._start + self._size - 1 - offset) % self._capacity]

    def to_list(self) -> List[T]:
        """Return a copy of the contents, oldest first."""
        return list(self)

    def clear(self):
        """Drop all items, keeping the allocated capacity."""
        self._slots = [None] * self._capacity
        self._start = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._slots[(self._start + i) % self._capacity]

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self._capacity}, size={self._size})"
