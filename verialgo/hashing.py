"""Open-addressing hash table of integer keys with linear probing."""

from __future__ import annotations

from typing import Optional


class LinearProbingTable:
    """A fixed-size table of integer keys placed by linear probing.

    A key's home slot is ``key % size``; collisions move to the next slot,
    wrapping around. Duplicate keys are stored again rather than merged.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        self._slots: list[Optional[int]] = [None] * size

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def slots(self) -> tuple[Optional[int], ...]:
        """The current slot contents, None for an empty slot."""
        return tuple(self._slots)

    def _probe(self, key: int):
        start = key % self.size
        for offset in range(self.size):
            yield (start + offset) % self.size

    def insert(self, key: int) -> int:
        """Store ``key`` in the first free slot from its home slot and return its index.

        Raises OverflowError if every slot is taken.
        """
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise OverflowError("hash table is full")

    def search(self, key: int) -> Optional[int]:
        """Return the index of the first slot holding ``key`` along its probe path, or None."""
        for index in self._probe(key):
            if self._slots[index] == key:
                return index
        return None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key) is not None

    def __len__(self) -> int:
        return sum(slot is not None for slot in self._slots)