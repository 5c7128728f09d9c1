"""Open-addressing hash table with pluggable linear or double-hash probing."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Generic, TextIO, TypeVar

from .strhash import StringHash

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)


class LinearProber:
    """Probe consecutive slots starting at the home location."""

    def __init__(self) -> None:
        self._start = 0
        self._m = 0
        self._num_probes = 0

    def init(self, start: int, m: int, key: Any) -> None:
        """Start a new probe sequence at ``start`` in a table of size ``m``."""
        self._start = start
        self._m = m
        self._num_probes = 0

    def next(self) -> int | None:
        """Return the next slot to try, or None once every slot was tried."""
        if self._num_probes >= self._m:
            return None
        loc = (self._start + self._num_probes) % self._m
        self._num_probes += 1
        return loc


class DoubleHashProber(LinearProber):
    """Probe with a step size derived from a second hash of the key."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        super().__init__()
        self._h2 = h2 if h2 is not None else StringHash(True)
        self._step = 1

    @staticmethod
    def _modulus_for(table_size: int) -> int:
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def init(self, start: int, m: int, key: Any) -> None:
        """Start a new probe sequence and compute the step size for ``key``."""
        super().init(start, m, key)
        modulus = self._modulus_for(m)
        self._step = modulus - self._h2(key) % modulus

    def next(self) -> int | None:
        """Return the next slot to try, or None once ``m`` probes were made."""
        if self._num_probes >= self._m:
            return None
        loc = (self._start + self._num_probes * self._step) % self._m
        self._num_probes += 1
        return loc


@dataclass
class _HashItem(Generic[K, V]):
    key: K
    value: V
    deleted: bool = False


class HashTable(Generic[K, V]):
    """Map keys to values with open addressing and lazy deletion."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: LinearProber | None = None,
        hash_func: Callable[[K], int] | None = None,
        key_equal: Callable[[K, K], bool] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hash_func if hash_func is not None else hash
        self._key_equal = key_equal if key_equal is not None else operator.eq
        self._m_index = 0
        self._table: list[_HashItem[K, V] | None] = [None] * CAPACITIES[0]
        self._size = 0
        self._used_slots = 0
        self._total_probes = 0

    @property
    def _capacity(self) -> int:
        return CAPACITIES[self._m_index]

    def __len__(self) -> int:
        return self._size

    def empty(self) -> bool:
        """Return True if the table holds no live items."""
        return self._size == 0

    def insert(self, key: K, value: V) -> None:
        """Add ``key`` with ``value``, or update the value of an existing key."""
        if self._used_slots / self._capacity >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise RuntimeError("No available location found for insertion")
        slot = self._table[loc]
        if slot is None:
            self._table[loc] = _HashItem(key, value)
            self._size += 1
            self._used_slots += 1
        elif self._key_equal(slot.key, key):
            if slot.deleted:
                slot.deleted = False
                self._size += 1
            slot.value = value

    def remove(self, key: K) -> None:
        """Mark the item with ``key`` deleted; do nothing if it is absent."""
        slot = self._internal_find(key)
        if slot is not None and not slot.deleted and self._key_equal(slot.key, key):
            slot.deleted = True
            self._size -= 1

    def find(self, key: K) -> tuple[K, V] | None:
        """Return the ``(key, value)`` pair for ``key``, or None."""
        slot = self._internal_find(key)
        if slot is None:
            return None
        return slot.key, slot.value

    def at(self, key: K) -> V:
        """Return the value for ``key``; raise KeyError if it is absent."""
        slot = self._internal_find(key)
        if slot is None:
            raise KeyError("Bad key")
        return slot.value

    def __getitem__(self, key: K) -> V:
        return self.at(key)

    def __setitem__(self, key: K, value: V) -> None:
        slot = self._internal_find(key)
        if slot is None:
            raise KeyError("Bad key")
        slot.value = value

    def __contains__(self, key: object) -> bool:
        return self._internal_find(key) is not None  # type: ignore[arg-type]

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied bucket, deleted ones included, to ``out``."""
        stream = out if out is not None else sys.stdout
        for index, slot in enumerate(self._table):
            if slot is not None:
                stream.write(f"Bucket {index}: {slot.key} {slot.value}\n")

    def clear_total_probes(self) -> None:
        """Reset the probe counter."""
        self._total_probes = 0

    def total_probes(self) -> int:
        """Return the number of probes made since the last reset."""
        return self._total_probes

    def _internal_find(self, key: K) -> _HashItem[K, V] | None:
        loc = self._probe(key)
        if loc is None:
            return None
        return self._table[loc]

    def _probe(self, key: K) -> int | None:
        capacity = self._capacity
        self._prober.init(self._hash(key) % capacity, capacity, key)
        while True:
            loc = self._prober.next()
            self._total_probes += 1
            if loc is None:
                return None
            slot = self._table[loc]
            if slot is None:
                return loc
            if not slot.deleted and self._key_equal(slot.key, key):
                return loc

    def _resize(self) -> None:
        if self._m_index >= len(CAPACITIES) - 1:
            raise RuntimeError("Cannot resize beyond maximum capacity")
        live = [(s.key, s.value) for s in self._table if s is not None and not s.deleted]
        self._m_index += 1
        self._table = [None] * self._capacity
        self._size = 0
        self._used_slots = 0
        for key, value in live:
            self.insert(key, value)