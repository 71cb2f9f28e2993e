"""Hand-built hash sets and a hash map using several collision strategies."""

from __future__ import annotations


class BoolTableSet:
    """Set of integers in ``[0, MAX_KEY]`` backed by a flat presence table."""

    MAX_KEY = 1_000_000

    def __init__(self) -> None:
        self._present = bytearray(self.MAX_KEY + 1)

    def _check(self, key: int) -> None:
        if not 0 <= key <= self.MAX_KEY:
            raise ValueError(f"key {key} outside 0..{self.MAX_KEY}")

    def add(self, key: int) -> None:
        self._check(key)
        self._present[key] = 1

    def remove(self, key: int) -> None:
        self._check(key)
        self._present[key] = 0

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and 0 <= key <= self.MAX_KEY and bool(self._present[key])


class ChainedHashSet:
    """Integer set using separate chaining over a prime number of buckets."""

    SIZE = 1009

    def __init__(self) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(self.SIZE)]

    def _bucket(self, key: int) -> list[int]:
        return self._buckets[key % self.SIZE]

    def add(self, key: int) -> None:
        bucket = self._bucket(key)
        if key not in bucket:
            bucket.append(key)

    def remove(self, key: int) -> None:
        bucket = self._bucket(key)
        bucket[:] = [k for k in bucket if k != key]

    def __contains__(self, key: int) -> bool:
        return key in self._bucket(key)


_REMOVED = object()


class OpenAddressingHashSet:
    """Integer set using open addressing with linear probing.

    Removed slots stay occupied by a marker, so probe chains are never cut.
    """

    SIZE = 20011

    def __init__(self) -> None:
        self._table: list[object] = [_REMOVED] * self.SIZE
        self._used = [False] * self.SIZE

    def _probe(self, key: int):
        start = key % self.SIZE
        for step in range(self.SIZE):
            yield (start + step) % self.SIZE

    def add(self, key: int) -> None:
        for slot in self._probe(key):
            if not self._used[slot]:
                self._table[slot] = key
                self._used[slot] = True
                return
            if self._table[slot] == key:
                return
        raise OverflowError("hash table is full")

    def remove(self, key: int) -> None:
        for slot in self._probe(key):
            if not self._used[slot]:
                return
            if self._table[slot] == key:
                self._table[slot] = _REMOVED
                return

    def __contains__(self, key: int) -> bool:
        for slot in self._probe(key):
            if not self._used[slot]:
                return False
            if self._table[slot] == key:
                return True
        return False


class ChainedHashMap:
    """Integer-to-integer map using separate chaining."""

    SIZE = 1009

    def __init__(self) -> None:
        self._buckets: list[list[list[int]]] = [[] for _ in range(self.SIZE)]

    def _bucket(self, key: int) -> list[list[int]]:
        return self._buckets[key % self.SIZE]

    def put(self, key: int, value: int) -> None:
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: int) -> int:
        """Value stored for ``key``, or -1 when the key is absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return -1

    def remove(self, key: int) -> None:
        bucket = self._bucket(key)
        for index, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[index]
                return
        raise KeyError(key)