"""A chained hash table keyed by strings, with optional case-insensitive keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

HASH_EXTEND_MULTIPLIER = 1.75
MIN_CAPACITY = 17

_MASK = 0xFFFFFFFF


def _key_bytes(key: str | bytes) -> bytes:
    return key if isinstance(key, bytes) else key.encode("utf-8")


def _chars(data: bytes, ignore_case: bool) -> Iterator[int]:
    """Yield each byte as a signed char widened to 32 bits, folding ASCII case if asked."""
    previous = 0
    for position, byte in enumerate(data):
        ch = byte | 0xFFFFFF00 if byte & 0x80 else byte
        if (
            ignore_case
            and 0x41 <= ch <= 0x5A
            and (position == 0 or not previous & 0x80)
        ):
            ch += 0x20
        previous = byte
        yield ch


def _hash_bucket(data: bytes, ignore_case: bool) -> int:
    nr, nr2 = 1, 4
    for ch in _chars(data, ignore_case):
        nr ^= ((((nr & 63) + nr2) * ch) + (nr << 8)) & _MASK
        nr &= _MASK
        nr2 = (nr2 + 3) & _MASK
    return nr


def _hash_a(data: bytes, ignore_case: bool) -> int:
    value = 0
    for ch in _chars(data, ignore_case):
        value = (value * 16777619) & _MASK
        value ^= ch
    return value


def _hash_b(data: bytes, ignore_case: bool) -> int:
    value = 0
    for ch in _chars(data, ignore_case):
        value = (31 * value + ch) & _MASK
    return value


@dataclass
class _Node:
    key: str | bytes
    hash_a: int
    hash_b: int
    value: Any


class Hashtable:
    """Hash table that tells keys apart by two independent hashes."""

    def __init__(self, capacity: int = MIN_CAPACITY, ignore_case: bool = False) -> None:
        self.capacity = max(capacity, MIN_CAPACITY)
        self.ignore_case = bool(ignore_case)
        self.real_capacity = int(self.capacity * HASH_EXTEND_MULTIPLIER)
        self._table: list[list[_Node]] = [[] for _ in range(self.real_capacity)]
        self._count = 0

    def _locate(self, key: str | bytes) -> tuple[list[_Node], int, int]:
        data = _key_bytes(key)
        bucket = self._table[_hash_bucket(data, self.ignore_case) % self.real_capacity]
        return bucket, _hash_a(data, self.ignore_case), _hash_b(data, self.ignore_case)

    def _find(self, key: str | bytes) -> _Node | None:
        bucket, hash_a, hash_b = self._locate(key)
        for node in bucket:
            if node.hash_a == hash_a and node.hash_b == hash_b:
                return node
        return None

    def _insert(self, key: str | bytes, value: Any) -> None:
        bucket, hash_a, hash_b = self._locate(key)
        if any(n.hash_a == hash_a and n.hash_b == hash_b for n in bucket):
            raise KeyError(key)
        bucket.append(_Node(key, hash_a, hash_b, value))

    def expand(self, capacity: int) -> None:
        """Rebuild the table with room for ``capacity`` items."""
        nodes = [node for bucket in self._table for node in bucket]
        self.capacity = capacity
        self.real_capacity = int(capacity * HASH_EXTEND_MULTIPLIER)
        self._table = [[] for _ in range(self.real_capacity)]
        for node in nodes:
            self._insert(node.key, node.value)
        self._count = len(nodes)

    def add(self, key: str | bytes, value: Any = None) -> None:
        """Add a new item; raise KeyError if the key is already present."""
        if self._count >= self.capacity:
            self.expand(self._count * 2)
        self._insert(key, value)
        self._count += 1

    def set(self, key: str | bytes, value: Any) -> Any:
        """Set the value of ``key``, adding it if needed; return the old value or None."""
        node = self._find(key)
        if node is not None:
            old, node.value = node.value, value
            return old
        self.add(key, value)
        return None

    def remove(self, key: str | bytes) -> Any:
        """Remove ``key`` and return its value; raise KeyError if absent."""
        bucket, hash_a, hash_b = self._locate(key)
        for index, node in enumerate(bucket):
            if node.hash_a == hash_a and node.hash_b == hash_b:
                del bucket[index]
                self._count -= 1
                return node.value
        raise KeyError(key)

    def get(self, key: str | bytes, default: Any = None) -> Any:
        node = self._find(key)
        return default if node is None else node.value

    def has(self, key: str | bytes) -> bool:
        return self._find(key) is not None

    def clear(self) -> None:
        for bucket in self._table:
            bucket.clear()
        self._count = 0

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes)):
            return False
        return self.has(key)

    def __len__(self) -> int:
        return self._count

    def _nodes(self) -> Iterator[_Node]:
        for bucket in self._table:
            yield from bucket

    def __iter__(self) -> Iterator[str | bytes]:
        return (node.key for node in self._nodes())

    def values(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def items(self) -> Iterator[tuple[str | bytes, Any]]:
        return ((node.key, node.value) for node in self._nodes())