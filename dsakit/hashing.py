"""Hash tables with open addressing and small hashing-based algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import combinations
from typing import NamedTuple, Optional


class TableFullError(Exception):
    """Raised when no free slot can be found for a key."""


class _ProbingTable:
    """Fixed-size open-addressing table; empty slots hold ``None``."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._slots: list[Optional[int]] = [None] * size

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def count(self) -> int:
        """Number of keys stored."""
        return sum(slot is not None for slot in self._slots)

    def _offset(self, attempt: int) -> int:
        raise NotImplementedError

    def insert(self, key: int) -> int:
        """Store ``key`` and return the index it landed at."""
        home = key % self.size
        for attempt in range(self.size):
            index = (home + self._offset(attempt)) % self.size
            if self._slots[index] is None:
                self._slots[index] = key
                return index
        raise TableFullError(f"cannot insert {key}: no free slot reachable")

    def __iter__(self) -> Iterator[Optional[int]]:
        """Yield every slot in index order, ``None`` for an empty one."""
        return iter(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._slots!r})"


class LinearProbingTable(_ProbingTable):
    """Open addressing with linear probing: h, h+1, h+2, ..."""

    def __init__(self, size: int = 10) -> None:
        super().__init__(size)

    def _offset(self, attempt: int) -> int:
        return attempt

    def insert(self, key: int) -> int:
        return super().insert(key)

    def __iter__(self) -> Iterator[Optional[int]]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class QuadraticProbingTable(_ProbingTable):
    """Open addressing with quadratic probing: h, h+1, h+4, h+9, ..."""

    def __init__(self, size: int = 10) -> None:
        super().__init__(size)

    def _offset(self, attempt: int) -> int:
        return attempt * attempt

    def insert(self, key: int) -> int:
        return super().insert(key)

    def __iter__(self) -> Iterator[Optional[int]]:
        return super().__iter__()

    def __len__(self) -> int:
        return super().__len__()


class DivisionResult(NamedTuple):
    """Slots filled by the division method and the keys that collided."""

    table: list[Optional[int]]
    collisions: list[int]


def count_beautiful_pairs(values: Iterable[int]) -> int:
    """Count index pairs i < j with ``values[i] == values[j] ** 2``."""
    return sum(1 for first, second in combinations(list(values), 2) if first == second * second)


def division_method(size: int, keys: Iterable[int]) -> DivisionResult:
    """Place keys at ``key % size``; a key whose slot is taken is reported as a collision."""
    if size < 1:
        raise ValueError("table size must be positive")
    table: list[Optional[int]] = [None] * size
    collisions: list[int] = []
    for key in keys:
        index = key % size
        if table[index] is None:
            table[index] = key
        else:
            collisions.append(key)
    return DivisionResult(table, collisions)


def division_overwrite(size: int, keys: Iterable[int]) -> list[Optional[int]]:
    """Place keys at ``key % size``, later keys replacing earlier ones."""
    if size < 1:
        raise ValueError("table size must be positive")
    table: list[Optional[int]] = [None] * size
    for key in keys:
        table[key % size] = key
    return table


def digit_count_matches(num: str) -> bool:
    """Return whether digit ``i`` occurs exactly ``num[i]`` times for every index ``i``."""
    if num and not (num.isascii() and num.isdigit()):
        raise ValueError(f"not a string of digits: {num!r}")
    return all(
        int(digit) == (num.count(str(index)) if index < 10 else 0)
        for index, digit in enumerate(num)
    )


def find_duplicates(nums: Iterable[int]) -> list[int]:
    """Return the values that appear twice, in the order their second copy is met.

    Every value must lie in ``[1, n]`` where ``n`` is the number of values.
    """
    values = list(nums)
    size = len(values)
    seen: set[int] = set()
    duplicates: list[int] = []
    for value in values:
        if not 1 <= value <= size:
            raise ValueError(f"value {value} outside range [1, {size}]")
        if value in seen:
            duplicates.append(value)
        else:
            seen.add(value)
    return duplicates


def mid_square(value: int) -> int:
    """Return the tens digit of ``value`` squared, used as a slot index."""
    return (value * value) % 100 // 10