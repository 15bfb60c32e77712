"""Counting-bucket sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable


def bucket_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending using one bucket per possible value."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("bucket sort needs non-negative integers")
    buckets = [0] * (max(items) + 1)
    for value in items:
        buckets[value] += 1
    return [value for value, count in enumerate(buckets) for _ in range(count)]