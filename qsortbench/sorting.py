"""In-place sorting routines used by the quicksort benchmark.

The quicksort is the iterative median-of-three variant that hands small
subarrays over to insertion sort and keeps the larger half of every
partition on an explicit stack.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

INSERTION_THRESHOLD = 10
"""Subarrays shorter than this many elements (plus one) are insertion sorted."""


def _bounds(values: MutableSequence[Any], start: int, stop: int | None) -> tuple[int, int]:
    if stop is None:
        stop = len(values)
    if not 0 <= start <= stop <= len(values):
        raise ValueError(
            f"invalid range [{start}, {stop}) for a sequence of length {len(values)}"
        )
    return start, stop


def _swap_if_greater(values: MutableSequence[Any], a: int, b: int) -> None:
    if values[a] > values[b]:
        values[a], values[b] = values[b], values[a]


def insertion_sort(values: MutableSequence[Any], start: int = 0, stop: int | None = None) -> None:
    """Sort ``values[start:stop]`` in place by straight insertion."""
    start, stop = _bounds(values, start, stop)
    for i in range(start + 1, stop):
        value = values[i]
        j = i
        while j > start and value < values[j - 1]:
            values[j] = values[j - 1]
            j -= 1
        values[j] = value


def selection_sort(values: MutableSequence[Any], start: int = 0, stop: int | None = None) -> None:
    """Sort ``values[start:stop]`` in place by exchanging out-of-order pairs."""
    start, stop = _bounds(values, start, stop)
    for i in range(start, stop - 1):
        for j in range(i + 1, stop):
            _swap_if_greater(values, i, j)


def quicksort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place with an iterative median-of-three quicksort."""
    # ``left`` is one past the first index of the current subarray and
    # ``right`` is one past its last index.
    right = len(values)
    left = 1
    pending: list[tuple[int, int]] = []

    while True:
        if right - left < INSERTION_THRESHOLD:
            insertion_sort(values, left - 1, max(right, left - 1))
            if not pending:
                break
            left, right = pending.pop()
            continue

        # Median of left, centre and right becomes the pivot at values[left],
        # with values[left - 1] <= values[left] <= values[right - 1].
        mid = (left + right) // 2 - 1
        values[mid], values[left] = values[left], values[mid]
        _swap_if_greater(values, left - 1, right - 1)
        _swap_if_greater(values, left, right - 1)
        _swap_if_greater(values, left - 1, left)

        i = left + 1
        j = right
        pivot = values[left]

        while True:
            while values[i] < pivot:
                i += 1
            i += 1
            while values[j - 2] > pivot:
                j -= 1
            j -= 1
            if j < i:
                break
            values[i - 1], values[j - 1] = values[j - 1], values[i - 1]

        values[left] = values[j - 1]
        values[j - 1] = pivot

        # Defer the larger part, carry on with the smaller one.
        if right - i + 1 >= j - left:
            pending.append((i, right))
            right = j - 1
        else:
            pending.append((left, j - 1))
            left = i