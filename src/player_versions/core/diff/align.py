"""
Sequence alignment for list-valued fields.

Pairs up the elements of two ordered lists from consecutive snapshots with a
classic longest-common-subsequence (LCS) edit script:

- elements kept in both lists, in the same relative order, are paired;
- elements only in the earlier list appear as ``(element, None)``;
- elements only in the later list appear as ``(None, element)``.

The script is minimal: no element is duplicated, and nothing is paired
across a reordering that would increase the number of adds/removes.

Tie-breaking
------------
When several minimal scripts exist (e.g. duplicate modifiers), a removal is
emitted before an addition at the same position. The result is therefore
deterministic for a given input.

Complexity is ``O(len(previous) * len(current))`` time and space; the lists
aligned here (modifiers, sorted mapping keys) are short.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _lcs_table(previous: Sequence[T], current: Sequence[T]) -> list[list[int]]:
    """Return the suffix LCS length table.

    ``table[i][j]`` is the LCS length of ``previous[i:]`` and ``current[j:]``.
    """
    n, m = len(previous), len(current)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if previous[i] == current[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def align_indices(
    previous: Sequence[T], current: Sequence[T]
) -> list[tuple[int | None, int | None]]:
    """
    Align two lists and return the edit script as index pairs.

    Index pairs are unambiguous even when the lists contain ``None``
    elements, which :func:`align` cannot distinguish from "absent".

    Returns
    -------
    list[tuple[int | None, int | None]]
        ``(i, j)`` for kept elements, ``(i, None)`` for removals and
        ``(None, j)`` for additions, in output order.
    """
    table = _lcs_table(previous, current)
    n, m = len(previous), len(current)
    out: list[tuple[int | None, int | None]] = []
    i = j = 0
    while i < n and j < m:
        if previous[i] == current[j]:
            out.append((i, j))
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            out.append((i, None))
            i += 1
        else:
            out.append((None, j))
            j += 1
    out.extend((k, None) for k in range(i, n))
    out.extend((None, k) for k in range(j, m))
    return out


def align(previous: Sequence[T], current: Sequence[T]) -> list[tuple[T | None, T | None]]:
    """Align two lists and return ``(previous | None, current | None)`` pairs.

    >>> align(["a", "b", "c"], ["a", "c"])
    [('a', 'a'), ('b', None), ('c', 'c')]
    """
    return [
        (
            previous[i] if i is not None else None,
            current[j] if j is not None else None,
        )
        for i, j in align_indices(previous, current)
    ]


def union_keys(previous: Iterable[K], current: Iterable[K]) -> list[K]:
    """Return the sorted union of two key collections.

    Iteration over mapping fields must not depend on dict insertion order,
    so callers always walk the keys in this sorted order. Keys are ordered
    by their string form, so mixed key types still sort.
    """
    return sorted(set(previous) | set(current), key=str)


__all__ = ["align", "align_indices", "union_keys"]
