#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Max-heap algorithms over a fixed-size list.

Unlike :mod:`heapq`, the functions take the live length explicitly, so the
tail of the list may hold vacant slots, and they order items with a
three-way comparator where a negative result means that the first argument
has greater priority:

>>> data = [3, 1, 4, 1, 5, None, None]
>>> build_max_heap(data, 5, default_compare)
>>> data[0]
5
>>> heap_sort(data, 5, default_compare)
>>> data
[1, 1, 3, 4, 5, None, None]

The sift functions make all comparisons before moving anything, so an
exception raised by the comparator leaves the list untouched. None of these
functions are thread-safe; the queue calls them with its lock held.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, Union

if TYPE_CHECKING:
    import sys

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable, MutableSequence, Sequence
    else:
        from typing import Callable, MutableSequence, Sequence


class _SupportsBool(Protocol):
    def __bool__(self, /) -> bool: ...


class _SupportsLT(Protocol):
    def __lt__(self, other: Any, /) -> _SupportsBool: ...


class _SupportsGT(Protocol):
    def __gt__(self, other: Any, /) -> _SupportsBool: ...


_T = TypeVar("_T")
_RichComparableT = TypeVar(
    "_RichComparableT",
    bound=Union[_SupportsLT, _SupportsGT],
)


def default_compare(a: _RichComparableT, b: _RichComparableT, /) -> int:
    """
    Compare two items by their natural order, the larger one winning.

    Returns ``0`` if the items are equal, ``+1`` if *a* is smaller than *b*,
    and ``-1`` otherwise.
    """

    if a == b:
        return 0

    if a < b:
        return +1

    return -1


def sift_down(
    data: MutableSequence[_T],
    count: int,
    pos: int,
    compare: Callable[[_T, _T], int],
    /,
) -> None:
    """
    Move the item at *pos* down until both of its children lose to it.

    The subtrees rooted at the children of *pos* must already be heaps.
    """

    item = data[pos]
    path = []
    hole = pos

    while True:
        winner = hole
        winning = item
        left = 2 * hole + 1
        right = left + 1

        # a child displaces the root only when it strictly wins
        if left < count and compare(data[left], winning) < 0:
            winner = left
            winning = data[left]

        if right < count and compare(data[right], winning) < 0:
            winner = right

        if winner == hole:
            break

        path.append(winner)
        hole = winner

    for child in path:
        data[pos] = data[child]
        pos = child

    data[pos] = item


def sift_up(
    data: MutableSequence[_T],
    pos: int,
    compare: Callable[[_T, _T], int],
    /,
) -> None:
    """
    Move the item at *pos* up while its parent strictly loses to it.
    """

    item = data[pos]
    path = []
    hole = pos

    while hole > 0:
        parent = (hole - 1) >> 1

        if compare(data[parent], item) <= 0:
            break

        path.append(parent)
        hole = parent

    for parent in path:
        data[pos] = data[parent]
        pos = parent

    data[pos] = item


def build_max_heap(
    data: MutableSequence[_T],
    count: int,
    compare: Callable[[_T, _T], int],
    /,
) -> None:
    """
    Transform ``data[:count]`` into a max-heap, in-place, in linear time.
    """

    for pos in reversed(range(count // 2)):
        sift_down(data, count, pos, compare)


def heap_sort(
    data: MutableSequence[_T],
    count: int,
    compare: Callable[[_T, _T], int],
    /,
) -> None:
    """
    Sort ``data[:count]`` in-place, the item of the greatest priority last.
    """

    build_max_heap(data, count, compare)

    for end in range(count - 1, 0, -1):
        data[0], data[end] = data[end], data[0]

        sift_down(data, end, 0, compare)


def is_max_heap(
    data: Sequence[_T],
    count: int,
    compare: Callable[[_T, _T], int],
    /,
) -> bool:
    """
    Return :data:`True` if no item in ``data[:count]`` beats its parent.
    """

    return all(
        compare(data[(pos - 1) >> 1], data[pos]) <= 0
        for pos in range(1, count)
    )
