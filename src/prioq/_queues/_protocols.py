#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable
    else:
        from typing import Callable

if sys.version_info >= (3, 13):  # various fixes and improvements
    from typing import Protocol
else:  # typing-extensions>=4.10.0
    from typing_extensions import Protocol

_T = TypeVar("_T")


class BoundedQueue(Protocol[_T]):
    """
    A bounded max-priority queue protocol.

    All methods are non-blocking (except for the underlying lock): an
    operation that cannot be completed immediately raises instead of waiting.
    On any error the queue is left in its pre-operation state.
    """

    __slots__ = ()

    def __bool__(self, /) -> bool:
        """
        Return :data:`True` if the queue is not empty, :data:`False` otherwise.

        Note, ``bool(queue)`` does not guarantee that a subsequent dequeue call
        will not fail (such an approach risks a race condition where the queue
        can shrink before the result can be used).
        """
        ...

    def __len__(self, /) -> int:
        """
        Return the number of items in the queue.
        """
        ...

    def qsize(self, /) -> int:
        """
        This method is provided for compatibility with the standard queues. Use
        :meth:`len(queue) <__len__>` as a direct substitute.
        """
        ...

    def empty(self, /) -> bool:
        """
        Return :data:`True` if the queue is empty, :data:`False` otherwise.

        Unlike other methods, it does not raise for a destroyed queue and
        returns :data:`True` instead.
        """
        ...

    def full(self, /) -> bool:
        """
        Return :data:`True` if the queue holds *capacity* items, :data:`False`
        otherwise.
        """
        ...

    def enqueue(self, /, item: _T) -> None:
        """
        Put *item* into the queue.

        Raises:
          InvalidArgument:
            if *item* is :data:`None`.
          QueueFull:
            if the queue is full.
          QueueShutDown:
            if the queue has been destroyed.
        """
        ...

    def dequeue(self, /) -> _T:
        """
        Remove and return an item of the greatest priority.

        Raises:
          QueueEmpty:
            if the queue is empty.
          QueueShutDown:
            if the queue has been destroyed.
        """
        ...

    def peek_max(self, /) -> _T:
        """
        Return an item of the greatest priority without removing it.

        It is the same item that a subsequent dequeue call would return.

        Raises:
          QueueEmpty:
            if the queue is empty.
          QueueShutDown:
            if the queue has been destroyed.
        """
        ...

    def increase_key(self, /, index: int, item: _T) -> None:
        """
        Replace the item at *index* in the underlying heap with *item* of equal
        or greater priority, and move it up to its new place.

        Raises:
          InvalidArgument:
            if *item* is :data:`None`.
          IndexOutOfBounds:
            if *index* does not refer to a live item.
          InvalidIncrease:
            if *item* has lesser priority than the item it replaces.
          QueueShutDown:
            if the queue has been destroyed.
        """
        ...

    def heap_sort(self, /) -> list[_T]:
        """
        Remove all items from the queue and return them sorted in priority
        order (greatest last).

        The items are sorted in-place by the heap sort algorithm, so the queue
        is empty after the call.

        Raises:
          QueueShutDown:
            if the queue has been destroyed.
        """
        ...

    def destroy(self, /) -> None:
        """
        Release the underlying storage and put the queue into a destroyed mode.

        Future calls to any method except :meth:`empty` and :meth:`destroy`
        raise :exc:`QueueShutDown`. Repeated calls do nothing.
        """
        ...

    @property
    def data(self, /) -> list[_T | None]:
        """
        A snapshot of the underlying storage, vacant slots included.

        Live items occupy the first ``len(queue)`` positions in heap order;
        vacant slots hold :data:`None`.
        """
        ...

    @property
    def capacity(self, /) -> int:
        """
        The maximum number of items which the queue can hold.
        """
        ...

    @property
    def compare(self, /) -> Callable[[_T, _T], int]:
        """
        The comparator that orders items in the queue.

        It returns a negative number if its first argument has greater
        priority, zero if the priorities are equal, and a positive number
        otherwise.
        """
        ...

    @property
    def destroyed(self, /) -> bool:
        """
        A boolean that is :data:`True` if the queue has been destroyed,
        :data:`False` otherwise.
        """
        ...
