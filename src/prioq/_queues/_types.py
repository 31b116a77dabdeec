#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import logging
import sys

from itertools import islice
from operator import index as _index
from typing import TYPE_CHECKING, TypeVar

from aiologic.lowlevel import create_thread_lock
from aiologic.meta import DEFAULT, DefaultType

from prioq._heap import (
    build_max_heap,
    default_compare,
    heap_sort,
    sift_down,
    sift_up,
)

from ._exceptions import (
    IndexOutOfBounds,
    InvalidArgument,
    InvalidIncrease,
    LockInitError,
    QueueEmpty,
    QueueFull,
    QueueShutDown,
)
from ._protocols import BoundedQueue

if TYPE_CHECKING:
    from aiologic.lowlevel import ThreadLock

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Callable, Iterable
    else:
        from typing import Callable, Iterable

if sys.version_info >= (3, 11):  # PEP 673
    from typing import Self
else:  # typing-extensions>=4.0.0
    from typing_extensions import Self

_T = TypeVar("_T")

_logger = logging.getLogger(__name__)


class PriorityQueue(BoundedQueue[_T]):
    """
    A thread-safe bounded queue that is:

    * :abbr:`MPMC (multi-producer, multi-consumer)`
    * max-priority (the item of the greatest priority first)

    Items are kept in a binary heap over a list of *capacity* slots. They are
    ordered by a three-way comparator that returns a negative number if its
    first argument wins.
    """

    __slots__ = (
        "__data",
        "__weakref__",
        "_capacity",
        "_compare",
        "_count",
        "_is_destroyed",
        "mutex",
    )

    __data: list[_T | None]

    _capacity: int
    _compare: Callable[[_T, _T], int]
    _count: int
    _is_destroyed: bool

    mutex: ThreadLock

    def __init__(
        self,
        /,
        capacity: int,
        compare: Callable[[_T, _T], int] | None | DefaultType = DEFAULT,
    ) -> None:
        """
        Create a queue object with the given capacity.

        Args:
          capacity:
            The maximum number of items; a positive integer.
          compare:
            A function that takes two items and returns a negative number if
            the first one has greater priority, zero if the priorities are
            equal, and a positive number otherwise. If omitted, items are
            ordered by :func:`default_compare` (the larger item first).

        Raises:
          InvalidArgument:
            if *capacity* is not a positive integer or *compare* is not
            callable.
          LockInitError:
            if the underlying lock cannot be created.
        """

        cls_name = self.__class__.__qualname__

        if isinstance(capacity, bool) or not isinstance(capacity, int):
            _logger.debug(
                "%s: non-integer %r provided for 'capacity' in __init__()",
                cls_name,
                capacity,
            )

            msg = "'capacity' must be an integer"
            raise InvalidArgument(msg)

        if capacity <= 0:
            _logger.debug(
                "%s: non-positive %r provided for 'capacity' in __init__()",
                cls_name,
                capacity,
            )

            msg = "'capacity' must be a positive integer"
            raise InvalidArgument(msg)

        if compare is DEFAULT or compare is None:
            compare = default_compare
        elif not callable(compare):
            _logger.debug(
                "%s: non-callable %r provided for 'compare' in __init__()",
                cls_name,
                compare,
            )

            msg = "'compare' must be a callable"
            raise InvalidArgument(msg)

        self._capacity = capacity
        self._compare = compare
        self._count = 0
        self._is_destroyed = False

        self._init(capacity)  # data

        try:
            self.mutex = create_thread_lock()
        except RuntimeError as exc:
            _logger.debug("%s: failed to create a lock in __init__()", cls_name)

            msg = "cannot create the underlying lock"
            raise LockInitError(msg) from exc

    @classmethod
    def from_keys(
        cls,
        /,
        keys: Iterable[_T | None],
        capacity: int,
        compare: Callable[[_T, _T], int] | None | DefaultType = DEFAULT,
    ) -> Self:
        """
        Create a queue object with the given capacity and fill it with *keys*
        in linear time.

        Keys are taken until the first :data:`None` or until *capacity* keys
        are taken, whichever comes first.

        Raises:
          InvalidArgument:
            if *keys* is :data:`None` or not iterable, *capacity* is not a
            positive integer or *compare* is not callable.
          LockInitError:
            if the underlying lock cannot be created.
        """

        if keys is None:
            _logger.debug(
                "%s: None provided for 'keys' in from_keys()",
                cls.__qualname__,
            )

            msg = "'keys' must be an iterable"
            raise InvalidArgument(msg)

        try:
            keys = iter(keys)
        except TypeError as exc:
            _logger.debug(
                "%s: non-iterable %r provided for 'keys' in from_keys()",
                cls.__qualname__,
                keys,
            )

            msg = "'keys' must be an iterable"
            raise InvalidArgument(msg) from exc

        queue = cls(capacity, compare)

        with queue.mutex:
            queue._fill(keys)

        return queue

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        if self._is_destroyed:
            return f"<destroyed {cls_repr} object at {id(self):#x}>"

        return f"{cls_repr}(capacity={self._capacity!r})"

    def __bool__(self, /) -> bool:
        with self.mutex:
            self._check_destroyed("__bool__")

            return 0 < self._qsize()

    def __len__(self, /) -> int:
        with self.mutex:
            self._check_destroyed("__len__")

            return self._qsize()

    def qsize(self, /) -> int:
        with self.mutex:
            self._check_destroyed("qsize")

            return self._qsize()

    def empty(self, /) -> bool:
        with self.mutex:
            if self._is_destroyed:
                return True

            return self._qsize() <= 0

    def full(self, /) -> bool:
        with self.mutex:
            self._check_destroyed("full")

            return self._capacity <= self._qsize()

    def enqueue(self, /, item: _T) -> None:
        with self.mutex:
            self._check_destroyed("enqueue")

            if item is None:
                self._debug("None provided for 'item' in enqueue()")

                msg = "cannot enqueue None"
                raise InvalidArgument(msg)

            if self._capacity <= self._qsize():
                self._debug("overflow in enqueue() of %r", item)

                raise QueueFull

            self._put(item)

    def dequeue(self, /) -> _T:
        with self.mutex:
            self._check_destroyed("dequeue")

            if not self._qsize():
                self._debug("underflow in dequeue()")

                raise QueueEmpty

            return self._get()

    def peek_max(self, /) -> _T:
        with self.mutex:
            self._check_destroyed("peek_max")

            if not self._qsize():
                self._debug("underflow in peek_max()")

                raise QueueEmpty

            return self._peek()

    def increase_key(self, /, index: int, item: _T) -> None:
        with self.mutex:
            self._check_destroyed("increase_key")

            index = _index(index)

            if item is None:
                self._debug("None provided for 'item' in increase_key()")

                msg = "cannot increase to None"
                raise InvalidArgument(msg)

            if not 0 <= index < self._qsize():
                self._debug(
                    "index %r out of bounds in increase_key()",
                    index,
                )

                msg = "'index' out of range"
                raise IndexOutOfBounds(msg)

            if self._compare(item, self._at(index)) > 0:
                self._debug(
                    "%r provided for 'item' in increase_key() loses to %r",
                    item,
                    self._at(index),
                )

                msg = "new key has lesser priority than current key"
                raise InvalidIncrease(msg)

            self._increase(index, item)

    def heap_sort(self, /) -> list[_T]:
        with self.mutex:
            self._check_destroyed("heap_sort")

            return self._sort()

    def destroy(self, /) -> None:
        with self.mutex:
            if self._is_destroyed:
                return

            self._is_destroyed = True
            self._count = 0

            self._release()

    def _check_destroyed(self, /, operation: str) -> None:
        if self._is_destroyed:
            self._debug("use of destroyed queue in %s()", operation)

            raise QueueShutDown

    def _debug(self, /, msg: str, *args: object) -> None:
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("%s: %s", self.__class__.__qualname__, msg % args)

    # These will only be called with appropriate locks held

    def _init(self, /, capacity: int) -> None:
        self.__data = [None] * capacity

    def _release(self, /) -> None:
        self.__data = []

    def _qsize(self, /) -> int:
        return self._count

    def _at(self, /, index: int) -> _T:
        return self.__data[index]  # type: ignore[return-value]

    def _fill(self, /, keys: Iterable[_T | None]) -> None:
        data = self.__data
        count = 0

        try:
            for key in islice(keys, self._capacity):
                if key is None:
                    break

                data[count] = key
                count += 1

            build_max_heap(data, count, self._compare)
        except BaseException:
            data[:count] = [None] * count

            raise

        self._count = count

    def _put(self, /, item: _T) -> None:
        data = self.__data
        count = self._count

        data[count] = item

        try:
            sift_up(data, count, self._compare)
        except BaseException:
            data[count] = None

            raise

        self._count = count + 1

    def _get(self, /) -> _T:
        data = self.__data
        last = self._count - 1

        item = data[0]

        data[0] = data[last]
        data[last] = None

        try:
            sift_down(data, last, 0, self._compare)
        except BaseException:
            # the sift failed before moving anything
            data[last] = data[0]
            data[0] = item

            raise

        self._count = last

        return item  # type: ignore[return-value]

    def _peek(self, /) -> _T:
        return self.__data[0]  # type: ignore[return-value]

    def _increase(self, /, index: int, item: _T) -> None:
        data = self.__data
        old_item = data[index]

        data[index] = item

        try:
            sift_up(data, index, self._compare)
        except BaseException:
            data[index] = old_item

            raise

    def _sort(self, /) -> list[_T]:
        data = self.__data
        count = self._count

        # sorted apart from the storage, the greatest priority last
        items = data[:count]

        heap_sort(items, count, self._compare)

        data[:count] = [None] * count
        self._count = 0

        return items  # type: ignore[return-value]

    @property
    def data(self, /) -> list[_T | None]:
        with self.mutex:
            return self.__data.copy()

    @property
    def capacity(self, /) -> int:
        return self._capacity

    @property
    def compare(self, /) -> Callable[[_T, _T], int]:
        return self._compare

    @property
    def destroyed(self, /) -> bool:
        return self._is_destroyed

