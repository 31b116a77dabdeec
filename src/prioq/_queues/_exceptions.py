#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

import queue
import sys

SyncQueueEmpty = queue.Empty


class QueueEmpty(SyncQueueEmpty):
    """
    Raised when dequeue/peek with empty queue (underflow).
    """


SyncQueueFull = queue.Full


class QueueFull(SyncQueueFull):
    """
    Raised when enqueue with full queue (overflow).
    """


if sys.version_info >= (3, 13):  # python/cpython#96471
    SyncQueueShutDown = queue.ShutDown

else:

    class SyncQueueShutDown(Exception):
        """
        A backport of :exc:`queue.ShutDown`.
        """


class QueueShutDown(SyncQueueShutDown):
    """
    Raised when any operation except empty/destroy with destroyed queue.
    """


class InvalidArgument(ValueError):
    """
    Raised when a required argument is missing or out of its domain.
    """


class IndexOutOfBounds(IndexError):
    """
    Raised when increase_key with an index outside of the live range.
    """


class InvalidIncrease(ValueError):
    """
    Raised when increase_key with a key of lesser priority.
    """


class LockInitError(RuntimeError):
    """
    Raised when the underlying lock cannot be created.
    """
