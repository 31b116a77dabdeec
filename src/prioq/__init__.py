#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Thread-safe bounded max-priority queue for Python

A fixed-capacity binary heap that retrieves items in priority order (greatest
first), ordered by a caller-supplied three-way comparator, and guarded by a
per-queue lock so that a single queue can be shared between threads.
"""

from __future__ import annotations

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"
__version__: str = "0.1.0"

from ._heap import (
    build_max_heap as build_max_heap,
    default_compare as default_compare,
    heap_sort as heap_sort,
    is_max_heap as is_max_heap,
)
from ._queues import (
    BoundedQueue as BoundedQueue,
    IndexOutOfBounds as IndexOutOfBounds,
    InvalidArgument as InvalidArgument,
    InvalidIncrease as InvalidIncrease,
    LockInitError as LockInitError,
    PriorityQueue as PriorityQueue,
    QueueEmpty as QueueEmpty,
    QueueFull as QueueFull,
    QueueShutDown as QueueShutDown,
    SyncQueueEmpty as SyncQueueEmpty,
    SyncQueueFull as SyncQueueFull,
    SyncQueueShutDown as SyncQueueShutDown,
)
