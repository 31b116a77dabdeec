#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from ._exceptions import (
    IndexOutOfBounds as IndexOutOfBounds,
    InvalidArgument as InvalidArgument,
    InvalidIncrease as InvalidIncrease,
    LockInitError as LockInitError,
    QueueEmpty as QueueEmpty,
    QueueFull as QueueFull,
    QueueShutDown as QueueShutDown,
    SyncQueueEmpty as SyncQueueEmpty,
    SyncQueueFull as SyncQueueFull,
    SyncQueueShutDown as SyncQueueShutDown,
)
from ._protocols import (
    BoundedQueue as BoundedQueue,
)
from ._types import (
    PriorityQueue as PriorityQueue,
)
