#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2024 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

__all__ = (
    "InvalidArgument",
    "IndexOutOfBounds",
    "InvalidIncrease",
    "LockInitError",
    "QueueEmpty",
    "QueueFull",
    "QueueShutDown",
    "SyncQueueEmpty",
    "SyncQueueFull",
    "SyncQueueShutDown",
)

from ._queues._exceptions import (
    IndexOutOfBounds,
    InvalidArgument,
    InvalidIncrease,
    LockInitError,
    QueueEmpty,
    QueueFull,
    QueueShutDown,
    SyncQueueEmpty,
    SyncQueueFull,
    SyncQueueShutDown,
)
