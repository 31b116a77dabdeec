#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import random
import sys
import time

from threading import Event, Thread

import prioq

DURATION = 6
CAPACITY = 1024


def work(queue, stop):
    rng = random.Random(42)

    while not stop.is_set():
        try:
            queue.enqueue(rng.random())
        except prioq.QueueFull:
            pass


def func(queue, stop):
    ops = 0
    deadline = time.monotonic() + DURATION

    try:
        while time.monotonic() < deadline:
            try:
                queue.dequeue()
            except prioq.QueueEmpty:
                continue

            ops += 1
    finally:
        stop.set()

        print(ops // DURATION)


def main():
    queue = prioq.PriorityQueue(CAPACITY)
    stop = Event()

    thread = Thread(target=work, args=[queue, stop])
    thread.start()

    try:
        func(queue, stop)
    finally:
        thread.join()

        queue.destroy()


if __name__ == "__main__":
    sys.exit(main())
