#!/usr/bin/env python3

import random
import threading
import unittest

from collections import Counter

import prioq

QUEUE_SIZE = 64
N_THREADS = 4
N_ITEMS = 2000
SHORT_TIMEOUT = 30.0

# SPDX-SnippetBegin
# SPDX-SnippetCopyrightText: 2017 Python Software Foundation
# SPDX-License-Identifier: PSF-2.0

def join_thread(thread, timeout=None):
    """Join a thread. Raise an AssertionError if the thread is still alive
    after timeout seconds.
    """
    if timeout is None:
        timeout = SHORT_TIMEOUT
    thread.join(timeout)
    if thread.is_alive():
        msg = f"failed to join the thread in {timeout:.1f} seconds"
        raise AssertionError(msg)

# SPDX-SnippetEnd


def lower_wins(a, b):
    return a - b


class ThreadedPriorityQueueTest(unittest.TestCase):
    type2test = prioq.PriorityQueue

    def setUp(self):
        self.q = self.type2test(QUEUE_SIZE, lower_wins)
        self.start = threading.Barrier(2 * N_THREADS)
        self.produced = Counter()
        self.consumed = Counter()
        self.cumlock = threading.Lock()
        self.errors = []

    def producer(self, seed):
        rng = random.Random(seed)
        self.start.wait()
        produced = Counter()
        sent = 0
        while sent < N_ITEMS:
            item = rng.randrange(1, 1000)
            try:
                self.q.enqueue(item)
            except prioq.QueueFull:
                continue
            produced[item] += 1
            sent += 1
        with self.cumlock:
            self.produced += produced

    def consumer(self, done):
        self.start.wait()
        consumed = Counter()
        while True:
            try:
                item = self.q.dequeue()
            except prioq.QueueEmpty:
                if done.is_set():
                    break
                continue
            consumed[item] += 1
        with self.cumlock:
            self.consumed += consumed

    def run_threads(self):
        done = threading.Event()
        producers = [
            threading.Thread(target=self.producer, args=(i,))
            for i in range(N_THREADS)
        ]
        consumers = [
            threading.Thread(target=self.consumer, args=(done,))
            for i in range(N_THREADS)
        ]
        for thread in producers + consumers:
            thread.start()
        for thread in producers:
            join_thread(thread)
        done.set()
        for thread in consumers:
            join_thread(thread)

    def test_producers_consumers(self):
        self.run_threads()
        self.assertTrue(self.q.empty())
        self.assertEqual(sum(self.produced.values()), N_THREADS * N_ITEMS)
        self.assertEqual(self.produced, self.consumed)

    def test_invariants_under_contention(self):
        stop = threading.Event()

        def increaser():
            rng = random.Random(42)
            while not stop.is_set():
                count = len(self.q)
                try:
                    self.q.increase_key(rng.randrange(max(count, 1)), 1)
                except (prioq.IndexOutOfBounds, prioq.InvalidIncrease):
                    pass

        thread = threading.Thread(target=increaser)
        thread.start()
        try:
            self.run_threads()
        finally:
            stop.set()
            join_thread(thread)

        data = self.q.data
        count = len(self.q)
        self.assertTrue(prioq.is_max_heap(data, count, lower_wins))
        self.assertEqual(data[count:], [None] * (QUEUE_SIZE - count))
        self.assertEqual(count, 0)

    def test_peek_under_contention(self):
        stop = threading.Event()

        def peeker():
            while not stop.is_set():
                try:
                    item = self.q.peek_max()
                except prioq.QueueEmpty:
                    continue
                if item is None:
                    self.errors.append("peeked a vacant slot")

        thread = threading.Thread(target=peeker)
        thread.start()
        try:
            self.run_threads()
        finally:
            stop.set()
            join_thread(thread)

        self.assertEqual(self.errors, [])
        self.assertEqual(self.produced, self.consumed)


if __name__ == "__main__":
    unittest.main()
