"""
Deferred actions driven by the game clock.

The scheduler never looks at wall time itself: the host advances it with the
same millisecond timestamp it hands to ``Game.update``, so tests can jump the
clock forward deterministically.
"""

import heapq
import itertools


class TimerHandle:
    __slots__ = ("due", "callback", "cancelled")

    def __init__(self, due, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class Scheduler:
    def __init__(self, now=0):
        self.now = now
        self._queue = []
        self._seq = itertools.count()

    def call_later(self, delay, callback):
        handle = TimerHandle(self.now + delay, callback)
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        return handle

    def advance_to(self, now):
        """Move the clock to ``now`` and run every timer that fell due, in order."""
        self.now = max(self.now, now)
        while self._queue and self._queue[0][0] <= self.now:
            _, _, handle = heapq.heappop(self._queue)
            if not handle.cancelled:
                handle.callback()

    @property
    def pending(self):
        return sum(1 for _, _, handle in self._queue if not handle.cancelled)
