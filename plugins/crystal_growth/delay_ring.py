"""
DelayRing - Circular schedule of pending placements

One bucket per tick modulo the ring size. An event scheduled at tick t with
delay d lands in bucket (t + d) % size. Since every delay lies in
[1, size], a bucket is always drained before the ring wraps back to it.
"""

from collections import namedtuple

PendingEvent = namedtuple("PendingEvent", ["x", "y", "crystal"])


class DelayRing:

    def __init__(self, size):
        self.size = size
        self.buckets = [[] for _ in range(size)]

    def schedule(self, t, delay, event):
        self.buckets[(t + delay) % self.size].append(event)

    def take(self, index):
        """Remove and return bucket `index`, leaving an empty list in its place.

        Events consumed from the returned list may schedule into any bucket,
        this one included.
        """
        events = self.buckets[index]
        self.buckets[index] = []
        return events

    def __len__(self):
        """Total number of pending events."""
        return sum(len(bucket) for bucket in self.buckets)

    @property
    def is_empty(self):
        return not any(self.buckets)
