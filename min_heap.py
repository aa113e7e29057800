"""
Binary min-heap with an injectable ordering key
Used by Prim's algorithm as the frontier of candidate edges
"""

import heapq
import itertools
from operator import attrgetter


class EmptyHeapError(IndexError):
    """Raised when popping or peeking an empty heap"""


class MinHeap:
    """
    Min-heap ordered by key(item), ascending.

    The default key is the item's ``cost`` attribute, so WeightedEdge values
    can be pushed directly. Items with equal keys come out in insertion
    order; that is how this implementation happens to break ties and callers
    should not depend on it.
    """

    def __init__(self, key=None):
        self.key = key if key is not None else attrgetter("cost")
        self._entries = []
        # The counter keeps the items themselves out of the comparison
        self._counter = itertools.count()

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)

    def is_empty(self):
        return not self._entries

    def push(self, item):
        heapq.heappush(self._entries, (self.key(item), next(self._counter), item))

    def pop(self):
        """Remove and return the item with the smallest key"""
        if not self._entries:
            raise EmptyHeapError("pop from an empty heap")
        return heapq.heappop(self._entries)[2]

    def peek(self):
        if not self._entries:
            raise EmptyHeapError("peek at an empty heap")
        return self._entries[0][2]
