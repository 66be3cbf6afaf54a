#!/usr/bin/env python
# Description: Array backed binary min heap with a pluggable comparator and a
# separate equality predicate for removing items by value.

import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

def default_comparator(a, b):
    """Ascending order; None is sorted after every other value."""
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return -1
    return (a > b) - (a < b)

def default_equals(a, b):
    return a == b

def reverse_comparator(comparator = None):
    """Return comparator that orders items opposite to "comparator", turning
    the min heap into a max heap.
    """
    if comparator is None:
        comparator = default_comparator
    return lambda a, b:comparator(b, a)

def key_comparator(key, comparator = None):
    """Return comparator that orders items by key(item)."""
    if comparator is None:
        comparator = default_comparator
    return lambda a, b:comparator(key(a), key(b))

def _check_callable(f, name):
    if not callable(f):
        raise TypeError("%s must be callable, got %r"%(name, f))
    return f

class Heap(object):
    """Min heap implementation which allows for deleting specific items,
    identified by an equality predicate, as opposed to their index in the
    heap.

    Note:
    - Ordering is determined by the comparator, a function taking two items
      and returning a negative number, zero, or a positive number.
    - The equals predicate is only used by contains and remove and need not
      agree with the comparator.
    - Changing the comparator does not restore the heap property, call
      heapify afterwards.
    """
    def __init__(self, comparator = None, equals = None, data = None):
        """
        :comparator: function (a, b) -> int, defaults to ascending order.
        :equals: function (a, b) -> bool, defaults to "==".
        :data: optional iterable of initial items, turned into a heap in a
        single heapify pass.
        """
        self._comparator = _check_callable(
                default_comparator if comparator is None else comparator,
                "comparator")
        self._equals = _check_callable(
                default_equals if equals is None else equals, "equals")
        self.heap = []
        if data is not None:
            self.set_data(data)

    def __len__(self):
        return len(self.heap)

    def __bool__(self):
        return len(self.heap) > 0

    def __contains__(self, item):
        return self.contains(item)

    def __iter__(self):
        """Iterate over the items in priority order, leaving the heap intact."""
        h = self.clone()
        while len(h) > 0:
            yield h.poll()

    def __repr__(self):
        return "%s(size=%s)"%(self.__class__.__name__, len(self.heap))

    def __copy__(self):
        return self.clone()

    @property
    def comparator(self):
        return self._comparator

    @comparator.setter
    def comparator(self, comparator):
        self._comparator = _check_callable(comparator, "comparator")
        logger.debug("comparator replaced, heapify() required to restore \
heap property (size: %s)"%len(self.heap))

    @property
    def equals(self):
        return self._equals

    @equals.setter
    def equals(self, equals):
        self._equals = _check_callable(equals, "equals")
        logger.debug("equals predicate replaced")

    def _swap(self, i, j):
        """Swap index i and j."""
        self.heap[i], self.heap[j] = self.heap[j], self.heap[i]

    def _bubble_up(self, i):
        """Move item at index i towards the root, return its final index."""
        cmp = self._comparator
        while i > 0:
            pi = (i - 1) // 2 # parent index
            if cmp(self.heap[pi], self.heap[i]) <= 0:
                break
            self._swap(pi, i)
            i = pi
        return i

    def _bubble_down(self, i):
        """Move item at index i towards the leaves, return its final index."""
        cmp = self._comparator
        size = len(self.heap)
        while True:
            ci = 2*i + 1 # left child index
            if ci >= size:
                return i
            ri = ci + 1 # right child index
            if ri < size and cmp(self.heap[ri], self.heap[ci]) < 0:
                ci = ri
            if cmp(self.heap[ci], self.heap[i]) >= 0:
                return i
            self._swap(i, ci) # swap with smallest child
            i = ci

    def _index(self, item):
        """Return index of the first item equal to "item", or -1."""
        for i, other in enumerate(self.heap):
            if self._equals(other, item):
                return i
        return -1

    def has_heap_property(self):
        """Return True iff heap still has the heap property."""
        cmp = self._comparator
        size = len(self.heap)
        for i in range(size // 2):
            for ci in (2*i + 1, 2*i + 2):
                if ci < size and cmp(self.heap[i], self.heap[ci]) > 0:
                    return False
        return True

    def size(self):
        return len(self.heap)

    def peek(self):
        """Return the minimum item without removing it, None if empty."""
        if len(self.heap) == 0:
            return None
        return self.heap[0]

    def offer(self, item):
        """Push item onto the heap."""
        self.heap.append(item)
        self._bubble_up(len(self.heap) - 1) # restore the heap property

    def poll(self):
        """Pop minimum item from the heap, None if empty."""
        if len(self.heap) == 0:
            return None

        result = self.heap[0]
        last = self.heap.pop()
        if len(self.heap) > 0:
            self.heap[0] = last
            self._bubble_down(0)
        return result

    def contains(self, item):
        return self._index(item) >= 0

    def remove(self, item):
        """Remove the first item equal to "item" from the heap.

        Returns True if an item was removed, False otherwise.
        """
        i = self._index(item)
        if i < 0:
            return False

        # Take the right-most leaf out of the heap and use it to fill the
        # hole at i. It may belong either below or above i.
        last = self.heap.pop()
        if i == len(self.heap):
            return True
        self.heap[i] = last
        if self._bubble_down(i) == i:
            self._bubble_up(i)
        return True

    def clear(self):
        logger.debug("clearing heap (size: %s)"%len(self.heap))
        self.heap = []

    def heapify(self):
        """Restore the heap property for the whole heap in linear time."""
        for i in range(len(self.heap) // 2, -1, -1):
            self._bubble_down(i)

    def set_data(self, data):
        """Replace the content of the heap by a copy of "data"."""
        self.heap = list(data)
        logger.debug("heapify %s items"%len(self.heap))
        self.heapify()

    def get_data(self, raw = False):
        """Return the items in heap order.

        :raw: if True, return the backing list itself rather than a copy. It
        must not be modified, nor kept around while the heap changes.
        """
        return self.heap if raw else list(self.heap)

    def clone(self):
        """Return a new heap with the same comparator, equals predicate and
        items. Modifying the clone does not affect this heap.
        """
        logger.debug("cloning heap (size: %s)"%len(self.heap))
        h = self.__class__(self._comparator, self._equals)
        h.set_data(self.heap)
        return h
