__version__ = "0.1.0"

from pqueue.heap import Heap, default_comparator, default_equals, \
        reverse_comparator, key_comparator
