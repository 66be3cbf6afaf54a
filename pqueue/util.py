# Description: Utility functions built on top of the heap, for use by
# embedding programs and the pqueue command line programs.
import logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

from pqueue.heap import Heap, reverse_comparator

def str2bool(s):
    """Convert string to boolean.

    :s: string to convert
    """
    if s.lower() == "true":
        return True
    elif s.lower() == "false":
        return False
    else:
        raise ValueError("string not matching 'true' or 'false'")

def str2number(s):
    """Convert string to int if it represents an integer, float otherwise."""
    try:
        return int(s)
    except ValueError:
        return float(s)

def read_values(infile, numeric = True):
    """Return list of whitespace separated values read from a text stream.

    :infile: file-like object to read lines from.
    :numeric: convert values to numbers (see str2number), otherwise values
    are returned as strings.
    """
    values = []
    for lineno, line in enumerate(infile, 1):
        for token in line.split():
            if numeric:
                try:
                    token = str2number(token)
                except ValueError:
                    raise ValueError("Not a number: \"%s\" (line %s)"%(
                        token, lineno))
            values.append(token)
    logger.debug("read %s values"%len(values))
    return values

def heapsort(iterable, comparator = None):
    """Return list of the items in "iterable" ordered by comparator.

    :iterable: items to sort.
    :comparator: function (a, b) -> int, defaults to ascending order.
    """
    h = Heap(comparator, data = iterable)
    return [h.poll() for _ in range(len(h))]

def top_k(iterable, k, comparator = None):
    """Return the k greatest items (according to comparator) in "iterable",
    greatest first.

    Uses a min heap holding at most k items, so that the root is always the
    smallest item kept so far.

    :iterable: items to select from.
    :k: number of items to return.
    :comparator: function (a, b) -> int, defaults to ascending order.
    """
    if k <= 0:
        return []
    h = Heap(comparator)
    for item in iterable:
        h.offer(item)
        if len(h) > k:
            h.poll()
    result = [h.poll() for _ in range(len(h))]
    result.reverse()
    return result

def bottom_k(iterable, k, comparator = None):
    """Return the k smallest items in "iterable", smallest first."""
    return top_k(iterable, k, reverse_comparator(comparator))
