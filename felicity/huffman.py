"""
Huffman prefix codes built with a min-ordered Heap as the priority queue.

>>> tree = build_tree(count_frequencies("abracadabra"))
>>> codes = build_codes(tree)
>>> codes["a"]
'0'
>>> decode(encode("abracadabra", codes), tree)
'abracadabra'
"""

import logging
import itertools
import collections

from .heap import Heap
from .order import FunctionOrder


log = logging.getLogger(__name__)


class Leaf(object):
    __slots__ = "symbol", "frequency"

    def __init__(self, symbol, frequency):
        self.symbol = symbol
        self.frequency = frequency

    def __repr__(self):
        return "Leaf({0!r}, {1!r})".format(self.symbol, self.frequency)


class Internal(object):
    __slots__ = "left", "right", "frequency"

    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.frequency = left.frequency + right.frequency

    def __repr__(self):
        return "Internal({0!r}, {1!r})".format(self.left, self.right)


def _by_rank(left, right):
    return left[:2] < right[:2]


def count_frequencies(text):
    """
    >>> sorted(count_frequencies("hello").items())
    [('e', 1), ('h', 1), ('l', 2), ('o', 1)]
    """

    return dict(collections.Counter(text))


def build_tree(frequencies):
    """
    Merge the two least frequent nodes until one tree remains.

    Nodes are ranked by (frequency, creation order) so equally frequent
    nodes always merge in the same order and the resulting codes do not
    depend on dict ordering.
    """

    if not frequencies:
        raise ValueError("cannot build a Huffman tree without symbols")

    serials = itertools.count()
    entries = [(frequency, next(serials), Leaf(symbol, frequency))
               for symbol, frequency in sorted(frequencies.items())]

    heap = Heap.with_capacity(2 * len(entries) - 1, FunctionOrder(_by_rank))
    heap.extend(entries)

    while len(heap) > 1:
        _, _, left = heap.remove(0)
        _, _, right = heap.remove(0)

        node = Internal(left, right)
        log.debug("merged nodes with frequencies %d and %d", left.frequency, right.frequency)
        heap.insert((node.frequency, next(serials), node))

    _, _, root = heap.remove(0)
    return root


def build_codes(tree):
    """
    >>> build_codes(Leaf("x", 3))
    {'x': '0'}
    """

    if isinstance(tree, Leaf):
        return {tree.symbol: "0"}

    codes = {}
    stack = [(tree, "")]
    while stack:
        node, prefix = stack.pop()
        if isinstance(node, Leaf):
            codes[node.symbol] = prefix
        else:
            stack.append((node.right, prefix + "1"))
            stack.append((node.left, prefix + "0"))
    return codes


def encode(text, codes=None):
    if codes is None:
        codes = build_codes(build_tree(count_frequencies(text)))
    return "".join(codes[symbol] for symbol in text)


def decode(bits, tree):
    """
    >>> decode("01", build_tree({"a": 1, "b": 1, "c": 2}))
    Traceback (most recent call last):
        ...
    ValueError: dangling bits at the end of the input
    """

    if isinstance(tree, Leaf):
        for bit in bits:
            if bit != "0":
                raise ValueError("invalid bit {0!r}".format(bit))
        return tree.symbol * len(bits)

    symbols = []
    node = tree
    for bit in bits:
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise ValueError("invalid bit {0!r}".format(bit))

        if isinstance(node, Leaf):
            symbols.append(node.symbol)
            node = tree

    if node is not tree:
        raise ValueError("dangling bits at the end of the input")
    return "".join(symbols)
