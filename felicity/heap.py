import collections.abc

from .order import MinOrder, MaxOrder, as_order


class HeapError(IndexError):
    pass


class Heap(object):
    """
    A binary heap stored in a plain list, ordered by a HeapOrder.

    The element at index i has its children at 2 * i + 1 and 2 * i + 2.
    No child ever dominates its parent, so values()[0] is always the
    dominant element: the smallest one for MinOrder (the default) and
    the largest one for MaxOrder.

    >>> heap = Heap([5, 3, 8, 1])
    >>> heap.insert(4)
    >>> [heap.remove(0) for _ in range(len(heap))]
    [1, 3, 4, 5, 8]
    """

    def __init__(self, iterable=(), order=None):
        self._order = as_order(order)
        self._data = list(iterable)
        heapify(self._data, self._order)

    @classmethod
    def _adopt(cls, data, order):
        if not isinstance(data, list):
            data = list(data)

        heap = cls.__new__(cls)
        heap._order = order
        heap._data = data
        return heap

    @classmethod
    def with_capacity(cls, capacity, order=None):
        # Lists grow on their own, the capacity is only sanity checked.
        if capacity < 0:
            raise ValueError("capacity must be non-negative, got {0!r}".format(capacity))
        return cls._adopt([], as_order(order))

    @classmethod
    def min(cls, iterable=()):
        return cls(iterable, MinOrder())

    @classmethod
    def max(cls, iterable=()):
        return cls(iterable, MaxOrder())

    @classmethod
    def from_heap_unchecked(cls, data, order=None):
        """
        Adopt data as the backing list without reordering or copying it.

        The caller promises that data already satisfies the heap
        property under order. The promise is asserted when Python runs
        in debug mode, and not checked at all under -O, in which case a
        broken promise leaves later insertions and removals misbehaving.

        A list passed in becomes the heap's storage as is, so the caller
        must not modify it afterwards.
        """

        order = as_order(order)
        heap = cls._adopt(data, order)
        assert is_heap(heap._data, order), "sequence does not satisfy the heap property"
        return heap

    @classmethod
    def try_from_heap(cls, data, order=None):
        """
        Return a heap holding a copy of data if data satisfies the heap
        property, otherwise return None.

        >>> Heap.try_from_heap([4, 2, 3, 7], MaxOrder()) is None
        True
        >>> Heap.try_from_heap([4, 3, 1, 2], MaxOrder()).values()
        ValuesView([4, 3, 1, 2])
        """

        order = as_order(order)
        data = list(data)
        if not is_heap(data, order):
            return None
        return cls._adopt(data, order)

    @property
    def order(self):
        return self._order

    def values(self):
        return ValuesView(self._data)

    def to_values(self):
        data = self._data
        self._data = []
        return data

    def insert(self, value):
        data = self._data
        data.append(value)
        sift_up(data, len(data) - 1, self._order)

    def extend(self, iterable):
        for value in iterable:
            self.insert(value)

    def remove(self, index):
        data = self._data
        if not 0 <= index < len(data):
            raise HeapError("index {0!r} out of range for a heap of size {1}".format(index, len(data)))

        last = len(data) - 1
        data[index], data[last] = data[last], data[index]
        value = data.pop()
        if index == last:
            return value

        # Only one direction can be off: the replacement either outranks
        # the removed value, is outranked by it, or ranks the same.
        order = self._order
        replacement = data[index]
        if order.dominates(replacement, value):
            sift_up(data, index, order)
        elif order.dominates(value, replacement):
            sift_down(data, index, order)
        return value

    def pop(self):
        if not self._data:
            raise HeapError("empty heap")
        return self.remove(0)

    def peek(self):
        if not self._data:
            raise HeapError("empty heap")
        return self._data[0]

    def tree_format(self):
        return tree_format(self._data)

    def __len__(self):
        return len(self._data)

    def __bool__(self):
        return bool(self._data)

    def __repr__(self):
        return "{0}({1!r}, order={2!r})".format(type(self).__name__, self._data, self._order)


class ValuesView(collections.abc.Sequence):
    """
    Read-only view of a heap's backing list, in array order.

    >>> view = Heap([3, 1, 2]).values()
    >>> view[0], len(view)
    (1, 3)
    >>> view[0] = 5
    Traceback (most recent call last):
        ...
    TypeError: 'ValuesView' object does not support item assignment
    """

    __slots__ = "_data",

    def __init__(self, data):
        self._data = data

    def __getitem__(self, index):
        return self._data[index]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if isinstance(other, ValuesView):
            return self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "{0}({1!r})".format(type(self).__name__, self._data)


def heapify(data, order):
    """
    Reorder the list data in place so that it satisfies the heap
    property. Runs in linear time.

    >>> data = [1, 2, 3, 4, 5]
    >>> heapify(data, MaxOrder())
    >>> data
    [5, 4, 3, 1, 2]
    """

    for index in reversed(range(len(data) // 2)):
        sift_down(data, index, order)


def sift_down(data, index, order):
    length = len(data)

    while True:
        top = index

        left = 2 * index + 1
        if left < length and order.dominates(data[left], data[top]):
            top = left

        right = left + 1
        if right < length and order.dominates(data[right], data[top]):
            top = right

        if top == index:
            break

        data[index], data[top] = data[top], data[index]
        index = top


def sift_up(data, index, order):
    while index > 0:
        parent = (index - 1) // 2
        if not order.dominates(data[index], data[parent]):
            break

        data[index], data[parent] = data[parent], data[index]
        index = parent


def is_heap(values, order):
    """
    Return True when no element of values dominates its parent.

    Every parent/child pair lies on the path from some leaf to the
    root, so walking up from the leaves covers the whole tree.

    >>> is_heap([4, 3, 1, 2], MaxOrder())
    True
    >>> is_heap([4, 2, 3, 7], MaxOrder())
    False
    >>> is_heap([1, 1, 1], MinOrder())
    True
    >>> is_heap([1, 2, 0, 3, 4], MinOrder())
    False
    """

    length = len(values)

    # Leaves start at length // 2, the first index with no children.
    for leaf in range(length // 2, length):
        index = leaf
        while index > 0:
            parent = (index - 1) // 2
            if order.dominates(values[index], values[parent]):
                return False
            index = parent
    return True


def tree_format(values):
    """
    Render values one tree level per line.

    >>> print(tree_format([1, 2, 3, 4, 5, 6, 7, 8]))
    0: 1
    1: 2 2: 3
    3: 4 4: 5 5: 6 6: 7
    7: 8
    >>> tree_format([])
    ''
    """

    lines = []
    row_start = 0
    row_width = 1

    while row_start < len(values):
        row = values[row_start:row_start + row_width]
        lines.append(" ".join("{0}: {1!r}".format(row_start + offset, value) for offset, value in enumerate(row)))
        row_start += row_width
        row_width *= 2
    return "\n".join(lines)

