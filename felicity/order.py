class HeapOrder(object):
    """
    Decides which of two elements may sit above the other in a heap.

    Subclasses implement dominates(a, b), returning True when a is allowed
    to be the parent of b. The relation must be a strict weak ordering:
    dominates(x, x) is always False, and the answer for a given pair must
    never change while the elements are in a heap.
    """

    __slots__ = ()

    def dominates(self, a, b):
        raise NotImplementedError()

    def __call__(self, a, b):
        return self.dominates(a, b)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return type(self).__name__ + "()"


class MinOrder(HeapOrder):
    """
    >>> MinOrder().dominates(1, 2)
    True
    >>> MinOrder().dominates(2, 2)
    False
    """

    __slots__ = ()

    def dominates(self, a, b):
        return a < b


class MaxOrder(HeapOrder):
    """
    >>> MaxOrder().dominates(2, 1)
    True
    >>> MaxOrder().dominates(2, 2)
    False
    """

    __slots__ = ()

    def dominates(self, a, b):
        return a > b


class FunctionOrder(HeapOrder):
    """
    Adapt a plain binary predicate into a HeapOrder.

    >>> by_length = FunctionOrder(lambda a, b: len(a) < len(b))
    >>> by_length.dominates("ab", "abc")
    True
    """

    __slots__ = "_func",

    def __init__(self, func):
        if not callable(func):
            raise TypeError("expected a callable, got {0!r}".format(func))
        self._func = func

    @property
    def func(self):
        return self._func

    def dominates(self, a, b):
        return bool(self._func(a, b))

    def __eq__(self, other):
        return type(self) is type(other) and self._func == other._func

    def __hash__(self):
        return hash((type(self), self._func))

    def __repr__(self):
        return "{0}({1!r})".format(type(self).__name__, self._func)


def as_order(obj=None):
    """
    Return a HeapOrder for obj. None means MinOrder, HeapOrder
    instances are returned as is and other callables get wrapped.

    >>> as_order()
    MinOrder()
    >>> as_order(MaxOrder())
    MaxOrder()
    >>> as_order(42)
    Traceback (most recent call last):
        ...
    TypeError: expected a HeapOrder or a callable, got 42
    """

    if obj is None:
        return MinOrder()
    if isinstance(obj, HeapOrder):
        return obj
    if callable(obj):
        return FunctionOrder(obj)
    raise TypeError("expected a HeapOrder or a callable, got {0!r}".format(obj))
