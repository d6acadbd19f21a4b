from .order import HeapOrder, MinOrder, MaxOrder, FunctionOrder, as_order
from .heap import (
    Heap,
    HeapError,
    ValuesView,
    heapify,
    sift_down,
    sift_up,
    is_heap,
    tree_format
)

__version__ = "1.0.0"


__all__ = [
    "__version__",
    "HeapOrder",
    "MinOrder",
    "MaxOrder",
    "FunctionOrder",
    "as_order",
    "Heap",
    "HeapError",
    "ValuesView",
    "heapify",
    "sift_down",
    "sift_up",
    "is_heap",
    "tree_format"
]
