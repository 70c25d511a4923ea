from .cursor_list import FIRST_POSITION, LinkedList
from .errors import (
    CursorDereferenceError,
    IndexOutOfRangeError,
    InvalidIndexError,
    LinkedListError,
)
from .node import Node

__all__ = [
    "FIRST_POSITION",
    "CursorDereferenceError",
    "IndexOutOfRangeError",
    "InvalidIndexError",
    "LinkedList",
    "LinkedListError",
    "Node",
]
