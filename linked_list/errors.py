"""
链表操作的异常类型。所有异常都在修改链表之前抛出，失败的调用不会留下部分修改。
"""

from __future__ import annotations


class LinkedListError(Exception):
    """链表异常基类"""
    pass


class CursorDereferenceError(LinkedListError):
    """游标为空时仍尝试前进或读取"""
    pass


class IndexOutOfRangeError(LinkedListError, IndexError):
    """索引超出链表长度"""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"索引 {index} 超出范围，链表长度为 {length}")
        self.index = index
        self.length = length


class InvalidIndexError(LinkedListError, ValueError):
    """索引本身不合法，例如 get(0) 或 remove(1)"""

    def __init__(self, index: int, minimum: int) -> None:
        super().__init__(f"索引 {index} 不合法，最小允许值为 {minimum}")
        self.index = index
        self.minimum = minimum
