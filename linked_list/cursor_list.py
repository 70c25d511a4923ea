"""
带游标的单向链表。新节点总是插入到链表头部，游标只能从头向尾移动，位置从 1 开始计数。

删除操作只是切断前驱节点的链接：被切断的后缀不再被任何对象引用，由 Python 自动回收。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from .errors import CursorDereferenceError, IndexOutOfRangeError, InvalidIndexError
from .node import Node

logger = logging.getLogger(__name__)

FIRST_POSITION = 1


class LinkedList:
    """
    带游标的单向链表

    >>> letters = LinkedList()
    >>> for item in "abc":
    ...     letters.insert(item)
    >>> list(letters)
    ['c', 'b', 'a']
    >>> letters.next()
    >>> letters.position, letters.peek()
    (2, 'b')
    >>> letters.end()
    >>> letters.position, letters.peek()
    (3, 'a')
    >>> letters.remove(3)
    >>> str(letters), letters.position
    ('c -> b', 2)
    """

    def __init__(self) -> None:
        """初始化空链表"""
        self._head: Node | None = None
        self._current: Node | None = None
        self._position = FIRST_POSITION

    def __iter__(self) -> Iterator[Any]:
        """返回链表的迭代器"""
        node = self._head
        while node:
            yield node.data
            node = node.next_node

    def __len__(self) -> int:
        """返回链表的长度"""
        return sum(1 for _ in self)

    def __str__(self) -> str:
        """返回链表的字符串表示"""
        return " -> ".join([str(item) for item in self])

    def __repr__(self) -> str:
        items = ", ".join([repr(item) for item in self])
        return f"LinkedList([{items}], position={self._position})"

    @property
    def position(self) -> int:
        """游标当前的位置"""
        return self._position

    def is_empty(self) -> bool:
        """检查链表是否为空"""
        return self._head is None

    def peek(self) -> Any:
        """返回游标所在节点的数据"""
        if self._current is None:
            raise CursorDereferenceError("游标为空，无法读取数据。")
        return self._current.data

    def insert(self, data: Any) -> None:
        """在链表头部插入新节点，游标随之回到头部"""
        self._head = Node(data, self._head)
        self._current = self._head
        self._position = FIRST_POSITION

    def remove(self, index: int) -> None:
        """
        删除第 index 个及之后的所有节点

        Args:
            index: 要删除的第一个节点的位置，至少为 2（清空整个链表请用 clear）
        """
        if index < FIRST_POSITION + 1:
            raise InvalidIndexError(index, FIRST_POSITION + 1)
        previous = self.get(index - 1)
        if previous.next_node is None:
            raise IndexOutOfRangeError(index, index - 1)

        previous.next_node = None
        logger.debug("切断第 %d 个节点之后的链接", index - 1)

        # 游标落在被切断的部分时退回到新的尾节点
        if self._position >= index:
            self._position = index - 1
            if self._current is not None:
                self._current = previous

    def clear(self) -> None:
        """清空链表并重置游标"""
        self._head = None
        self._current = None
        self._position = FIRST_POSITION
        logger.debug("链表已清空")

    def next(self) -> None:
        """游标前进一步；走出尾部后游标为空，位置保持不变"""
        if self._current is None:
            raise CursorDereferenceError("游标为空，无法继续前进。")
        self._current = self._current.next_node
        if self._current is not None:
            self._position += 1

    def move_to(self, index: int) -> None:
        """把游标移动到第 index 个节点"""
        if index < FIRST_POSITION:
            raise InvalidIndexError(index, FIRST_POSITION)
        length = len(self)
        if index > length:
            raise IndexOutOfRangeError(index, length)

        if index == FIRST_POSITION:
            self._hard_reset()
        elif index < self._position or self._current is None:
            self._hard_reset()
            self._enumerate_to(index)
        else:
            self._enumerate_to(index)

    def get(self, index: int) -> Node:
        """返回第 index 个节点"""
        if index < FIRST_POSITION:
            raise InvalidIndexError(index, FIRST_POSITION)
        counter = FIRST_POSITION
        node = self._head
        while node is not None and counter < index:
            node = node.next_node
            counter += 1
        if node is None:
            raise IndexOutOfRangeError(index, len(self))
        return node

    def front(self) -> None:
        """游标回到头节点"""
        self.move_to(FIRST_POSITION)

    def end(self) -> None:
        """游标移动到尾节点"""
        while self.has_next():
            self.next()

    def has_next(self) -> bool:
        """游标所在节点之后是否还有节点"""
        if self._current is None:
            raise CursorDereferenceError("游标为空，无法判断是否有下一个节点。")
        return self._current.next_node is not None

    def _hard_reset(self) -> None:
        self._current = self._head
        self._position = FIRST_POSITION

    def _enumerate_to(self, index: int) -> None:
        while self._position < index:
            self.next()
