from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """链表节点"""
    data: Any
    next_node: Node | None = None

    def __repr__(self) -> str:
        """返回节点的字符串表示"""
        return f"Node({self.data!r})"
