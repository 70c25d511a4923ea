"""
命令行入口：回放一段完整的链表操作示例，或者用给定元素构建链表并查看游标。

    python -m linked_list trace --verbose
    python -m linked_list build a b c --move_to 2
"""

import logging
import sys

import fire

from .cursor_list import LinkedList
from .errors import CursorDereferenceError, LinkedListError

# 配置日志
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
logger = logging.getLogger(__name__)


def configure_logging(verbose=False):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def describe(chain: LinkedList) -> str:
    """返回链表内容、游标位置和游标数据的描述"""
    try:
        cursor = repr(chain.peek())
    except CursorDereferenceError:
        cursor = "<空>"
    return f"[{chain}] 位置={chain.position} 游标={cursor}"


class Commands:
    """链表命令行"""

    def __init__(self, verbose=False):
        configure_logging(verbose)

    def trace(self):
        """按顺序执行示例操作，并记录每一步之后的状态"""
        chain = LinkedList()
        steps = [
            ("insert a", lambda: chain.insert("a")),
            ("insert b", lambda: chain.insert("b")),
            ("insert c", lambda: chain.insert("c")),
            ("next", chain.next),
            ("remove 3", lambda: chain.remove(3)),
            ("clear", chain.clear),
            ("insert d", lambda: chain.insert("d")),
            ("insert e", lambda: chain.insert("e")),
            ("move_to 2", lambda: chain.move_to(2)),
            ("front", chain.front),
            ("end", chain.end),
        ]
        for name, step in steps:
            step()
            logger.info("%-9s -> %s", name, describe(chain))
        return describe(chain)

    def build(self, *items, move_to=None):
        """依次插入 items，可选地把游标移动到 move_to"""
        chain = LinkedList()
        for item in items:
            chain.insert(item)
        if move_to is not None:
            chain.move_to(int(move_to))
        return describe(chain)


def main():
    try:
        fire.Fire(Commands)
    except LinkedListError as e:
        logger.error(f"链表操作出错: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
