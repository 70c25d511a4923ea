import unittest
from unittest import mock

from linked_list import IndexOutOfRangeError, LinkedList
from linked_list.__main__ import Commands, describe, main


class TestDescribe(unittest.TestCase):
    def test_describe_positioned_cursor(self):
        chain = LinkedList()
        chain.insert("a")
        chain.insert("b")
        self.assertEqual(describe(chain), "[b -> a] 位置=1 游标='b'")

    def test_describe_empty_list(self):
        self.assertEqual(describe(LinkedList()), "[] 位置=1 游标=<空>")


class TestCommands(unittest.TestCase):
    def test_trace_logs_every_step(self):
        with self.assertLogs("linked_list.__main__", level="INFO") as logs:
            result = Commands().trace()
        self.assertEqual(result, "[e -> d] 位置=2 游标='d'")
        self.assertEqual(len(logs.records), 11)
        self.assertIn("[c -> b] 位置=2 游标='b'", logs.output[4])
        self.assertIn("[] 位置=1 游标=<空>", logs.output[5])

    def test_build(self):
        self.assertEqual(Commands().build("a", "b", "c"), "[c -> b -> a] 位置=1 游标='c'")

    def test_build_with_move_to(self):
        self.assertEqual(Commands().build("a", "b", "c", move_to=3), "[c -> b -> a] 位置=3 游标='a'")

    def test_build_out_of_range(self):
        with self.assertRaises(IndexOutOfRangeError):
            Commands().build("a", move_to=2)


class TestMain(unittest.TestCase):
    def test_main_exits_on_list_error(self):
        argv = ["linked-list", "build", "a", "--move_to", "5"]
        with mock.patch("sys.argv", argv):
            with self.assertLogs("linked_list.__main__", level="ERROR"):
                with self.assertRaises(SystemExit) as ctx:
                    main()
        self.assertEqual(ctx.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
