"""
Utility helpers tests (mirror, rename, name grammar, numeric gate).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from types import MappingProxyType
from unittest import TestCase

from cmdline.utils import mirror, rename, isidentifier, isinteger


class TestMirror(TestCase):

    def testContainersAreFrozen(self):
        class Holder:
            items = mirror("items")
            table = mirror("table")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        with self.assertRaises(TypeError):
            holder.table["b"] = 2  # NOQA
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testRename(self):
        @rename("task")
        def other():
            pass

        self.assertEqual(other.__qualname__, "task")
        self.assertEqual(other.__name__, "task")
        with self.assertRaises(TypeError):
            rename(None)


class TestIdentifier(TestCase):

    def testAccepted(self):
        for name in ("a", "file", "file_2", "X1_y", "lines"):
            with self.subTest(name=name):
                self.assertTrue(isidentifier(name))

    def testRejected(self):
        for name in ("", "2file", "_file", "a-b", "a b", "--lines", "é"):
            with self.subTest(name=name):
                self.assertFalse(isidentifier(name))

    def testRequiresString(self):
        with self.assertRaises(TypeError):
            isidentifier(3)


class TestInteger(TestCase):

    def testWholeTokenWithoutRangeLimit(self):
        self.assertTrue(isinteger("99999999999999999999"))
        self.assertFalse(isinteger("12.5"))
        self.assertFalse(isinteger("3abc"))

    def testAccepted(self):
        for token in ("0", "3", "-12", "+7", " 42 ", "0012"):
            with self.subTest(token=token):
                self.assertTrue(isinteger(token))

    def testRejected(self):
        for token in ("", "abc", "3abc", "1.5", "1_000", "-", " "):
            with self.subTest(token=token):
                self.assertFalse(isinteger(token))


if __name__ == "__main__":
    unittest.main()
