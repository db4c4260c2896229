"""
Value handles tests (Single, Multi, INVALID).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from decimal import Decimal
from unittest import TestCase

from cmdline import INVALID, Multi, Single


class TestSingle(TestCase):

    def testValidity(self):
        self.assertTrue(Single("x"))
        self.assertFalse(Single(""))
        self.assertFalse(INVALID)

    def testConversions(self):
        value = Single("42")
        self.assertEqual(value.toint(), 42)
        self.assertEqual(int(value), 42)
        self.assertEqual(value.tofloat(), 42.0)
        self.assertEqual(float(value), 42.0)
        self.assertEqual(value.todecimal(), Decimal("42"))
        self.assertEqual(value.tostring(), "42")
        self.assertEqual(str(value), "42")

    def testFloatAndDecimal(self):
        value = Single("2.5")
        self.assertEqual(value.tofloat(), 2.5)
        self.assertEqual(value.todecimal(), Decimal("2.5"))
        with self.assertRaises(ValueError):
            value.toint()

    def testConversionFailures(self):
        for method in ("toint", "tofloat", "todecimal"):
            with self.subTest(method=method):
                with self.assertRaises(ValueError):
                    getattr(Single("abc"), method)()
                with self.assertRaises(ValueError):
                    getattr(INVALID, method)()

    def testNoSubValues(self):
        value = Single("x")
        self.assertEqual(len(value), 0)
        self.assertEqual(value.size, 0)
        self.assertIs(value[0], INVALID)
        self.assertEqual(list(value), [])

    def testReadOnly(self):
        with self.assertRaises(AttributeError):
            Single("x").text = "y"

    def testEquality(self):
        self.assertEqual(Single("x"), Single("x"))
        self.assertNotEqual(Single("x"), Single("y"))
        self.assertEqual(hash(Single("x")), hash(Single("x")))


class TestMulti(TestCase):

    def testAlwaysTruthy(self):
        self.assertTrue(Multi())
        self.assertTrue(Multi(["a"]))

    def testIndexing(self):
        value = Multi(["1", "2"])
        self.assertEqual(len(value), 2)
        self.assertEqual(value.size, 2)
        self.assertEqual(value[0], Single("1"))
        self.assertEqual(value[1].toint(), 2)
        self.assertIs(value[2], INVALID)
        self.assertIs(value[-1], INVALID)
        self.assertEqual([str(item) for item in value], ["1", "2"])
        self.assertEqual(value.values, ("1", "2"))

    def testConvertsFirstElement(self):
        value = Multi(["3", "x"])
        self.assertEqual(int(value), 3)
        self.assertEqual(float(value), 3.0)
        self.assertEqual(str(value), "3")

    def testEmptyConversionFails(self):
        value = Multi()
        self.assertEqual(str(value), "")
        with self.assertRaises(ValueError):
            int(value)

    def testEquality(self):
        self.assertEqual(Multi(["1", "2"]), Multi(("1", "2")))
        self.assertNotEqual(Multi(["1"]), Single("1"))

    def testItemsMustBeStrings(self):
        with self.assertRaises(TypeError):
            Multi([1])
        with self.assertRaises(TypeError):
            Multi(["a"])["0"]


if __name__ == "__main__":
    unittest.main()
