"""
Reporter tests (usage line and help text layout).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from cmdline import Schema
from cmdline.reporter import help_text, usage_text


def cat():
    schema = Schema()
    schema.add_argument("file", "text file path")
    schema.add_option("--lines", 1, "-l", "line count to show", True)
    schema.add_option("--back", 0, "-b", "from the back")
    return schema


class TestUsage(TestCase):

    def testEmptySchema(self):
        self.assertEqual(usage_text(Schema(), "command"), "Usage: command")

    def testCat(self):
        self.assertEqual(usage_text(cat(), "cat"), "Usage: cat <file> [-l|--lines N1] [-b|--back]")

    def testMarkers(self):
        schema = Schema()
        schema.add_argument("count", numeric=True)
        schema.add_argument_pack("items", numeric=True)
        schema.add_option("--pair", 2)
        schema.add_option("--size", 3, "-s", numeric=True)
        self.assertEqual(
            usage_text(schema, "tool"),
            "Usage: tool <count: NUM> <items...: NUM> [--pair V1 V2] [-s|--size N1 N2 N3]",
        )

    def testPackKeepsDeclaredPosition(self):
        schema = Schema()
        schema.add_argument_pack("sources")
        schema.add_argument("target")
        self.assertEqual(usage_text(schema, "cp"), "Usage: cp <sources...> <target>")

    def testOptionsInRegistrationOrder(self):
        schema = Schema()
        for name in ("--zeta", "--alpha", "--mid"):
            schema.add_option(name)
        self.assertEqual(usage_text(schema, "x"), "Usage: x [--zeta] [--alpha] [--mid]")

    def testStable(self):
        schema = cat()
        self.assertEqual(usage_text(schema, "cat"), usage_text(schema, "cat"))


class TestHelp(TestCase):

    def testCat(self):
        expected = (
            "Usage: cat <file> [-l|--lines N1] [-b|--back]\n"
            "show text file context\n"
            "\n"
            "Argument with '...' is package, 'N' means number, 'V' means string: \n"
            + " <file>: V".ljust(20) + " text file path\n"
            + "\n"
            "Option value with 'N' means number, 'V' means string: \n"
            + " [-l|--lines N1]".ljust(26) + " line count to show\n"
            + " [-b|--back]".ljust(26) + " from the back\n"
        )
        self.assertEqual(help_text(cat(), "cat", "show text file context"), expected)

    def testWithoutNoteOrEntries(self):
        self.assertEqual(help_text(Schema(), "command"), "Usage: command\n")

    def testMultiLineNote(self):
        schema = Schema()
        schema.add_argument("a", "first\nsecond")
        width = len(" <a>: V") + 10
        self.assertEqual(
            help_text(schema, "x").splitlines(keepends=True)[-2:],
            [" <a>: V".ljust(width) + " first\n", " " * width + " second\n"],
        )

    def testEmptyNote(self):
        schema = Schema()
        schema.add_argument("a")
        self.assertTrue(help_text(schema, "x").endswith(" <a>: V".ljust(17) + "\n"))

    def testColumnCappedAtFifty(self):
        schema = Schema()
        schema.add_option("--" + "a" * 20, 6, "-b", "note")
        left = " [-b|--%s V1 V2 V3 V4 V5 V6]" % ("a" * 20)
        self.assertEqual(len(left), 46)
        self.assertEqual(help_text(schema, "x").splitlines()[-1], left.ljust(50) + " note")

    def testLongCellIsNotTruncated(self):
        schema = Schema()
        schema.add_option("--" + "a" * 30, 5, "-" + "b" * 15, "note")
        left = " [-%s|--%s V1 V2 V3 V4 V5]" % ("b" * 15, "a" * 30)
        self.assertEqual(help_text(schema, "x").splitlines()[-1], left + " note")

    def testPackAndNumericMarkers(self):
        schema = Schema()
        schema.add_argument_pack("items", "values", numeric=True)
        self.assertIn(" <items...>: N", help_text(schema, "x"))


if __name__ == "__main__":
    unittest.main()
