# python
"""
Utils module behavioral tests (sentinel, mirror, ordinal).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from procargs.utils import Unset, UnsetType, mirror, ordinal


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalseyAndPrintable(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testNotSubclassable(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})


class TestMirror(TestCase):
    """Behavioral tests for mirror()."""

    def testReadOnlyCopies(self):
        class Holder:
            items = mirror("items")

            def __init__(self):
                self._items = {"a": [1]}

        holder = Holder()
        holder.items["a"].append(2)
        self.assertEqual(holder.items, {"a": [1]})
        with self.assertRaises(AttributeError):
            holder.items = {}

    def testCopiesKeepContainerType(self):
        class Holder:
            items = mirror("items")

            def __init__(self, items):
                self._items = items

        self.assertEqual(Holder(("a", ["b"])).items, ("a", ["b"]))
        self.assertIsInstance(Holder(("a",)).items, tuple)
        self.assertIsInstance(Holder(frozenset({"a"})).items, frozenset)
        self.assertIsInstance(Holder({"a"}).items, set)

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(1)


class TestOrdinal(TestCase):
    """Behavioral tests for ordinal()."""

    def testWords(self):
        self.assertEqual(ordinal(1), "first")
        self.assertEqual(ordinal(2), "second")
        self.assertEqual(ordinal(10), "tenth")

    def testNumeric(self):
        expected = {11: "11th", 12: "12th", 13: "13th", 21: "21st", 22: "22nd", 23: "23rd", 24: "24th",
                    101: "101st", 111: "111th", 112: "112th", 102: "102nd"}
        for number, label in expected.items():
            with self.subTest(number=number):
                self.assertEqual(ordinal(number), label)

    def testInvalid(self):
        with self.assertRaises(TypeError):
            ordinal(True)
        with self.assertRaises(TypeError):
            ordinal("1")
        with self.assertRaises(ValueError):
            ordinal(0)


if __name__ == "__main__":
    unittest.main()
