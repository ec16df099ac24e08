"""
Tests for the internal helpers and the version table.

This module verifies:
- Unset singleton identity, falsiness, representation and finality.
- coalesce() preserving falsey values.
- mirror() exposing frozen views.
- freeze() freezing nested documents.
- truthy() for environment switches.
- Version lookup.
"""
import unittest
from unittest import TestCase

from ramen import Version
from ramen.utils import Unset, UnsetType, coalesce, freeze, mirror, truthy


class UnsetTest(TestCase):

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalsyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testFinal(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testUnion(self):
        self.assertIsInstance("x", str | Unset)
        self.assertIsInstance(Unset, str | Unset)


class HelpersTest(TestCase):

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        for value in (None, 0, "", []):
            with self.subTest(value=value):
                self.assertIs(coalesce(value, "fallback"), value)

    def testMirror(self):
        class Holder:
            items = mirror("items")
            table = mirror("table")
            tags = mirror("tags")

            def __init__(self):
                self._items = [1, 2]
                self._table = {"a": 1}
                self._tags = {"x"}

        holder = Holder()
        self.assertEqual(holder.items, (1, 2))
        with self.assertRaises(TypeError):
            holder.table["b"] = 2
        self.assertIsInstance(holder.tags, frozenset)

    def testFreezeIsRecursive(self):
        source = {"args": ["SRC", {"long": "tags", "select": ["a", "b"]}], "about": "text"}
        frozen = freeze(source)
        self.assertEqual(frozen["args"][0], "SRC")
        self.assertEqual(frozen["args"][1]["select"], ("a", "b"))
        self.assertEqual(frozen["about"], "text")
        with self.assertRaises(TypeError):
            frozen["args"][1]["long"] = "labels"
        source["args"][1]["long"] = "labels"
        self.assertEqual(frozen["args"][1]["long"], "tags")

    def testMirrorRejectsNonString(self):
        with self.assertRaises(TypeError):
            mirror(1)

    def testTruthy(self):
        for text in ("1", "yes", "ON", " true "):
            with self.subTest(text=text):
                self.assertTrue(truthy(text))
        for text in ("", "0", "no", None, Unset):
            with self.subTest(text=text):
                self.assertFalse(truthy(text))


class VersionTest(TestCase):

    def testLookup(self):
        self.assertIs(Version.lookup("1.0.0"), Version.V1_0_0)
        self.assertEqual(str(Version.V1_0_0), "1.0.0")
        for value in ("1.0", "", None, 1.0, ["1.0.0"]):
            with self.subTest(value=value):
                self.assertIsNone(Version.lookup(value))


if __name__ == "__main__":
    unittest.main()
