"""
Shorthand resolution tests.

Scope
- Validate the -s/--long, --long and -s forms.
- Validate truncation of multi-character short captures.
- Validate that malformed shorthand (and non-strings) resolve to nothing, never raise.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import re
import unittest
from unittest import TestCase

from ramen import SHORTHAND, resolve


class TestResolve(TestCase):
    """Behavioral tests for resolve()."""

    def testShortAndLong(self):
        self.assertEqual(resolve("-t/--threads"), ("t", "threads"))
        self.assertEqual(resolve("-v/--verbose"), ("v", "verbose"))

    def testLongOnly(self):
        self.assertEqual(resolve("--protocol"), (None, "protocol"))

    def testShortOnly(self):
        self.assertEqual(resolve("-v"), ("v", None))

    def testShortCaptureTruncated(self):
        self.assertEqual(resolve("-verbose"), ("v", None))
        self.assertEqual(resolve("-xyz/--extra"), ("x", "extra"))

    def testLongAcceptsDigitsAndHyphens(self):
        self.assertEqual(resolve("--dry-run"), (None, "dry-run"))
        self.assertEqual(resolve("-n/--ipv6"), ("n", "ipv6"))

    def testLongMinimumLength(self):
        self.assertEqual(resolve("--x"), (None, None))
        self.assertEqual(resolve("-t/--x"), (None, None))

    def testLongMustStartWithLetter(self):
        self.assertEqual(resolve("--1st"), (None, None))

    def testNonMatchingStrings(self):
        for haystack in ("SRC", "", "-", "--", "-1", "t/--threads", "-t/threads", "-t--threads", "--threads/-t"):
            with self.subTest(haystack=haystack):
                self.assertEqual(resolve(haystack), (None, None))

    def testNonStringIsTotal(self):
        for haystack in (None, 42, ["-v"], {"short": "v"}):
            with self.subTest(haystack=haystack):
                self.assertEqual(resolve(haystack), (None, None))

    def testPatternPassedByReference(self):
        pattern = re.compile(r"--(?P<lone>[a-z]+)|-(?P<short>[a-z])(?P<long>)")
        self.assertEqual(resolve("--only", pattern), (None, "only"))
        self.assertEqual(resolve("-Z/--zeta", pattern), (None, None))

    def testDefaultPatternIsModuleConstant(self):
        self.assertIs(resolve.__defaults__[0], SHORTHAND)


if __name__ == "__main__":
    unittest.main()
