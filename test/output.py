"""
Output composition and end-to-end pipeline tests.

Scope
- Validate the KEY=VALUE lines: order, flag totality, omission of absent values,
  output prefix, verbatim values.
- Validate ramen.parse() as the single entry point of the pipeline.

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import textwrap
import unittest
from unittest import TestCase

from ramen import MatchError, Matches, MissingArgumentNameError, Specification, compose, parse


def spec(text):
    return textwrap.dedent(text).strip() + "\n"


UPLOAD = spec("""
    version: "1.0.0"
    program: upload
    args:
      - SRC
      - DST
      - name: verbose
        short: v
        long: verbose
        type: boolean
      - -t/--threads
      - --protocol
""")

TOKENS = ["/path/to/src", "/path/to/dst", "-v", "--threads", "8", "--protocol", "s3"]


class TestParse(TestCase):
    """End-to-end behavior of parse()."""

    def testUpload(self):
        self.assertEqual(parse(UPLOAD, TOKENS), (
            "SRC=/path/to/src\n"
            "DST=/path/to/dst\n"
            "verbose=true\n"
            "threads=8\n"
            "protocol=s3\n"
        ))

    def testFlagOmitted(self):
        output = parse(UPLOAD, ["/path/to/src", "/path/to/dst"])
        self.assertEqual(output, "SRC=/path/to/src\nDST=/path/to/dst\nverbose=false\n")

    def testOutputPrefix(self):
        output = parse(UPLOAD + "output_prefix: myapp_\n", TOKENS)
        self.assertEqual(output.splitlines(), [
            "myapp_SRC=/path/to/src",
            "myapp_DST=/path/to/dst",
            "myapp_verbose=true",
            "myapp_threads=8",
            "myapp_protocol=s3",
        ])

    def testStringTypedShortFlagTakesValue(self):
        text = spec("""
            version: "1.0.0"
            program: upload
            args: [SRC, -v/--verbose]
        """)
        self.assertEqual(parse(text, ["a", "-v", "loud"]), "SRC=a\nverbose=loud\n")
        with self.assertRaises(MatchError):
            parse(text, ["a", "-v"])

    def testDefaults(self):
        text = spec("""
            version: "1.0.0"
            program: upload
            args:
              - {long: threads, type: number, default: 4}
              - {long: color, default: true}
        """)
        self.assertEqual(parse(text), "threads=4\ncolor=true\n")
        self.assertEqual(parse(text, ["--threads", "16"]), "threads=16\ncolor=true\n")

    def testValuesAreNotQuoted(self):
        text = spec("""
            version: "1.0.0"
            program: say
            args: [MESSAGE]
        """)
        self.assertEqual(parse(text, ["hello world; ls"]), "MESSAGE=hello world; ls\n")

    def testNoArguments(self):
        self.assertEqual(parse('version: "1.0.0"\nprogram: noop\n'), "")

    def testMissingRequired(self):
        with self.assertRaises(MatchError):
            parse(UPLOAD, ["/path/to/src"])


class TestCompose(TestCase):
    """compose() against hand-built matches."""

    def testEmptyMatchesStillEmitFlags(self):
        specification = Specification.load(UPLOAD)
        self.assertEqual(compose(specification, Matches(())), "verbose=false\n")

    def testAnonymousArgumentFails(self):
        specification = Specification({
            "version": "1.0.0",
            "program": "upload",
            "args": ["SRC", {"help": "anonymous"}],
        })
        with self.assertRaises(MissingArgumentNameError):
            compose(specification, Matches({"SRC": "a"}.items()))

    def testDeclarationOrderNotMatchOrder(self):
        specification = Specification.load(UPLOAD)
        matches = Matches([("protocol", "ftp"), ("SRC", "a"), ("DST", "b")])
        self.assertEqual(compose(specification, matches), "SRC=a\nDST=b\nverbose=false\nprotocol=ftp\n")


if __name__ == "__main__":
    unittest.main()
