"""
Ramen grammar: the matcher side of the pipeline.

What this module provides
- Grammar: the matcher-ready description of positional slots and flags, built from an
  ordered list of arguments. Matching itself is delegated to the standard library's
  argparse; this module only decides what grammar is handed to it and how its answers
  (and its complaints) come back.
- Matches: read-only outcome of a successful match, queried per identifier.
- normalize(): token-stream framing required by the matcher.

Framing
- The matcher treats the first token as the program's own name and never matches it.
  normalize() prepends the sentinel program token (PROG) unless the stream already
  starts with it, so normalizing twice is harmless.

Lowering rules (one grammar entry per argument, in declaration order)
- flags (type: boolean) → presence switch, False when absent.
- other arguments       → value-accepting; `number` values must parse as numbers but are
                          kept verbatim.
- positional arguments  → bound by position and required.
- flagged arguments     → always optional; the declared default (if any) applies.
- select                → shown as {a,b} in usage text only.

Faults
- GrammarError: two arguments share an identifier or an option string, or a boolean
  argument has no flag to be switched on with.
- MatchError: argparse rejected the tokens (missing positional, unknown flag, ...).
"""
import argparse
import logging
from collections.abc import Mapping

from .faults import GrammarError, MatchError

logger = logging.getLogger(__name__)

PROG = "PROG"


def normalize(tokens, /):
    """
    Frame a token stream for the matcher: make sure it starts with the PROG sentinel.
    """
    tokens = list(tokens)
    if not tokens or tokens[0] != PROG:
        tokens.insert(0, PROG)
    return tokens


def number(text, /):
    """
    Converter for `type: number`: validate numeric text, keep it verbatim.
    """
    float(text)
    return text


class _Parser(argparse.ArgumentParser):
    """
    argparse parser that reports instead of printing and exiting.
    """

    def error(self, message):
        raise MatchError(message, hint=self.format_usage().strip(), program=self.prog)

    def exit(self, status=0, message=None):
        raise MatchError((message or "matcher exited").strip(), program=self.prog, status=status)


class Matches(Mapping):
    """
    Read-only identifier → value mapping produced by Grammar.match().

    - flags map to booleans (False when absent).
    - value arguments map to a string, or None when neither a value nor a default applies.
    """

    def __init__(self, values, /):
        self._values = dict(values)

    def __getitem__(self, identifier, /):
        return self._values[identifier]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def present(self, identifier, /):
        """
        Presence of a flag; unknown identifiers are absent.
        """
        return bool(self._values.get(identifier, False))

    def value(self, identifier, /):
        """
        Supplied (or defaulted) value of an argument, None when there is none.
        """
        return self._values.get(identifier)

    def __repr__(self):
        return f"matches({self._values!r})"


class Grammar:
    """
    Matcher built from a program name, an optional description and ordered arguments.

    Construction resolves every identifier (fail-fast) and may raise
    MissingArgumentNameError or GrammarError.
    """

    def __init__(self, program, /, arguments=(), about=None):
        self._program = program
        self._about = about
        self._identifiers = ()
        self._parser = _Parser(
            prog=program,
            description=about,
            add_help=False,
            allow_abbrev=False,
        )
        for argument in arguments:
            self._add(argument)

    def _add(self, argument, /):
        identifier = argument.identifier
        if identifier in self._identifiers:
            raise GrammarError(f"argument {identifier!r} is declared more than once", program=self._program)
        if argument.is_flag and argument.is_positional:
            raise GrammarError(
                f"boolean argument {identifier!r} has no short or long flag",
                program=self._program,
                hint="give the flag a marker, e.g. -q/--quiet",
            )
        if argument.is_positional and identifier.startswith("-"):
            raise GrammarError(
                f"positional argument {identifier!r} looks like a flag but is not valid shorthand",
                program=self._program,
                hint="flags are written -s/--long, --long or -s",
            )

        options = {}
        if argument.help:
            options["help"] = argument.help.replace("%", "%%")
        if argument.select:
            options["metavar"] = "{%s}" % ",".join(argument.select)

        if argument.is_flag:
            options.pop("metavar", None)
            options["action"] = "store_true"
        else:
            if argument.type == "number":
                options["type"] = number
            if not argument.is_positional:
                options["default"] = self._default(argument)

        try:
            if argument.is_positional:
                self._parser.add_argument(identifier, **options)
            else:
                self._parser.add_argument(*argument.flags, dest=identifier, **options)
        except (argparse.ArgumentError, ValueError) as error:
            raise GrammarError(str(error), program=self._program) from error

        logger.debug(
            "grammar entry %r: %s%s",
            identifier,
            "flag" if argument.is_flag else "value",
            " " + "/".join(argument.flags) if argument.flags else " (positional, required)",
        )
        self._identifiers += (identifier,)

    def _default(self, argument, /):
        # argparse converts string defaults through `type`, so a bad default would fail every match
        if (default := argument.default) is None or argument.type != "number":
            return default
        try:
            return number(default)
        except ValueError:
            logger.warning("default %r of %r is not a number, ignoring it", default, argument.identifier)
            return None

    @property
    def program(self):
        return self._program

    @property
    def about(self):
        return self._about

    @property
    def identifiers(self):
        return self._identifiers

    def match(self, tokens, /):
        """
        Match a token stream against the grammar.

        The stream is normalized first; its leading program token is never matched.

        Raises
        - MatchError: the tokens do not satisfy the grammar.
        """
        tokens = normalize(tokens)
        logger.debug("matching %d token(s) against %r", len(tokens) - 1, self._program)
        namespace = self._parser.parse_args(tokens[1:])
        return Matches((identifier, getattr(namespace, identifier)) for identifier in self._identifiers)

    def format_usage(self):
        return self._parser.format_usage()

    def format_help(self):
        return self._parser.format_help()

    def __repr__(self):
        return f"grammar(program={self._program!r}, identifiers={self._identifiers!r})"


__all__ = (
    "PROG",
    "normalize",
    "number",
    "Matches",
    "Grammar",
)
