"""
Ramen faults (errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure the compiler,
  the matcher, or the entry point can surface. Codes are grouped by domain.
- RamenException: base type carrying message + options, which knows how to render
  itself in a friendly, lowercased and actionable way.
- trigger(): central entry point to surface a fault (raise, or render and exit in shell mode).
- getdoc(): optional description lookup for a code from the host application; a found
  description is rendered below the hint.

Taxonomy
- document faults: the schema text is not exactly one well-formed YAML document.
- schema faults: unsupported version, missing program, anonymous argument.
- grammar faults: the compiled grammar is rejected by the matcher at construction.
- match faults: the matcher rejects the supplied tokens.
- entry-point faults: ambiguous invocation of the command-line wrapper.

Every fault is fail-fast; the first one found halts the pipeline and nothing is retried.

Integration
- Library callers catch RamenException (or a subclass) and inspect `code`/`options`.
- The command-line wrapper calls trigger(fault, shell=True, ...) so the fault is rendered
  on stderr via rich and the process exits with status 1.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping (by high-level domain)
    - document (211xx)
      • PARSE_YAML, NO_DOCS, MULTI_DOCS
    - schema (221xx)
      • INVALID_VERSION, MISSING_PROGRAM, MISSING_ARGUMENT_NAME
    - grammar / matcher (231xx)
      • GRAMMAR_CONFLICT, MATCH_FAILED
    - entry point (241xx)
      • AMBIGUOUS_INPUT

    spacing leaves room for future additions without reshuffling existing codes.
    """
    # --- document errors (21xxx) ---
    PARSE_YAML              = 21101
    NO_DOCS                 = 21102
    MULTI_DOCS              = 21103

    # --- schema errors (22xxx) ---
    INVALID_VERSION         = 22101
    MISSING_PROGRAM         = 22102
    MISSING_ARGUMENT_NAME   = 22103

    # --- grammar/matcher errors (23xxx) ---
    GRAMMAR_CONFLICT        = 23101
    MATCH_FAILED            = 23111

    # --- entry-point errors (24xxx) ---
    AMBIGUOUS_INPUT         = 24101

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class RamenException(Exception):
    """
    base type for every ramen fault.

    class attributes `code`, `title` and `hint` are the defaults of the matching
    options; any of them can be overridden per instance (or via copy.replace).
    """
    code = Unset
    title = "error"
    hint = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = coalesce(message, type(self).title)
        self.options = MappingProxyType({
            "code": type(self).code,
            "title": type(self).title,
            "hint": type(self).hint,
        } | options)
        # instance options shadow the class-level defaults
        self.code = self.options["code"]
        self.title = self.options["title"]
        self.hint = self.options["hint"]
        super().__init__(self.message)

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
            "doc": "dim #C8C8D0",  # host documentation, when provided
        } | getattr(main, "__styles__", {}))

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), styles[style])

        prog = text(getattr(main, "__prog__", self.options.get("program", "ramen")), "prog-name")
        code = self.code.normalize() if isinstance(self.code, FaultCode) else "-"

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code, "code"),
            " | ",
            text(self.title.title(), "error-title"),
            " ]"
        )
        message = text(self.message, "error-message")
        parts = [message]
        if self.hint:
            parts.append(Text.assemble(text(" → ", "hint-arrow"), text(self.hint, "hint")))
        if isinstance(self.code, FaultCode) and (doc := getdoc(self.code)):
            parts.append(text(doc, "doc"))

        if self.options.get("fancy", False):
            return Panel(Group(*parts), title=header, title_align="left")

        return Group(header, *parts)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ParseYamlError(RamenException):
    code = FaultCode.PARSE_YAML
    title = "parse yaml error"
    hint = "check the indentation and quoting of the specification"


class NoDocsError(RamenException):
    code = FaultCode.NO_DOCS
    title = "no docs"
    hint = "pass the specification as an argument or through stdin"


class MultiDocsError(RamenException):
    code = FaultCode.MULTI_DOCS
    title = "multi docs"
    hint = "remove the extra '---' separators, exactly one document is accepted"


class InvalidVersionError(RamenException):
    code = FaultCode.INVALID_VERSION
    title = "invalid version"


class MissingProgramError(RamenException):
    code = FaultCode.MISSING_PROGRAM
    title = "missing program"
    hint = "declare a non-empty 'program' at the top of the specification"


class MissingArgumentNameError(RamenException):
    code = FaultCode.MISSING_ARGUMENT_NAME
    title = "missing argument name"
    hint = "give the argument a 'name', a 'long' or a 'short' field"


class GrammarError(RamenException):
    code = FaultCode.GRAMMAR_CONFLICT
    title = "grammar conflict"
    hint = "every argument needs its own identifier and its own flags"


class MatchError(RamenException):
    code = FaultCode.MATCH_FAILED
    title = "bad arguments"


class AmbiguousInputError(RamenException):
    code = FaultCode.AMBIGUOUS_INPUT
    title = "ambiguous input"
    hint = "use either stdin or the SPEC argument, not both"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see RamenException).
    - options are merged into the fault via copy.replace(fault, **options) before triggering.
    - in shell mode, rendering happens via the stderr rich console followed by exit(1);
      otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, program, and any other context the renderer may want to show.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    when not found, returns None.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "FaultCode",
    "RamenException",
    "ParseYamlError",
    "NoDocsError",
    "MultiDocsError",
    "InvalidVersionError",
    "MissingProgramError",
    "MissingArgumentNameError",
    "GrammarError",
    "MatchError",
    "AmbiguousInputError",
    "trigger",
    "getdoc",
)
