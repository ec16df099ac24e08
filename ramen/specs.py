"""
Ramen specifications: load, validate, and compile the YAML schema of a shell script.

A specification is a single YAML document:

    version: "1.0.0"           # required, one of ramen.versions.Version
    program: upload            # required, non-empty (usage/error text only)
    about: Upload a file.      # optional
    output_prefix: myapp_      # optional, prepended to every emitted key
    args:                      # optional, ordered
      - SRC
      - DST
      - -t/--threads
      - {long: verbose, short: v, type: boolean, help: Talk more.}

Pipeline (each step short-circuits on the first fault)
1. parse the text as YAML; exactly one document is accepted
   (ParseYamlError, NoDocsError, MultiDocsError).
2. validate `version` then `program` (InvalidVersionError, MissingProgramError).
3. lower every argument, in order, into the grammar (MissingArgumentNameError,
   GrammarError).

A Specification is immutable; its argument list and its grammar are recomputed from
the document on request.
"""
import logging
from collections.abc import Mapping, Sequence

import yaml

from .arguments import Argument
from .faults import (
    InvalidVersionError,
    MissingProgramError,
    MultiDocsError,
    NoDocsError,
    ParseYamlError,
)
from .grammar import Grammar
from .utils import freeze
from .versions import Version

logger = logging.getLogger(__name__)


def load_document(text, /):
    """
    Parse `text` into exactly one YAML document.

    Raises
    - ParseYamlError: the text is not well-formed YAML (carries the parser diagnostic).
    - NoDocsError: the text holds no document at all.
    - MultiDocsError: the text holds more than one document.
    """
    if not isinstance(text, str):
        raise TypeError("load_document() argument must be a string")
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as error:
        raise ParseYamlError(f"parse yaml error: {error}", diagnostic=str(error)) from error

    if not documents:
        raise NoDocsError("no docs detected in the given yaml")
    if len(documents) > 1:
        raise MultiDocsError(
            "multi-docs detected in the given yaml, which is not supported",
            count=len(documents),
        )
    return documents[0]


class Specification:
    """
    Validated, immutable view over a specification document.

    Build it with Specification.load(text) (parse + validate) or directly from an
    already-parsed mapping with Specification(document).
    """

    def __init__(self, document, /):
        if not isinstance(document, Mapping):
            logger.debug("specification root is a %s, not a mapping", type(document).__name__)
            document = {}
        self._document = freeze(document)
        self._version = self._validate_version()
        self._program = self._validate_program()

    @classmethod
    def load(cls, text, /):
        """
        Parse and validate a specification from YAML text.
        """
        return cls(load_document(text))

    def _validate_version(self):
        if (version := Version.lookup(self._document.get("version"))) is None:
            raise InvalidVersionError(
                f"unsupported version {self._document.get('version')!r}",
                hint="declare one of the supported versions as a string: %s"
                     % ", ".join(map(repr, Version.supported())),
            )
        return version

    def _validate_program(self):
        if not isinstance(program := self._document.get("program"), str) or not program.strip():
            raise MissingProgramError("the specification does not declare a program name")
        return program.strip()

    @property
    def document(self):
        return self._document

    @property
    def version(self):
        return self._version

    @property
    def program(self):
        return self._program

    @property
    def about(self):
        if isinstance(about := self._document.get("about"), str) and (about := about.strip()):
            return about
        return None

    @property
    def output_prefix(self):
        if isinstance(prefix := self._document.get("output_prefix"), str):
            return prefix
        return ""

    @property
    def arguments(self):
        """
        Fresh Argument views over `args`, in declaration order.
        """
        if (args := self._document.get("args")) is None:
            return ()
        if not isinstance(args, Sequence) or isinstance(args, str):
            logger.warning("'args' of %r is not a list, ignoring it", self._program)
            return ()
        return tuple(map(Argument.from_node, args))

    def compile(self):
        """
        Lower the ordered arguments into a Grammar (fail-fast on the first bad argument).
        """
        arguments = self.arguments
        logger.debug("compiling %r with %d argument(s)", self._program, len(arguments))
        return Grammar(self._program, arguments, about=self.about)

    def __repr__(self):
        return f"specification(program={self._program!r}, version={self._version.value!r})"


def compile(text, /):
    """
    Parse, validate and compile YAML text in one go; returns (Specification, Grammar).
    """
    specification = Specification.load(text)
    return specification, specification.compile()


__all__ = (
    "load_document",
    "Specification",
)
