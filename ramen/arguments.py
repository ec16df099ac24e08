r"""
Ramen argument entries.

Overview
- Argument: the typed view over one entry of a specification's `args` list.
  An entry comes in one of two shapes, resolved once at construction:
  • bare: a single string, e.g. "SRC" or "-t/--threads". The whole string is both the
    identifier candidate and, when it follows the shorthand notation, the source of
    the short/long flags.
  • mapping: explicit fields `name`, `short`, `long`, `type`, `default`, `help`, `select`.

Derived attributes
- short / long: resolved through ramen.names from the explicit field first
  (the leading "-" / "--" may be omitted there), then from the bare string.
- identifier: `name`, else `long`, else `short`, else the bare string. When none of
  them is available the argument is anonymous and MissingArgumentNameError is raised.
- is_flag: the entry is a presence-only switch (`type: boolean`).
- is_positional: neither a short nor a long flag resolves.

Degradation rules
- Only `identifier` can fail. Malformed optional fields fall back to neutral values
  (unknown type → "string", non-string help → None, non-list select → ()), so a sloppy
  optional field never blocks compilation.

Quick example:
    >>> Argument("-t/--threads").identifier
    'threads'
    >>> Argument("SRC", name="DEST").identifier
    'DEST'
    >>> Argument.from_node({"long": "verbose", "type": "boolean"}).is_flag
    True
"""
import functools
import logging
import operator
from collections.abc import Mapping, Sequence

from .faults import MissingArgumentNameError
from .names import SHORTHAND, resolve
from .utils import Unset, coalesce, mirror

logger = logging.getLogger(__name__)

TYPES = ("string", "number", "boolean")


def _scalar(object, /):
    """
    Render a YAML scalar the way a shell script would read it back.
    """
    if isinstance(object, bool):
        return "true" if object else "false"
    if isinstance(object, str | int | float):
        return str(object)
    return None


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize the fields of an argument entry in place.

    - bare: must be a string or Unset (programming error otherwise).
    - name: non-empty string after trimming, otherwise treated as absent.
    - short/long: kept as given when they are strings, otherwise absent; resolution
      through the shorthand notation happens on access.
    - type: one of TYPES, otherwise "string".
    - default: scalars are rendered as text ("true"/"false" for booleans), anything else is None.
    - help: non-empty string after trimming, otherwise None.
    - select: list of scalars rendered as text, otherwise empty.
    """
    if not isinstance(metadata["bare"], str | Unset):
        raise TypeError(f"{cls.__name__.lower()} bare form must be a string")

    if not isinstance(name := metadata["name"], str) or not (name := name.strip()):
        name = Unset
    metadata["name"] = name

    for field in ("short", "long"):
        if not isinstance(value := metadata[field], str) or not (value := value.strip()):
            value = Unset
        metadata[field] = value

    if (type := metadata["type"]) not in TYPES:
        logger.warning("unknown argument type %r, falling back to 'string'", type)
        type = "string"
    metadata["type"] = type

    metadata["default"] = _scalar(coalesce(metadata["default"]))

    if not isinstance(help := metadata["help"], str) or not (help := help.strip()):
        help = None
    metadata["help"] = help

    select = metadata["select"]
    if not isinstance(select, Sequence) or isinstance(select, str):
        select = ()
    metadata["select"] = tuple(choice for choice in map(_scalar, select) if choice is not None)


class Argument:
    """
    Immutable view over one schema entry (bare string or mapping).

    Instances own no mutable state; a specification builds fresh ones every time its
    argument list is requested.
    """

    __introspectable__ = (
        "bare",
        "name",
        "type",
        "default",
        "help",
        "select",
    )

    bare = mirror("bare")
    name = mirror("name")
    type = mirror("type")
    default = mirror("default")
    help = mirror("help")
    select = mirror("select")

    def __new__(
            cls,
            bare=Unset,
            /,
            name=Unset,
            short=Unset,
            long=Unset,
            type="string",
            default=Unset,
            help=Unset,
            select=(),
    ):
        """
        Construct an argument entry.

        Parameters
        - bare: Unset | str
          The bare form ("SRC", "-t/--threads"). Positional-only; entries built from a
          mapping leave it Unset.
        - name, short, long: Unset | str
          Explicit identity fields; they always win over values derived from `bare`.
        - type: "string" | "number" | "boolean"
        - default: scalar used when a value argument is not supplied.
        - help: short description shown in usage text.
        - select: ordered allowed values (displayed, never enforced).
        """
        metadata = {
            "bare": bare,
            "name": name,
            "short": short,
            "long": long,
            "type": type,
            "default": default,
            "help": help,
            "select": select,
        }
        _sanitize_metadata(cls, metadata)

        self = super().__new__(cls)
        for field, object in metadata.items():
            setattr(self, "_" + field, object)
        return self

    @classmethod
    def from_node(cls, node, /):
        """
        Build an entry from a parsed YAML node.

        - str     → bare form
        - Mapping → mapping form (unknown keys are ignored)
        - other   → anonymous entry (its identifier cannot be resolved)
        """
        if isinstance(node, str):
            return cls(node)
        if isinstance(node, Mapping):
            fields = {}
            for key, value in node.items():
                if key not in ("name", "short", "long", "type", "default", "help", "select"):
                    logger.debug("ignoring unknown argument key %r", key)
                    continue
                fields[key] = value
            return cls(**fields)
        logger.debug("argument node %r is neither a string nor a mapping", node)
        return cls()

    @property
    def short(self):
        """
        Single-character short flag (without "-"), or None.
        """
        if (short := self._short) is not Unset:
            short, _ = resolve(short if short.startswith("-") else "-" + short, SHORTHAND)
            if short:
                return short
        short, _ = resolve(coalesce(self._bare), SHORTHAND)
        return short

    @property
    def long(self):
        """
        Long flag (without "--"), or None.
        """
        if (long := self._long) is not Unset:
            _, long = resolve(long if long.startswith("--") else "--" + long, SHORTHAND)
            if long:
                return long
        _, long = resolve(coalesce(self._bare), SHORTHAND)
        return long

    @property
    def identifier(self):
        """
        Stable identifier: name > long > short > bare string.

        Raises
        - MissingArgumentNameError: when the entry is anonymous.
        """
        for candidate in (self._name, self.long, self.short, self._bare):
            if candidate:
                return candidate
        raise MissingArgumentNameError(
            "argument has no name, no bare string, and no short or long flag",
            argument=repr(self),
        )

    @property
    def flags(self):
        """
        Option strings for the matcher, short first (e.g. ("-t", "--threads")).
        """
        flags = ()
        if short := self.short:
            flags += ("-" + short,)
        if long := self.long:
            flags += ("--" + long,)
        return flags

    @property
    def is_flag(self):
        return self._type == "boolean"

    @property
    def is_positional(self):
        return not self.flags

    def __repr__(self):
        return f"argument({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


__all__ = (
    "TYPES",
    "Argument",
)
