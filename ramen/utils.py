"""
Ramen utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None
    (a schema may legitimately carry `default: null` or an empty help string).
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- freeze(document)
  • Recursive counterpart of mirror's freezing, used for whole parsed documents.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr) as a frozen
    view (tuple / MappingProxyType / frozenset) so specifications stay immutable.

- truthy(text)
  • Interpret environment-style switches ("1", "yes", "on", "true").

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
"""
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Singleton sentinel representing an "unset" value.

    Behavior
    - truthiness: bool(Unset) is False.
    - identity: Unset is a process-wide singleton (see __new__).
    - display: repr(Unset) -> "Unset".
    - final: subclassing is forbidden.
    """

    def __or__(self, other, /):
        """
        Support UnsetType | T in isinstance checks and annotations.
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support T | UnsetType in isinstance checks and annotations.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "", or [] are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def _freeze(object):
    """
    Shallow-freeze container values for public exposure.

    - Sequence (non-string) → tuple
    - Mapping               → MappingProxyType
    - Set                   → frozenset
    - anything else         → returned as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return tuple(object)
    if isinstance(object, Mapping):
        return MappingProxyType(object)
    if isinstance(object, Set):
        return frozenset(object)
    return object


def freeze(object, /):
    """
    Deep-freeze a parsed document: like _freeze, applied at every nesting level.

    Mappings are copied before being wrapped, so later changes to the source
    never show through the frozen view.
    """
    if isinstance(object, Mapping):
        return MappingProxyType({key: freeze(value) for key, value in object.items()})
    if isinstance(object, Sequence) and not isinstance(object, str | bytes):
        return tuple(map(freeze, object))
    if isinstance(object, Set):
        return frozenset(map(freeze, object))
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute "_{name}".

    Container values are returned frozen (see _freeze) to keep the owning object
    immutable through its public API.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _freeze(getattr(self, "_" + name))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


def truthy(text, /):
    """
    Interpret an environment-style switch; Unset, None and unknown words are False.
    """
    if not isinstance(text, str):
        return False
    return text.strip().lower() in ("1", "y", "yes", "on", "true")


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "freeze",
    "mirror",
    "truthy",
)
