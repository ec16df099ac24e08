"""
Supported specification versions.

A specification declares the schema revision it was written against in its top-level
`version` key. Only the revisions enumerated here are accepted; anything else (including
non-string YAML scalars such as an unquoted `1.0`, which YAML reads as a float) is
rejected by the compiler.
"""
from enum import StrEnum


class Version(StrEnum):
    V1_0_0 = "1.0.0"

    @classmethod
    def supported(cls):
        """
        Return the supported version strings, oldest first.
        """
        return tuple(version.value for version in cls)

    @classmethod
    def lookup(cls, value, /):
        """
        Return the Version matching `value`, or None when it is not a supported version string.
        """
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


__all__ = ("Version",)
