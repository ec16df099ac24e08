r"""
Shorthand flag notation.

An argument may declare its flags compactly as a single string:

    -t/--threads    short "t", long "threads"
    --protocol      long only
    -v              short only

`<word>` (the long form) starts with a letter and continues with letters, digits or
hyphens, two characters at least. The short capture accepts a run of letters and is
truncated to its first character (`-verbose` resolves to short "v").

Anything else (`SRC`, `--x`, `-1`, `t/--threads`) contributes neither a short nor a long
flag; deciding whether such an argument is anonymous is left to the argument model.
"""
import re

SHORTHAND = re.compile(
    r"-(?P<short>[A-Za-z]+)(?:/--(?P<long>[A-Za-z][A-Za-z0-9-]+))?"
    r"|--(?P<lone>[A-Za-z][A-Za-z0-9-]+)"
)


def resolve(haystack, /, pattern=SHORTHAND):
    """
    Resolve the (short, long) flags declared by a shorthand string.

    Returns a pair of `str | None`. The function is total: non-string input and
    non-matching strings both yield (None, None).
    """
    if not isinstance(haystack, str) or not (match := pattern.fullmatch(haystack)):
        return None, None
    short = match["short"][0] if match["short"] else None
    return short, match["long"] or match["lone"]


__all__ = (
    "SHORTHAND",
    "resolve",
)
