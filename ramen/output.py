"""
Output composition: turn a match into `KEY=VALUE` lines for `eval`.

One line per argument, in declaration order:
- flags always produce a line, `key=true` or `key=false`.
- value arguments produce `key=value` only when a value (or an applied default) exists.

`key` is the specification's output prefix followed by the argument identifier. Values
are written verbatim: no quoting and no escaping.
"""
import logging

logger = logging.getLogger(__name__)


def compose(specification, matches, /):
    """
    Render `matches` against the arguments of `specification`.

    Raises
    - MissingArgumentNameError: an argument has no resolvable identifier.
    """
    prefix = specification.output_prefix
    lines = []
    for argument in specification.arguments:
        key = prefix + (identifier := argument.identifier)
        if argument.is_flag:
            lines.append(f"{key}={'true' if matches.present(identifier) else 'false'}\n")
        elif (value := matches.value(identifier)) is not None:
            lines.append(f"{key}={value}\n")
        else:
            logger.debug("no value for %r, omitting it", identifier)
    return "".join(lines)


__all__ = ("compose",)
