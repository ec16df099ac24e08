"""
ramen: an easier way to define and parse arguments in shell scripts.

Usage
    eval "$( ramen "$spec" -- "$@" )"
    eval "$( ramen -- "$@" <<< "$spec" )"

The specification comes either from the SPEC argument or from stdin (when stdin is not
a terminal), never from both. Everything after the first "--" is matched against it.

Environment
- RAMEN_DEBUG: truthy value enables debug logging (same as --debug).
- NO_COLOR: disables colors in fault output.
- RAMEN_FANCY: truthy value draws faults inside panels.
"""
import argparse
import logging
import os
import sys

from . import __version__, parse
from .faults import AmbiguousInputError, RamenException, trigger
from .logs import setup
from .utils import truthy

logger = logging.getLogger("ramen")

DESCRIPTION = "An easier way to define and parse arguments in SHELL scripts."


def _parser():
    parser = argparse.ArgumentParser(prog="ramen", description=DESCRIPTION)
    parser.add_argument("spec", nargs="?", default="", metavar="SPEC",
                        help="a definition of the argument parser in YAML format")
    parser.add_argument("-d", "--debug", action="store_true", help="enable debug mode")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def split(argv, /):
    """
    Split the wrapper's own arguments from the tokens to match (after the first "--").
    """
    argv = list(argv)
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1:]
    return argv, []


def read_stdin(stream=None, /):
    """
    Read the specification piped on stdin; a terminal yields an empty string.
    """
    stream = stream or sys.stdin
    if stream is None or stream.isatty():
        return ""
    return stream.read()


def main(argv=None, /, stdin=None, stdout=None):
    own, tokens = split(sys.argv[1:] if argv is None else argv)
    options = _parser().parse_args(own)

    setup(logging.DEBUG if options.debug or truthy(os.environ.get("RAMEN_DEBUG")) else logging.WARNING)
    runtime = {
        "shell": True,
        "colorful": "NO_COLOR" not in os.environ,
        "fancy": truthy(os.environ.get("RAMEN_FANCY")),
    }

    try:
        piped = read_stdin(stdin)
        if piped.strip() and options.spec.strip():
            raise AmbiguousInputError(
                "both stdin and command-line argument were provided, please use only one of them"
            )
        text = piped if piped.strip() else options.spec
        logger.debug("matching %d token(s)", len(tokens))
        output = parse(text, tokens)
    except RamenException as fault:
        trigger(fault, **runtime)
        return 1

    (stdout or sys.stdout).write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
