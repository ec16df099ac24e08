__title__ = 'ramen'
__license__ = 'MIT'
__version__ = "1.0.0"

from .arguments import *
from .faults import *
from .grammar import *
from .names import *
from .output import *
from .specs import *
from .versions import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
))

version_info = VersionInfo(1, 0, 0, "final", 0)


def parse(text, tokens=(), /):
    """
    Run the whole pipeline: compile the YAML specification `text`, match `tokens`
    (already shell-split, e.g. "$@") and return the `KEY=VALUE` lines.

    Raises a RamenException subclass on the first fault.
    """
    specification = Specification.load(text)
    matches = specification.compile().match(tokens)
    return compose(specification, matches)


__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info",
    "parse",
)

# Load the exposed API of the arguments
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the grammar
__all__ += grammar.__all__  # type: ignore[attr-defined]
# Load the exposed API of the names
__all__ += names.__all__  # type: ignore[attr-defined]
# Load the exposed API of the output
__all__ += output.__all__  # type: ignore[attr-defined]
# Load the exposed API of the specs
__all__ += specs.__all__  # type: ignore[attr-defined]
# Load the exposed API of the versions
__all__ += versions.__all__  # type: ignore[attr-defined]
