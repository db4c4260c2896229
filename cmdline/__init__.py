__title__ = 'cmdline'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from . import arguments, faults, parser, schema, values
from .arguments import *
from .faults import *
from .parser import *
from .schema import *
from .values import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the parser facade
__all__ += parser.__all__
# Load the exposed API of the schema and its entries
__all__ += schema.__all__
__all__ += arguments.__all__
# Load the exposed API of the values
__all__ += values.__all__
# Load the exposed API of the faults
__all__ += faults.__all__
