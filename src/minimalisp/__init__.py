"""minimalisp: terse list, map and set processing."""

from minimalisp.functional import *  # noqa: F401,F403
from minimalisp.functional import __all__

__version__ = "0.1.0"
