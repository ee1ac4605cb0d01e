"""
Transform combinators
=====================

Each combinator wraps the writer active in a scope and returns a new
scope bound to the wrapper. With no active writer the scope comes
back unchanged, so stages are free when nobody is listening.
"""

from .effects import TapWriter, tap
from .filter import FilterWriter, filtered
from .fold import reduced
from .mapping import MapWriter, mapped

__all__ = (
    # Combinators
    "filtered",
    "mapped",
    "reduced",
    "tap",
    # Writers
    "FilterWriter",
    "MapWriter",
    "TapWriter",
)
