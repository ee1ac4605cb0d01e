"""
Scoped warning streams.

Emit non-fatal diagnostics from anywhere in a call tree without
changing function signatures: attach a writer to a Scope, pass the
scope down, and warn through it.

    collector = Collector()
    scope = attach(Scope(), collector)
    warnf(scope, "this is a warning %d", 1)
    read_all(collector)  # Ok([Message(message='this is a warning 1')])

Architecture:
- Capabilities: WarningLike, Writer, Reader (protocols)
- Collector: thread-safe FIFO buffer, both Writer and Reader
- MultiWriter: fan-out with failure aggregation
- Transform stages (mapped, filtered, reduced, tap) wrap a scope's writer
- Every operation returns a new Scope; ancestors are never mutated
"""

# Core types
from ._types import Effect, Flush, Folder, Mapper, Predicate, Reader, WarningLike, Writer

# Errors
from ._errors import (
    CLOSED,
    EXHAUSTED,
    DeliveryError,
    Exhausted,
    StreamClosedError,
    contains,
)

# Warnings
from .message import Message

# Streams
from .collector import Collector
from .reader import read_all
from .scanner import Scanner

# Writers
from . import writer
from .writer import LogWriter, MultiWriter

# Scope propagation
from .scope import Scope, attach, detach, warn, warnf

# Transform stages
from . import transform
from .transform import (
    FilterWriter,
    MapWriter,
    TapWriter,
    filtered,
    mapped,
    reduced,
    tap,
)

# Context-local scope
from . import ambient

# Configuration
from .config import Settings, get_settings

__all__ = (
    # Types
    "Effect",
    "Flush",
    "Folder",
    "Mapper",
    "Predicate",
    "Reader",
    "WarningLike",
    "Writer",
    # Errors
    "CLOSED",
    "EXHAUSTED",
    "DeliveryError",
    "Exhausted",
    "StreamClosedError",
    "contains",
    # Warnings
    "Message",
    # Streams
    "Collector",
    "read_all",
    "Scanner",
    # Writers
    "writer",
    "LogWriter",
    "MultiWriter",
    # Scope
    "Scope",
    "attach",
    "detach",
    "warn",
    "warnf",
    # Transform
    "transform",
    "FilterWriter",
    "MapWriter",
    "TapWriter",
    "filtered",
    "mapped",
    "reduced",
    "tap",
    # Ambient
    "ambient",
    # Config
    "Settings",
    "get_settings",
)
