"""
Writers
=======

Sinks that are not tied to a scope stage:
- MultiWriter: fan-out to several writers with failure aggregation
- LogWriter: forwards warnings to the logging module
"""

from .log import LogWriter
from .multi import MultiWriter

__all__ = (
    "LogWriter",
    "MultiWriter",
)
