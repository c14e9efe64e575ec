"""rangemath - generic range math over ordered types.

Provides an immutable Range[T] value with per-bound inclusivity and the
operations contains, contains_range, intersects and union, usable on any
object shaped like a range.
"""

from __future__ import annotations

from rangemath.config import LoggingConfig, configure_logging, load_config
from rangemath.inclusivity import DEFAULT_INCLUSIVITY, Inclusivity
from rangemath.operations import contains, contains_range, intersects, union
from rangemath.protocols import RangeLike, SupportsRichComparison
from rangemath.range import Range

__version__ = "0.1.0"

__all__ = [
    # Model
    "Range",
    "Inclusivity",
    "DEFAULT_INCLUSIVITY",
    # Protocols
    "RangeLike",
    "SupportsRichComparison",
    # Operations
    "contains",
    "contains_range",
    "intersects",
    "union",
    # Configuration
    "LoggingConfig",
    "load_config",
    "configure_logging",
]
