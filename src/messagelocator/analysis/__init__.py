"""Graph analysis utilities for locale fallback configuration.

Provides the fallback graph with closure and resolution-order traversal,
and cycle detection for reporting misconfigured fallback maps.

Python 3.13+.
"""

from .graph import FallbackGraph, detect_cycles

__all__ = [
    "FallbackGraph",
    "detect_cycles",
]
