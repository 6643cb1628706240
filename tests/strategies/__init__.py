"""Hypothesis strategies for MessageLocator property-based testing.

This package provides reusable strategies and test doubles for generating
localization test data across multiple test modules.

Usage:
    from tests.strategies import fallback_maps, templates
    from tests.strategies.localization import DictTransport

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - fallback_maps, templates
"""

from .localization import (
    LOCALE_POOL,
    BlockingTransport,
    DictTransport,
    FailingTransport,
    fallback_maps,
    fragment_keys,
    fragment_names,
    fragment_trees,
    templates,
    variable_names,
)

__all__ = [
    "LOCALE_POOL",
    "BlockingTransport",
    "DictTransport",
    "FailingTransport",
    "fallback_maps",
    "fragment_keys",
    "fragment_names",
    "fragment_trees",
    "templates",
    "variable_names",
]
