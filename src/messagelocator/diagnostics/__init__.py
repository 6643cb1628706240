"""Diagnostic system for MessageLocator errors.

Provides structured error diagnostics with codes, hints, and the exception
taxonomy used by the locator and its fragment loader.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    DuplicateLocaleError,
    FragmentError,
    FragmentFetchError,
    FragmentNotFoundError,
    FragmentParseError,
    InvalidLocaleError,
    LocatorError,
    MissingPathComponentError,
    UnsupportedLocaleError,
)
from .templates import ErrorTemplate

__all__ = [
    "ConfigurationError",
    "Diagnostic",
    "DiagnosticCode",
    "DuplicateLocaleError",
    "ErrorTemplate",
    "FragmentError",
    "FragmentFetchError",
    "FragmentNotFoundError",
    "FragmentParseError",
    "InvalidLocaleError",
    "LocatorError",
    "MissingPathComponentError",
    "UnsupportedLocaleError",
]
