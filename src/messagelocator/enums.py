"""Enumerations for MessageLocator type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class LoadVia(StrEnum):
    """Transport used to fetch message fragments.

    StrEnum provides automatic string conversion: str(LoadVia.HTTP) == "http"
    """

    FILE_SYSTEM = "file_system"
    """Read fragments from the local filesystem."""

    HTTP = "http"
    """Fetch fragments with an HTTP(S) GET of the same logical path."""


class LocatorState(StrEnum):
    """Lifecycle state of a MessageLocator.

    There is no failed state: a failed load returns the locator to the
    state it held before the attempt.
    """

    UNLOADED = "unloaded"
    """No load has ever committed."""

    LOADING = "loading"
    """A load is fetching and merging fragments."""

    LOADED = "loaded"
    """A locale and its fallback closure are committed."""


class LoadStatus(StrEnum):
    """Outcome of a single fragment load attempt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"


__all__ = [
    "LoadStatus",
    "LoadVia",
    "LocatorState",
]
