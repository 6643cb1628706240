"""MessageLocator - locale fallback resolution for JSON message catalogs.

Resolves dotted message identifiers across a set of locales. A locale is
loaded together with the closure of its fallback locales from named JSON
fragments (local files or HTTP), merged into one document per locale, and
committed atomically. Lookups walk the fallback chain depth-first and
expand ``$name`` tokens with caller-supplied variables.

Public API:
    MessageLocator - Locale loading and message lookup
    LocatorConfig - Locales, fallbacks, and asset options
    AssetOptions - Where and how fragments are loaded
    LoadVia - Transport kind (FILE_SYSTEM or HTTP)
    LocaleIdentifier - Normalized locale key
    parse_locale - Parse a locale code into a LocaleIdentifier

Exceptions:
    LocatorError - Base exception class
    ConfigurationError - Unsupported locales and other configuration mistakes
    FragmentError - Fragment fetch/parse failures (reported by load() as False)

Submodules:
    messagelocator.localization - Loader, transports, arguments, interpolation
    messagelocator.analysis - Fallback graph and cycle detection
    messagelocator.diagnostics - Error types and diagnostic codes
"""

from .diagnostics import (
    ConfigurationError,
    FragmentError,
    LocatorError,
    UnsupportedLocaleError,
)
from .enums import LoadVia
from .locale_utils import LocaleIdentifier, parse_locale
from .localization import AssetOptions, LocatorConfig, MessageLocator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("messagelocator")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AssetOptions",
    "ConfigurationError",
    "FragmentError",
    "LoadVia",
    "LocaleIdentifier",
    "LocatorConfig",
    "LocatorError",
    "MessageLocator",
    "UnsupportedLocaleError",
    "__version__",
    "parse_locale",
]
