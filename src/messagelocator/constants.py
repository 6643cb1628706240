"""Shared constants for MessageLocator.

This module provides centralized configuration constants used across the
analysis and localization packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Asset defaults: Where message fragments live and how they are named
- Identifier syntax: Separators used when composing and walking message IDs
- Fallback strings: Text substituted when lookups or variables are missing

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Asset defaults
    "DEFAULT_ASSETS_SRC",
    "DEFAULT_LOCALE_CODE",
    "DEFAULT_HTTP_TIMEOUT",
    "FRAGMENT_EXTENSION",
    "FRAGMENT_ENCODING",
    # Identifier syntax
    "ID_SEPARATOR",
    "SUFFIX_SEPARATOR",
    "FRAGMENT_SEPARATOR",
    # Fallback strings
    "FALLBACK_MISSING_VARIABLE",
]

# ============================================================================
# ASSET DEFAULTS
# ============================================================================

# Root that per-locale directories are resolved against when no src is given.
DEFAULT_ASSETS_SRC: str = "res/lang"

# Locale used when the caller configures nothing.
DEFAULT_LOCALE_CODE: str = "en"

# Seconds before an HTTP fragment fetch is abandoned.
DEFAULT_HTTP_TIMEOUT: float = 10.0

# Every fragment is stored as <src>/<locale>/<fragment><FRAGMENT_EXTENSION>.
FRAGMENT_EXTENSION: str = ".json"
FRAGMENT_ENCODING: str = "utf-8"

# ============================================================================
# IDENTIFIER SYNTAX
# ============================================================================

# "nav.home.title" walks three levels of the per-locale document.
ID_SEPARATOR: str = "."

# Suffix arguments extend the last identifier segment: greeting -> greeting_male.
SUFFIX_SEPARATOR: str = "_"

# Fragment "errors/http" is merged at document["errors"]["http"].
FRAGMENT_SEPARATOR: str = "/"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Substituted for a $name token with no matching variable.
FALLBACK_MISSING_VARIABLE: str = "undefined"
