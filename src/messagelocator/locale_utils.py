"""Locale utilities for BCP-47 locale identifiers.

Centralizes locale parsing and normalization used throughout the codebase.
Every locale code that enters the locator (supported list, default locale,
fallback map, update_locale arguments) is normalized here once, so that
"pt-BR", "pt_BR" and "pt_br" all address the same stored document.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from messagelocator.diagnostics import ErrorTemplate, InvalidLocaleError

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleIdentifier",
    "get_babel_locale",
    "normalize_locale",
    "parse_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """Normalized, immutable locale key.

    Equality and hashing use only the normalized BCP-47 tag, so identifiers
    parsed from different spellings of the same locale are interchangeable
    as dictionary keys.

    Attributes:
        tag: Normalized BCP-47 tag (e.g., 'pt-BR', 'zh-Hans-CN')
        babel_locale: Parsed Babel Locale (excluded from equality)

    Example:
        >>> pt = parse_locale("pt_BR")
        >>> pt.tag
        'pt-BR'
        >>> pt == parse_locale("pt-BR")
        True
    """

    tag: str
    babel_locale: Locale = field(compare=False, repr=False)

    def __str__(self) -> str:
        """Return the normalized tag."""
        return self.tag

    @property
    def language(self) -> str:
        """Language subtag (e.g., 'pt')."""
        return self.babel_locale.language

    @property
    def territory(self) -> str | None:
        """Territory subtag (e.g., 'BR'), or None for language-only locales."""
        return self.babel_locale.territory

    @property
    def display_name(self) -> str:
        """Human-readable name in the locale's own language.

        Falls back to the tag when CLDR has no display data.
        """
        return self.babel_locale.get_display_name() or self.tag


def parse_locale(locale_code: str) -> LocaleIdentifier:
    """Parse a locale code into a LocaleIdentifier.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        LocaleIdentifier with normalized tag

    Raises:
        InvalidLocaleError: If the code is malformed or unknown to CLDR

    Example:
        >>> parse_locale("en-us").tag
        'en-US'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    stripped = locale_code.strip()
    if stripped != locale_code or not stripped:
        raise InvalidLocaleError(
            ErrorTemplate.invalid_locale(locale_code, "empty or padded with whitespace")
        )
    try:
        babel_locale = get_babel_locale(locale_code)
    except (ValueError, UnknownLocaleError) as e:
        raise InvalidLocaleError(ErrorTemplate.invalid_locale(locale_code, str(e))) from e
    return LocaleIdentifier(tag=str(babel_locale).replace("_", "-"), babel_locale=babel_locale)
