"""Configuration for MessageLocator.

Provides two frozen dataclasses: AssetOptions (where and how fragments are
loaded) and LocatorConfig (locales, fallbacks, and assets). Both are
validated at construction and immutable afterwards.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from messagelocator.constants import (
    DEFAULT_ASSETS_SRC,
    DEFAULT_HTTP_TIMEOUT,
    DEFAULT_LOCALE_CODE,
    FRAGMENT_SEPARATOR,
)
from messagelocator.enums import LoadVia
from messagelocator.localization.types import FragmentName, LocaleCode

__all__ = ["AssetOptions", "LocatorConfig"]


def _validate_fragment_name(name: FragmentName) -> None:
    """Validate a fragment name.

    Raises:
        ValueError: If name is empty, padded with whitespace, absolute,
            or contains empty or '..' segments
    """
    if not isinstance(name, str) or not name:
        msg = f"Fragment name must be a non-empty string, got {name!r}"
        raise ValueError(msg)
    if name.strip() != name:
        msg = f"Fragment name contains leading/trailing whitespace: {name!r}"
        raise ValueError(msg)
    if name.startswith((FRAGMENT_SEPARATOR, "\\")):
        msg = f"Leading path separator not allowed in fragment name: '{name}'"
        raise ValueError(msg)
    segments = name.split(FRAGMENT_SEPARATOR)
    if any(segment in ("", "..") for segment in segments):
        msg = f"Empty or '..' segments not allowed in fragment name: '{name}'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class AssetOptions:
    """Immutable options for loading message fragments.

    Attributes:
        src: Asset source root; a directory for LoadVia.FILE_SYSTEM or a
            base URL for LoadVia.HTTP (default: 'res/lang').
        fragment_names: Fragments loaded for every locale, in merge order.
            Names may contain '/' to target nested positions.
        clean_unused: Discard documents of locales outside the newly loaded
            fallback closure on each successful load (default: True).
        load_via: Transport kind (default: LoadVia.HTTP).
        timeout: HTTP request timeout in seconds (default: 10.0).

    Example:
        >>> assets = AssetOptions(
        ...     src="./res/lang",
        ...     fragment_names=("common", "errors/http"),
        ...     load_via=LoadVia.FILE_SYSTEM,
        ... )
    """

    src: str = DEFAULT_ASSETS_SRC
    fragment_names: Sequence[FragmentName] = ()
    clean_unused: bool = True
    load_via: LoadVia = LoadVia.HTTP
    timeout: float = DEFAULT_HTTP_TIMEOUT

    def __post_init__(self) -> None:
        """Normalize and validate configuration values.

        Raises:
            ValueError: If a fragment name is invalid or timeout is not positive
        """
        if isinstance(self.fragment_names, str):
            msg = "fragment_names must be a sequence of names, not a single string"
            raise ValueError(msg)
        names = tuple(self.fragment_names)
        for name in names:
            _validate_fragment_name(name)
        object.__setattr__(self, "fragment_names", names)
        object.__setattr__(self, "load_via", LoadVia(self.load_via))
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class LocatorConfig:
    """Immutable MessageLocator configuration.

    Locale codes are kept exactly as written: a supported code doubles as
    the directory (or URL segment) its fragments are loaded from.

    Attributes:
        default_locale: Locale loaded by load() without an argument (default: 'en').
        supported_locales: Locales that may be loaded (default: ('en',)).
        fallbacks: Locale code to ordered fallback codes.
        assets: Fragment loading options.

    Example:
        >>> config = LocatorConfig(
        ...     default_locale="en-US",
        ...     supported_locales=("en-US", "pt-BR"),
        ...     fallbacks={"pt-BR": ["en-US"]},
        ...     assets=AssetOptions(src="res/lang", fragment_names=("_",)),
        ... )
    """

    default_locale: LocaleCode = DEFAULT_LOCALE_CODE
    supported_locales: Sequence[LocaleCode] = (DEFAULT_LOCALE_CODE,)
    fallbacks: Mapping[LocaleCode, Sequence[LocaleCode]] = field(default_factory=dict)
    assets: AssetOptions = field(default_factory=AssetOptions)

    def __post_init__(self) -> None:
        """Normalize and validate configuration values.

        Raises:
            ValueError: If supported_locales is empty
        """
        if isinstance(self.supported_locales, str):
            msg = "supported_locales must be a sequence of codes, not a single string"
            raise ValueError(msg)
        # dict.fromkeys() removes duplicates while maintaining insertion order
        supported = tuple(dict.fromkeys(self.supported_locales))
        if not supported:
            msg = "At least one supported locale is required"
            raise ValueError(msg)
        object.__setattr__(self, "supported_locales", supported)
        object.__setattr__(
            self,
            "fallbacks",
            MappingProxyType({code: tuple(codes) for code, codes in self.fallbacks.items()}),
        )
