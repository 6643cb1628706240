"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating MessageLocator call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "AssetDocument",
    "DocumentNode",
    "FragmentName",
    "LocaleCode",
    "MessageId",
]

type MessageId = str
"""Dotted message identifier (e.g., 'nav.home', 'errors.not_found')."""

type LocaleCode = str
"""Locale code as written in configuration (e.g., 'en', 'pt-BR')."""

type FragmentName = str
"""Fragment name relative to a locale directory (e.g., 'common', 'errors/http')."""

type DocumentNode = str | int | float | bool | None | list[DocumentNode] | dict[str, DocumentNode]
"""Any value a parsed JSON fragment can hold."""

type AssetDocument = dict[str, DocumentNode]
"""Per-locale merged message tree; string leaves are templates."""
