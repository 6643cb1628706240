"""Multi-locale localization package for MessageLocator.

Provides the full localization stack: configuration, fragment loading,
document merging, format arguments, interpolation, and the locator itself.

Submodules:
    types         - PEP 695 type aliases (MessageId, LocaleCode, FragmentName, ...)
    config        - LocatorConfig, AssetOptions
    loading       - FragmentTransport protocol, FileSystemTransport, HttpTransport,
                    FragmentLoader, FallbackInfo, FragmentLoadResult, LoadSummary
    document      - merge_fragment, lookup_template
    arguments     - Suffix, Scalar, Variables, compose_identifier
    interpolation - interpolate, template_variables
    locator       - MessageLocator (load orchestration and lookup)

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from messagelocator.enums import LoadStatus, LoadVia, LocatorState
from messagelocator.localization.arguments import (
    FormatArgument,
    Scalar,
    Suffix,
    Variables,
    compose_identifier,
)
from messagelocator.localization.config import AssetOptions, LocatorConfig
from messagelocator.localization.document import lookup_template, merge_fragment
from messagelocator.localization.interpolation import interpolate
from messagelocator.localization.loading import (
    FallbackInfo,
    FileSystemTransport,
    FragmentLoader,
    FragmentLoadResult,
    FragmentTransport,
    HttpTransport,
    LoadSummary,
    create_transport,
)
from messagelocator.localization.locator import LocatorSnapshot, MessageLocator
from messagelocator.localization.types import (
    AssetDocument,
    DocumentNode,
    FragmentName,
    LocaleCode,
    MessageId,
)

__all__ = [
    # Main locator
    "MessageLocator",
    "LocatorSnapshot",
    "LocatorState",
    # Configuration
    "LocatorConfig",
    "AssetOptions",
    "LoadVia",
    # Transports and loader
    "FragmentTransport",
    "FileSystemTransport",
    "HttpTransport",
    "create_transport",
    "FragmentLoader",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "FragmentLoadResult",
    # Fallback observability
    "FallbackInfo",
    # Format arguments
    "FormatArgument",
    "Suffix",
    "Scalar",
    "Variables",
    "compose_identifier",
    # Documents and templates
    "merge_fragment",
    "lookup_template",
    "interpolate",
    # Type aliases for user code type annotations
    "AssetDocument",
    "DocumentNode",
    "FragmentName",
    "LocaleCode",
    "MessageId",
]
