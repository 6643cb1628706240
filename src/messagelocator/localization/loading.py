"""Fragment loading infrastructure for MessageLocator.

Provides the transport protocol for fetching raw fragment bytes, filesystem
and HTTP implementations, the FragmentLoader that turns a (locale, fragment)
pair into a parsed JSON value, and result/summary data structures for
tracking load attempts.

Components:
    FragmentTransport - Protocol for fetching raw bytes by logical path
    FileSystemTransport - Disk-based transport with path-traversal prevention
    HttpTransport - httpx-based transport for HTTP(S) asset servers
    FragmentLoader - Builds fragment paths, fetches and parses fragments
    FallbackInfo - Immutable record of a locale fallback event
    FragmentLoadResult - Immutable result of a single fragment load attempt
    LoadSummary - Immutable aggregate of the results of one load() call

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

import httpx

from messagelocator.constants import (
    DEFAULT_HTTP_TIMEOUT,
    FRAGMENT_ENCODING,
    FRAGMENT_EXTENSION,
)
from messagelocator.diagnostics import (
    ErrorTemplate,
    FragmentFetchError,
    FragmentNotFoundError,
    FragmentParseError,
    MissingPathComponentError,
)
from messagelocator.enums import LoadStatus, LoadVia

if TYPE_CHECKING:
    from messagelocator.locale_utils import LocaleIdentifier
    from messagelocator.localization.types import DocumentNode, FragmentName, MessageId

logger = logging.getLogger(__name__)

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "FragmentTransport",
    # Concrete transports
    "FileSystemTransport",
    "HttpTransport",
    "create_transport",
    # Loader
    "FragmentLoader",
    # Fallback observability
    "FallbackInfo",
    # Load result types
    "FragmentLoadResult",
    "LoadSummary",
]


class FragmentTransport(Protocol):
    """Protocol for fetching raw fragment bytes by logical path.

    This is a Protocol (structural typing) rather than ABC so that tests
    and applications can supply any object with a matching fetch().

    Example:
        >>> class MemoryTransport:
        ...     def __init__(self, files: dict[str, bytes]) -> None:
        ...         self._files = files
        ...     async def fetch(self, path: str) -> bytes:
        ...         return self._files[path]
    """

    async def fetch(self, path: str) -> bytes:
        """Fetch raw bytes stored at path.

        Args:
            path: Logical path (filesystem path or URL)

        Returns:
            Raw fragment bytes

        Raises:
            FileNotFoundError: If nothing exists at path
            OSError: If the transport fails for any other reason
        """
        ...


@dataclass(frozen=True, slots=True)
class FileSystemTransport:
    """Transport that reads fragments from the local filesystem.

    Reads run in a worker thread so the event loop is never blocked.

    Security:
        When root_dir is set, every resolved path must stay inside it.
        Paths escaping the root (via '..' or symlinks) are rejected.

    Attributes:
        root_dir: Optional directory all fetched paths must resolve into
    """

    root_dir: str | None = None
    _resolved_root: Path | None = field(init=False, repr=False, default=None)

    def __post_init__(self) -> None:
        """Cache resolved root directory."""
        if self.root_dir is not None:
            object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path is safely within base_dir.

        Args:
            base_dir: Base directory (already resolved)
            full_path: Full path to check (already resolved)

        Returns:
            True if full_path is within base_dir
        """
        try:
            full_path.relative_to(base_dir)
            return True
        except ValueError:
            return False

    def _read(self, path: str) -> bytes:
        full_path = Path(path).resolve()
        if self._resolved_root is not None and not self._is_safe_path(
            self._resolved_root, full_path
        ):
            msg = f"Path traversal detected: '{path}' escapes root directory"
            raise PermissionError(msg)
        return full_path.read_bytes()

    async def fetch(self, path: str) -> bytes:
        """Read the file at path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            PermissionError: If path escapes root_dir
            OSError: If the file cannot be read
        """
        return await asyncio.to_thread(self._read, path)


class HttpTransport:
    """Transport that fetches fragments with HTTP GET.

    A shared ``httpx.AsyncClient`` may be injected (connection pooling,
    custom headers, or ``httpx.MockTransport`` in tests). Without one, a
    short-lived client is opened per fetch.

    Example:
        >>> transport = HttpTransport(timeout=5.0)
        >>> data = await transport.fetch("https://cdn.example.com/lang/en/common.json")
    """

    __slots__ = ("_client", "_timeout")

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            client: Optional shared client; caller owns its lifecycle
            timeout: Request timeout in seconds for self-managed clients
        """
        self._client = client
        self._timeout = timeout

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        shared = "shared" if self._client is not None else "per-request"
        return f"HttpTransport(client={shared}, timeout={self._timeout})"

    async def _get(self, client: httpx.AsyncClient, path: str) -> bytes:
        try:
            response = await client.get(path)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            # InvalidURL is not an HTTPError subclass
            msg = f"HTTP request for {path} failed: {e}"
            raise OSError(msg) from e
        if response.status_code == httpx.codes.NOT_FOUND:
            msg = f"HTTP 404 for {path}"
            raise FileNotFoundError(msg)
        if not response.is_success:
            msg = f"HTTP {response.status_code} for {path}"
            raise OSError(msg)
        return response.content

    async def fetch(self, path: str) -> bytes:
        """GET the URL at path.

        Raises:
            FileNotFoundError: If the server answers 404
            OSError: On connection errors, timeouts, or other non-2xx status
        """
        if self._client is not None:
            return await self._get(self._client, path)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await self._get(client, path)


def create_transport(
    load_via: LoadVia,
    *,
    timeout: float = DEFAULT_HTTP_TIMEOUT,
) -> FragmentTransport:
    """Build the transport selected by configuration.

    Args:
        load_via: Transport kind
        timeout: HTTP timeout in seconds (ignored for the filesystem)

    Returns:
        FileSystemTransport or HttpTransport
    """
    match load_via:
        case LoadVia.FILE_SYSTEM:
            return FileSystemTransport()
        case LoadVia.HTTP:
            return HttpTransport(timeout=timeout)


class FragmentLoader:
    """Fetch and parse one named fragment for one locale.

    Paths have the shape ``<src>/<path_component>/<fragment>.json``, where
    the path component is the locale code exactly as it was configured
    (so 'pt-BR' loads from 'res/lang/pt-BR/...').

    Example:
        >>> loader = FragmentLoader("res/lang", {en: "en-US"}, FileSystemTransport())
        >>> loader.fragment_path(en, "errors/http")
        'res/lang/en-US/errors/http.json'
    """

    __slots__ = ("_path_components", "_src", "_transport")

    def __init__(
        self,
        src: str,
        path_components: Mapping[LocaleIdentifier, str],
        transport: FragmentTransport,
    ) -> None:
        """Initialize loader.

        Args:
            src: Asset source root (directory or base URL)
            path_components: Directory name for each loadable locale
            transport: Byte-fetching capability
        """
        self._src = src.rstrip("/")
        self._path_components = dict(path_components)
        self._transport = transport

    @property
    def transport(self) -> FragmentTransport:
        """Transport used for fetching."""
        return self._transport

    def path_component(self, locale: LocaleIdentifier) -> str:
        """Directory name (or URL segment) fragments of locale are loaded from.

        Raises:
            MissingPathComponentError: If locale has no declared path component
        """
        component = self._path_components.get(locale)
        if component is None:
            raise MissingPathComponentError(ErrorTemplate.missing_path_component(locale.tag))
        return component

    def fragment_path(self, locale: LocaleIdentifier, fragment: FragmentName) -> str:
        """Build the logical path of a fragment.

        Raises:
            MissingPathComponentError: If locale has no declared path component
        """
        component = self.path_component(locale)
        return f"{self._src}/{component}/{fragment}{FRAGMENT_EXTENSION}"

    async def load(self, locale: LocaleIdentifier, fragment: FragmentName) -> DocumentNode:
        """Fetch and parse a fragment.

        Args:
            locale: Locale to load the fragment for
            fragment: Fragment name (may contain '/' for nested placement)

        Returns:
            Parsed JSON value

        Raises:
            MissingPathComponentError: If locale has no declared path component
            FragmentNotFoundError: If the transport reports the fragment absent
            FragmentFetchError: If the transport fails
            FragmentParseError: If the bytes are not UTF-8 JSON
        """
        path = self.fragment_path(locale, fragment)
        logger.debug("Fetching fragment %s for %s", path, locale)

        try:
            raw = await self._transport.fetch(path)
        except FileNotFoundError as e:
            raise FragmentNotFoundError(
                ErrorTemplate.fragment_fetch_failed(locale.tag, path, str(e)),
                locale=locale.tag,
                fragment=fragment,
                path=path,
            ) from e
        except OSError as e:
            raise FragmentFetchError(
                ErrorTemplate.fragment_fetch_failed(locale.tag, path, str(e)),
                locale=locale.tag,
                fragment=fragment,
                path=path,
            ) from e

        try:
            return json.loads(raw.decode(FRAGMENT_ENCODING))
        except ValueError as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueError
            raise FragmentParseError(
                ErrorTemplate.fragment_parse_failed(locale.tag, path, str(e)),
                locale=locale.tag,
                fragment=fragment,
                path=path,
            ) from e


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when MessageLocator resolves a
    message from a fallback locale instead of the current locale.

    Attributes:
        requested_locale: The current locale at lookup time
        resolved_locale: The locale that actually contained the message
        message_id: The composed identifier that was resolved

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"Fallback: {info.message_id} resolved from "
        ...           f"{info.resolved_locale} (requested {info.requested_locale})")
        >>> locator = MessageLocator(config, on_fallback=log_fallback)
    """

    requested_locale: LocaleIdentifier
    resolved_locale: LocaleIdentifier
    message_id: MessageId


@dataclass(frozen=True, slots=True)
class FragmentLoadResult:
    """Result of loading a single fragment.

    Attributes:
        locale: Locale the fragment was loaded for
        fragment: Fragment name
        status: Load status (success, not_found, error)
        error: Exception if status is not SUCCESS, None otherwise
        source_path: Logical path of the fragment (if it could be built)
    """

    locale: LocaleIdentifier
    fragment: FragmentName
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if fragment loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if fragment was not found."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if fragment load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of fragment load results from one load() call.

    A load stops at the first failing fragment, so a failed summary ends
    with exactly one non-successful result.

    Attributes:
        locale: Target locale of the load
        results: Individual load results in attempt order
        committed: Whether the load published new state

    Example:
        >>> ok = await locator.load()
        >>> summary = locator.get_load_summary()
        >>> if not summary.committed:
        ...     for result in summary.get_errors():
        ...         print(f"Failed: {result.source_path}: {result.error}")
    """

    locale: LocaleIdentifier | None = None
    results: tuple[FragmentLoadResult, ...] = ()
    committed: bool = False

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(locale={self.locale}, "
            f"total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"committed={self.committed})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of fragments not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[FragmentLoadResult, ...]:
        """Get all results that did not succeed (errors and not-found)."""
        return tuple(r for r in self.results if not r.is_success)

    def get_by_locale(self, locale: LocaleIdentifier) -> tuple[FragmentLoadResult, ...]:
        """Get all results for a specific locale."""
        return tuple(r for r in self.results if r.locale == locale)

    @property
    def all_successful(self) -> bool:
        """Check if every attempted fragment loaded successfully."""
        return all(r.is_success for r in self.results)
