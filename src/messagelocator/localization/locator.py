"""Locale loading and message lookup with fallback chains.

Implements MessageLocator: loads a target locale together with the full
closure of its fallback locales, and resolves dotted identifiers against
the loaded documents in fallback order.

Key architectural decisions:
- All-or-nothing loads: fragments are fetched and merged into private
  documents; shared state changes only when every fragment succeeded
- Snapshot publication: the current locale and the per-locale documents
  live in one immutable LocatorSnapshot, replaced by a single assignment,
  so readers never observe a half-applied load
- Shared handles: clone() returns a handle bound to the same configuration
  and committed state; a load through any handle is visible to all
- Lookups never fail: a missing identifier degrades to the identifier text
  and a missing variable to 'undefined'

Load Behavior:
    load() and update_locale() are coroutines. Loads on the same shared
    state are serialized with an asyncio.Lock. A fetch or parse failure
    makes load() return False; configuration mistakes (unsupported locale,
    fallback without a path component) raise ConfigurationError. Either
    way the previously committed state is untouched.

        locator = MessageLocator(config)
        if not await locator.load():
            summary = locator.get_load_summary()
            raise RuntimeError(f"Failed to load {summary.get_errors()}")

Python 3.13+.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from messagelocator.analysis.graph import FallbackGraph
from messagelocator.constants import ID_SEPARATOR
from messagelocator.diagnostics import (
    DuplicateLocaleError,
    ErrorTemplate,
    FragmentError,
    FragmentNotFoundError,
    InvalidLocaleError,
    UnsupportedLocaleError,
)
from messagelocator.enums import LoadStatus, LocatorState
from messagelocator.locale_utils import LocaleIdentifier, parse_locale
from messagelocator.localization.arguments import compose_identifier
from messagelocator.localization.document import lookup_template, merge_fragment
from messagelocator.localization.interpolation import interpolate, template_variables
from messagelocator.localization.loading import (
    FallbackInfo,
    FragmentLoader,
    FragmentLoadResult,
    FragmentTransport,
    LoadSummary,
    create_transport,
)

if TYPE_CHECKING:
    from messagelocator.localization.config import LocatorConfig
    from messagelocator.localization.types import (
        AssetDocument,
        DocumentNode,
        FragmentName,
        LocaleCode,
        MessageId,
    )

logger = logging.getLogger(__name__)

__all__ = ["LocatorSnapshot", "MessageLocator"]


@dataclass(frozen=True, slots=True)
class LocatorSnapshot:
    """Immutable committed state shared by all handles of a locator.

    Attributes:
        current_locale: Locale of the last successful load, or None
        assets: Per-locale merged documents (read-only mapping)
    """

    current_locale: LocaleIdentifier | None = None
    assets: Mapping[LocaleIdentifier, AssetDocument] = field(
        default_factory=lambda: MappingProxyType({})
    )


class _SharedState:
    """Mutable cell holding the published snapshot and load bookkeeping."""

    __slots__ = ("load_lock", "snapshot", "state", "summary")

    def __init__(self) -> None:
        self.snapshot = LocatorSnapshot()
        self.state = LocatorState.UNLOADED
        self.summary = LoadSummary()
        self.load_lock = asyncio.Lock()


class MessageLocator:
    """Multi-locale message lookup with fallback chains.

    Example - Filesystem assets:
        >>> config = LocatorConfig(
        ...     default_locale="en-US",
        ...     supported_locales=["en-US", "pt-BR"],
        ...     fallbacks={"pt-BR": ["en-US"]},
        ...     assets=AssetOptions(
        ...         src="res/lang",
        ...         fragment_names=["common"],
        ...         load_via=LoadVia.FILE_SYSTEM,
        ...     ),
        ... )
        >>> locator = MessageLocator(config)
        >>> await locator.load("pt-BR")
        True
        >>> locator.get_formatted("common.greeting", "female", {"name": "Ana"})
        'Bem-vinda, Ana!'

    Attributes:
        config: Immutable configuration the locator was built from
    """

    __slots__ = (
        "_config",
        "_default_locale",
        "_graph",
        "_loader",
        "_on_fallback",
        "_shared",
        "_supported",
    )

    def __init__(
        self,
        config: LocatorConfig,
        *,
        transport: FragmentTransport | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize locator.

        Args:
            config: Locales, fallbacks and asset options
            transport: Byte-fetching capability; defaults to the transport
                selected by config.assets.load_via
            on_fallback: Optional callback invoked when a message is
                resolved from a fallback locale instead of the current one

        Raises:
            InvalidLocaleError: If any configured locale code cannot be parsed
            DuplicateLocaleError: If two supported codes name the same locale
        """
        path_components: dict[LocaleIdentifier, str] = {}
        for code in config.supported_locales:
            locale = parse_locale(code)
            if locale in path_components:
                raise DuplicateLocaleError(
                    ErrorTemplate.duplicate_locale(code, path_components[locale])
                )
            path_components[locale] = code

        graph: FallbackGraph[LocaleIdentifier] = FallbackGraph(
            {
                parse_locale(code): [parse_locale(fallback) for fallback in fallbacks]
                for code, fallbacks in config.fallbacks.items()
            }
        )

        self._config = config
        self._default_locale = parse_locale(config.default_locale)
        self._supported: frozenset[LocaleIdentifier] = frozenset(path_components)
        self._graph = graph
        self._loader = FragmentLoader(
            config.assets.src,
            path_components,
            transport
            if transport is not None
            else create_transport(config.assets.load_via, timeout=config.assets.timeout),
        )
        self._on_fallback = on_fallback
        self._shared = _SharedState()

        for cycle in graph.cycles():
            logger.warning(
                "Cyclic fallback chain: %s", " -> ".join(locale.tag for locale in cycle)
            )
        for locale in sorted(graph.undeclared(self._supported), key=str):
            logger.warning("Fallback locale %s is not a supported locale", locale)

        logger.info(
            "MessageLocator initialized (default=%s, supported=%d, fragments=%d, load_via=%s)",
            self._default_locale,
            len(self._supported),
            len(config.assets.fragment_names),
            config.assets.load_via,
        )

    def clone(self) -> MessageLocator:
        """Return a handle sharing this locator's configuration and state.

        Loads through either handle are visible to both; nothing is copied.
        """
        other = object.__new__(MessageLocator)
        for name in MessageLocator.__slots__:
            setattr(other, name, getattr(self, name))
        return other

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> repr(locator)
            "MessageLocator(current=pt-BR, state=loaded, loaded=('en-US', 'pt-BR'))"
        """
        snapshot = self._shared.snapshot
        loaded = tuple(sorted(locale.tag for locale in snapshot.assets))
        return (
            f"MessageLocator(current={snapshot.current_locale}, "
            f"state={self._shared.state}, loaded={loaded!r})"
        )

    # ------------------------------------------------------------------
    # Configuration queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> LocatorConfig:
        """Configuration the locator was built from (read-only)."""
        return self._config

    @property
    def default_locale(self) -> LocaleIdentifier:
        """Locale loaded by load() without an argument."""
        return self._default_locale

    def supported_locales(self) -> frozenset[LocaleIdentifier]:
        """Locales that were configured as supported."""
        return self._supported

    def supports_locale(self, locale: LocaleIdentifier | LocaleCode) -> bool:
        """Check if a locale is one of the supported locales.

        Unparseable codes are reported as unsupported.
        """
        try:
            return self._coerce_locale(locale) in self._supported
        except InvalidLocaleError:
            return False

    def fallbacks_of(self, locale: LocaleIdentifier | LocaleCode) -> tuple[LocaleIdentifier, ...]:
        """Declared direct fallbacks of a locale, in priority order."""
        return self._graph.fallbacks(self._coerce_locale(locale))

    # ------------------------------------------------------------------
    # Committed state queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> LocatorState:
        """Lifecycle state shared by all handles."""
        return self._shared.state

    @property
    def current_locale(self) -> LocaleIdentifier | None:
        """Locale of the last successful load, or None before any."""
        return self._shared.snapshot.current_locale

    @property
    def snapshot(self) -> LocatorSnapshot:
        """Currently published snapshot."""
        return self._shared.snapshot

    def loaded_locales(self) -> frozenset[LocaleIdentifier]:
        """Locales that currently have a document in the store."""
        return frozenset(self._shared.snapshot.assets)

    def current_locale_seq(self) -> set[LocaleIdentifier]:
        """Current locale plus its fallback closure, or empty before any load."""
        current = self._shared.snapshot.current_locale
        if current is None:
            return set()
        return self._graph.closure(current)

    def get_load_summary(self) -> LoadSummary:
        """Get summary of fragment load attempts of the most recent load().

        Returns:
            LoadSummary with per-fragment results; empty before any load
        """
        return self._shared.summary

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _coerce_locale(self, locale: LocaleIdentifier | LocaleCode) -> LocaleIdentifier:
        if isinstance(locale, LocaleIdentifier):
            return locale
        return parse_locale(locale)

    async def update_locale(self, new_locale: LocaleIdentifier | LocaleCode) -> bool:
        """Load the given locale and its fallbacks and make it current.

        See load() for semantics.
        """
        return await self.load(new_locale)

    async def load(self, new_locale: LocaleIdentifier | LocaleCode | None = None) -> bool:
        """Load a locale and its fallback closure, committing atomically.

        If new_locale is omitted, the default locale is loaded.

        Args:
            new_locale: Locale to load and make current

        Returns:
            True if every fragment of every locale in the closure loaded
            and the new state was published, False if any fragment failed
            (previous state is kept)

        Raises:
            UnsupportedLocaleError: If the target is not a supported locale
            MissingPathComponentError: If a fallback in the closure is not
                a supported locale
            InvalidLocaleError: If new_locale is an unparseable code
        """
        target = self._default_locale if new_locale is None else self._coerce_locale(new_locale)
        if target not in self._supported:
            supported = tuple(sorted(locale.tag for locale in self._supported))
            raise UnsupportedLocaleError(ErrorTemplate.unsupported_locale(target.tag, supported))

        closure = sorted(self._graph.closure(target), key=str)
        # Every locale must have a directory before anything is fetched
        for locale in closure:
            self._loader.path_component(locale)

        async with self._shared.load_lock:
            previous_state = self._shared.state
            self._shared.state = LocatorState.LOADING
            results: list[FragmentLoadResult] = []
            committed = False
            try:
                new_assets = await self._load_closure(closure, results)
                if new_assets is None:
                    logger.warning("Loading locale %s failed; keeping previous state", target)
                    return False
                self._commit(target, new_assets)
                committed = True
                return True
            finally:
                # Also reached on cancellation
                if not committed:
                    self._shared.state = previous_state
                self._shared.summary = LoadSummary(
                    locale=target, results=tuple(results), committed=committed
                )

    async def _load_closure(
        self,
        closure: list[LocaleIdentifier],
        results: list[FragmentLoadResult],
    ) -> dict[LocaleIdentifier, AssetDocument] | None:
        """Build private documents for every locale of a fallback closure.

        Returns:
            New per-locale documents, or None at the first failed fragment
        """
        new_assets: dict[LocaleIdentifier, AssetDocument] = {}
        for locale in closure:
            document: AssetDocument = {}
            for fragment in self._config.assets.fragment_names:
                value, result = await self._load_single_fragment(locale, fragment)
                results.append(result)
                if not result.is_success:
                    return None
                merge_fragment(fragment, value, document)
            new_assets[locale] = document
        return new_assets

    async def _load_single_fragment(
        self,
        locale: LocaleIdentifier,
        fragment: FragmentName,
    ) -> tuple[DocumentNode, FragmentLoadResult]:
        """Load one fragment and record the result.

        Raises:
            MissingPathComponentError: If locale has no declared path component
        """
        source_path = self._loader.fragment_path(locale, fragment)
        try:
            value = await self._loader.load(locale, fragment)
        except FragmentError as e:
            logger.error("Failed to load resource %s: %s", source_path, e.diagnostic or e)
            status = (
                LoadStatus.NOT_FOUND if isinstance(e, FragmentNotFoundError) else LoadStatus.ERROR
            )
            return None, FragmentLoadResult(
                locale=locale,
                fragment=fragment,
                status=status,
                error=e,
                source_path=source_path,
            )
        return value, FragmentLoadResult(
            locale=locale,
            fragment=fragment,
            status=LoadStatus.SUCCESS,
            source_path=source_path,
        )

    def _commit(
        self,
        target: LocaleIdentifier,
        new_assets: dict[LocaleIdentifier, AssetDocument],
    ) -> None:
        """Publish new documents and current locale as one snapshot."""
        if self._config.assets.clean_unused:
            assets = new_assets
        else:
            assets = {**self._shared.snapshot.assets, **new_assets}
        self._shared.snapshot = LocatorSnapshot(
            current_locale=target,
            assets=MappingProxyType(assets),
        )
        self._shared.state = LocatorState.LOADED
        logger.info(
            "Loaded locale %s (%d locales in closure, %d in store)",
            target,
            len(new_assets),
            len(assets),
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _find(
        self,
        snapshot: LocatorSnapshot,
        path: list[str],
    ) -> Iterator[tuple[LocaleIdentifier, str]]:
        """Yield (locale, template) for each locale in resolution order defining path."""
        if snapshot.current_locale is None:
            return
        for locale in self._graph.resolution_order(snapshot.current_locale):
            template = lookup_template(snapshot.assets.get(locale), path)
            if template is not None:
                yield locale, template

    def get(self, message_id: MessageId) -> str:
        """Retrieve message by identifier.

        Returns:
            Interpolated message, or message_id itself if no locale has it
        """
        return self.get_formatted(message_id)

    def get_formatted(self, message_id: MessageId, *args: object) -> str:
        """Retrieve message by identifier with formatting arguments.

        Args:
            message_id: Dotted identifier (e.g., 'nav.home')
            *args: Suffixes (str), scalars (int, float, Decimal) appended to
                the identifier with '_', and at most one effective variable
                Mapping (the last one wins)

        Returns:
            Interpolated message, or the composed identifier if no locale
            in the fallback chain defines it

        Raises:
            TypeError: If an argument has an unsupported type

        Example:
            >>> locator.get_formatted("greeting", "male", {"name": "Ann"})
            'Welcome, Ann!'  # template of "greeting_male"
        """
        composed, variables = compose_identifier(message_id, args)
        snapshot = self._shared.snapshot
        found = next(self._find(snapshot, composed.split(ID_SEPARATOR)), None)

        if found is None:
            logger.warning("Message '%s' not found in any locale", composed)
            return composed

        locale, template = found
        if (
            self._on_fallback is not None
            and snapshot.current_locale is not None
            and locale != snapshot.current_locale
        ):
            self._on_fallback(
                FallbackInfo(
                    requested_locale=snapshot.current_locale,
                    resolved_locale=locale,
                    message_id=composed,
                )
            )
        return interpolate(template, variables)

    def has_message(self, message_id: MessageId) -> bool:
        """Check if any locale in the current fallback chain defines message_id."""
        path = message_id.split(ID_SEPARATOR)
        return next(self._find(self._shared.snapshot, path), None) is not None

    def get_message_variables(self, message_id: MessageId) -> frozenset[str]:
        """Get variables referenced by the template that message_id resolves to.

        Returns:
            Frozen set of variable names (without $ prefix)

        Raises:
            KeyError: If message not found in any locale
        """
        path = message_id.split(ID_SEPARATOR)
        found = next(self._find(self._shared.snapshot, path), None)
        if found is None:
            msg = f"Message '{message_id}' not found in any locale"
            raise KeyError(msg)
        return template_variables(found[1])
