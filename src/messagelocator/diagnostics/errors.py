"""MessageLocator exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Hierarchy:
    LocatorError
    ├── ConfigurationError        programmer/config mistakes, raised loudly
    │   ├── UnsupportedLocaleError
    │   ├── MissingPathComponentError
    │   ├── InvalidLocaleError
    │   └── DuplicateLocaleError
    └── FragmentError             expected failures, turned into load() == False
        ├── FragmentFetchError
        │   └── FragmentNotFoundError
        └── FragmentParseError

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LocatorError(Exception):
    """Base exception for all MessageLocator errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(LocatorError):
    """Locator configuration or caller contract violation.

    Not recoverable locally. The operation that hit it is aborted and no
    state is changed.
    """


class UnsupportedLocaleError(ConfigurationError):
    """Requested locale is not in the configured supported set."""


class MissingPathComponentError(ConfigurationError):
    """Locale in a fallback closure has no declared path component.

    Raised when a fallback references a locale that was never listed as
    supported, so there is no directory to load it from.
    """


class InvalidLocaleError(ConfigurationError, ValueError):
    """Locale code could not be parsed into a LocaleIdentifier."""


class DuplicateLocaleError(ConfigurationError, ValueError):
    """Two supported codes normalize to the same locale (e.g., 'pt-BR' and 'pt_BR')."""


class FragmentError(LocatorError):
    """Loading a single message fragment failed.

    Attributes:
        locale: Tag of the locale being loaded
        fragment: Fragment name (e.g., 'common' or 'errors/http')
        path: Logical path the fragment was fetched from
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale: str = "",
        fragment: str = "",
        path: str = "",
    ) -> None:
        """Initialize FragmentError.

        Args:
            message: Error message string OR Diagnostic object
            locale: Tag of the locale being loaded
            fragment: Fragment name
            path: Logical path of the fragment
        """
        super().__init__(message)
        self.locale = locale
        self.fragment = fragment
        self.path = path


class FragmentFetchError(FragmentError):
    """Transport failed to retrieve fragment bytes."""


class FragmentNotFoundError(FragmentFetchError):
    """Transport reported that the fragment does not exist."""


class FragmentParseError(FragmentError):
    """Fragment bytes are not a well-formed JSON document."""
