"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps error text testable and documents every failure the locator
    can report.
    """

    @staticmethod
    def unsupported_locale(locale: str, supported: tuple[str, ...]) -> Diagnostic:
        """Requested locale is not in the supported set.

        Args:
            locale: Tag of the requested locale
            supported: Tags of the configured supported locales

        Returns:
            Diagnostic for UNSUPPORTED_LOCALE
        """
        msg = f"Unsupported locale '{locale}'"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_LOCALE,
            message=msg,
            hint=f"Supported locales: {', '.join(supported) or '(none)'}",
            locale=locale,
        )

    @staticmethod
    def missing_path_component(locale: str) -> Diagnostic:
        """Fallback locale has no declared directory.

        Args:
            locale: Tag of the locale without a path component

        Returns:
            Diagnostic for MISSING_PATH_COMPONENT
        """
        msg = f"Fallback locale '{locale}' is not a supported locale"
        return Diagnostic(
            code=DiagnosticCode.MISSING_PATH_COMPONENT,
            message=msg,
            hint="Every locale named in fallbacks must also appear in supported_locales",
            locale=locale,
        )

    @staticmethod
    def invalid_locale(code: str, reason: str) -> Diagnostic:
        """Locale code could not be parsed.

        Args:
            code: The code as supplied by the caller
            reason: Parser error text

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale code '{code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a BCP-47 tag such as 'en', 'en-US' or 'pt-BR'",
            locale=code,
        )

    @staticmethod
    def fragment_fetch_failed(locale: str, path: str, reason: str) -> Diagnostic:
        """Transport failed to retrieve fragment bytes.

        Args:
            locale: Tag of the locale being loaded
            path: Logical path of the fragment
            reason: Transport error text

        Returns:
            Diagnostic for FRAGMENT_FETCH_FAILED
        """
        msg = f"Failed to load resource at {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FRAGMENT_FETCH_FAILED,
            message=msg,
            locale=locale,
            path=path,
        )

    @staticmethod
    def fragment_parse_failed(locale: str, path: str, reason: str) -> Diagnostic:
        """Fragment bytes are not a well-formed JSON document.

        Args:
            locale: Tag of the locale being loaded
            path: Logical path of the fragment
            reason: Decoder error text

        Returns:
            Diagnostic for FRAGMENT_PARSE_FAILED
        """
        msg = f"Malformed resource at {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FRAGMENT_PARSE_FAILED,
            message=msg,
            hint="Fragments must be UTF-8 encoded JSON",
            locale=locale,
            path=path,
        )

    @staticmethod
    def duplicate_locale(code: str, previous: str) -> Diagnostic:
        """Two supported codes name the same locale.

        Args:
            code: The later code as written
            previous: The earlier code it collides with

        Returns:
            Diagnostic for DUPLICATE_LOCALE
        """
        msg = f"Supported locale '{code}' duplicates '{previous}'"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=msg,
            hint="List each locale once; the code is also its directory name",
            locale=code,
        )
