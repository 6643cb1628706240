"""Tests for the messagelocator package __init__.py module.

Covers:
- Fallback version when package metadata is unavailable
- __all__ integrity: every exported name is accessible
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError
from unittest.mock import MagicMock, patch


def test_package_not_found_error() -> None:
    """PackageNotFoundError during metadata lookup sets __version__ to the dev fallback.

    When importlib.metadata.version() raises PackageNotFoundError (e.g. a
    development checkout without a pip install), __version__ defaults to
    '0.0.0+dev'.
    """
    saved_modules = {
        name: module
        for name, module in sys.modules.items()
        if name == "messagelocator" or name.startswith("messagelocator.")
    }

    try:
        for module_name in list(saved_modules.keys()):
            if module_name in sys.modules:
                del sys.modules[module_name]

        mock_version = MagicMock(side_effect=PackageNotFoundError("messagelocator"))

        with patch("importlib.metadata.version", mock_version):
            import messagelocator

            assert messagelocator.__version__ == "0.0.0+dev", (
                "Expected fallback version '0.0.0+dev' when package not found, "
                f"got {messagelocator.__version__!r}"
            )
    finally:
        fresh_modules = [
            name
            for name in sys.modules
            if name == "messagelocator" or name.startswith("messagelocator.")
        ]
        for module_name in fresh_modules:
            del sys.modules[module_name]

        sys.modules.update(saved_modules)


class TestInitModuleExports:
    """__all__ integrity: every exported name must be accessible from messagelocator."""

    def test_all_exports_are_accessible(self) -> None:
        """Every name in messagelocator.__all__ resolves without error."""
        import messagelocator

        for name in messagelocator.__all__:
            assert hasattr(messagelocator, name), (
                f"messagelocator.__all__ contains {name!r} but "
                f"messagelocator.{name} raises AttributeError"
            )

    def test_all_exports_count(self) -> None:
        """__all__ contains exactly the expected number of public exports.

        Tripwire: update alongside any __all__ change.
        """
        import messagelocator

        assert len(messagelocator.__all__) == 11

    def test_localization_exports_accessible(self) -> None:
        """Every name in messagelocator.localization.__all__ resolves."""
        from messagelocator import localization

        for name in localization.__all__:
            assert hasattr(localization, name), f"localization.{name} missing"

    def test_top_level_reexports_are_identical(self) -> None:
        """Top-level names are the same objects as their submodule definitions."""
        import messagelocator
        from messagelocator.localization.locator import MessageLocator

        assert messagelocator.MessageLocator is MessageLocator
