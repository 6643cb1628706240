"""Template interpolation.

Expands ``$name`` tokens in a resolved template:

    "Hello $name, cost is $$5"  +  {"name": "Ann"}  ->  "Hello Ann, cost is $5"

Token names are one or more ASCII letters, digits, underscores or hyphens.
``$$`` is the escape for a literal dollar sign. A token with no matching
variable becomes ``undefined``. Substituted text is never re-scanned.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from messagelocator.constants import FALLBACK_MISSING_VARIABLE

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["interpolate", "template_variables"]

_TOKEN = re.compile(r"\$(\$|[A-Za-z0-9_-]+)")


def interpolate(template: str, variables: Mapping[str, str]) -> str:
    """Replace every token in template, left to right.

    Args:
        template: Raw template string
        variables: Variable values by name (without the '$')

    Returns:
        Expanded string

    Example:
        >>> interpolate("$missing", {})
        'undefined'
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "$":
            return "$"
        return variables.get(name, FALLBACK_MISSING_VARIABLE)

    return _TOKEN.sub(replace, template)


def template_variables(template: str) -> frozenset[str]:
    """Names of the variables a template references.

    Args:
        template: Raw template string

    Returns:
        Variable names without the '$' prefix; '$$' escapes are excluded
    """
    return frozenset(name for name in _TOKEN.findall(template) if name != "$")
