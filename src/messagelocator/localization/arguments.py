"""Format arguments and identifier composition.

Callers pass heterogeneous arguments to ``get_formatted``. Each one is one
of three cases:

    Suffix     literal text appended to the identifier: greeting -> greeting_male
    Scalar     number stringified and appended the same way: items -> items_3
    Variables  name -> value mapping used for $name interpolation

Plain Python values are coerced: ``str`` is a Suffix, ``int``/``float``/
``Decimal`` is a Scalar, any ``Mapping`` is Variables. ``bool`` is rejected.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import TYPE_CHECKING

from messagelocator.constants import SUFFIX_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from messagelocator.localization.types import MessageId

__all__ = [
    "FormatArgument",
    "Scalar",
    "Suffix",
    "Variables",
    "compose_identifier",
    "to_format_argument",
]


@dataclass(frozen=True, slots=True)
class Suffix:
    """Literal identifier suffix (e.g., a gender or variant key)."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Scalar:
    """Stringifiable number used as an identifier suffix."""

    value: int | float | Decimal

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Variables:
    """Interpolation variables. Keys and values are stored as strings."""

    values: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = MappingProxyType({str(k): str(v) for k, v in self.values.items()})
        object.__setattr__(self, "values", frozen)


type FormatArgument = Suffix | Scalar | Variables
"""One caller-supplied argument to get_formatted."""


def to_format_argument(arg: object) -> FormatArgument:
    """Coerce a plain Python value into a FormatArgument case.

    Args:
        arg: str, int, float, Decimal, Mapping, or an existing FormatArgument

    Returns:
        The matching FormatArgument

    Raises:
        TypeError: If arg is none of the accepted types
    """
    match arg:
        case Suffix() | Scalar() | Variables():
            return arg
        case str():
            return Suffix(arg)
        case bool():
            msg = "Unsupported format argument type: bool. Pass a str suffix instead"
            raise TypeError(msg)
        case int() | float() | Decimal():
            return Scalar(arg)
        case Mapping():
            return Variables(arg)
        case _:
            msg = (
                f"Unsupported format argument type: {type(arg).__name__}. "
                "Expected str, int, float, Decimal or Mapping"
            )
            raise TypeError(msg)


def compose_identifier(
    message_id: MessageId,
    args: Iterable[object],
) -> tuple[MessageId, Mapping[str, str]]:
    """Apply format arguments to a base identifier.

    Suffix and Scalar arguments are appended in order, each joined with an
    underscore. When several Variables arguments are given the last one
    wins; with none, the mapping is empty.

    Args:
        message_id: Base dotted identifier
        args: Format arguments in caller order

    Returns:
        Tuple of (composed identifier, variables)

    Example:
        >>> compose_identifier("greeting", ["male", {"name": "Ann"}])
        ('greeting_male', mappingproxy({'name': 'Ann'}))
    """
    parts = [message_id]
    variables: Mapping[str, str] = MappingProxyType({})
    for arg in args:
        match to_format_argument(arg):
            case Variables(values=values):
                variables = values
            case suffix:
                parts.append(str(suffix))
    return SUFFIX_SEPARATOR.join(parts), variables
