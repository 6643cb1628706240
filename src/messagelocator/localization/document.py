"""Per-locale asset documents: fragment merging and identifier lookup.

A locale's messages are assembled from several independently loaded
fragments. Each fragment is placed into the locale's document at the
position its name describes:

    fragment "common"       -> document["common"]
    fragment "errors/http"  -> document["errors"]["http"]

Fragments are merged in declared order, so a later fragment overwrites an
earlier one at the same position.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from messagelocator.constants import FRAGMENT_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Sequence

    from messagelocator.localization.types import AssetDocument, DocumentNode, FragmentName

__all__ = ["lookup_template", "merge_fragment"]


def merge_fragment(
    fragment_name: FragmentName,
    value: DocumentNode,
    into: AssetDocument,
) -> None:
    """Assign a parsed fragment at the position named by fragment_name.

    Intermediate mappings are created as needed. A non-mapping value found
    at an intermediate position is replaced by a new mapping. The final
    segment receives the whole parsed value, overwriting what was there.

    Args:
        fragment_name: Separator-delimited position (e.g., 'errors/http')
        value: Parsed fragment content
        into: Document to modify in place

    Example:
        >>> doc = {}
        >>> merge_fragment("errors/http", {"404": "Not found"}, doc)
        >>> doc
        {'errors': {'http': {'404': 'Not found'}}}
    """
    *parents, last = fragment_name.split(FRAGMENT_SEPARATOR)
    node = into
    for name in parents:
        child = node.get(name)
        if not isinstance(child, dict):
            child = {}
            node[name] = child
        node = child
    node[last] = value


def lookup_template(
    document: AssetDocument | None,
    path: Sequence[str],
) -> str | None:
    """Descend a document one segment at a time and return a string leaf.

    Args:
        document: Per-locale document, or None if the locale is not loaded
        path: Identifier segments (e.g., ['nav', 'home'])

    Returns:
        Template string, or None if any segment is missing, a non-mapping
        is met before the last segment, or the leaf is not a string
    """
    node: DocumentNode = document
    for segment in path:
        if not isinstance(node, dict):
            return None
        node = node.get(segment)
    return node if isinstance(node, str) else None
