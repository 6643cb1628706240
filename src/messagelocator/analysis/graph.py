"""Graph algorithms for locale fallback analysis.

Provides the FallbackGraph used to decide which locales to load (closure)
and in which order to search them (resolution order), plus cycle detection
for reporting malformed fallback configuration.

Fallback maps come from configuration and may contain cycles (A -> B -> A).
Every traversal here is iterative and tracks visited nodes, so a cyclic map
terminates instead of recursing forever.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Collection, Hashable, Iterator, Mapping, Sequence
from enum import Enum, auto

__all__ = ["FallbackGraph", "detect_cycles"]


class _NodeState(Enum):
    """DFS node visitation state for iterative cycle detection."""

    ENTER = auto()  # First visit to node
    EXIT = auto()  # Returning from node (all neighbors processed)


def detect_cycles[N: Hashable](dependencies: Mapping[N, Sequence[N]]) -> list[list[N]]:
    """Detect all cycles in a fallback graph using iterative DFS.

    Args:
        dependencies: Mapping from node to its ordered direct fallbacks.
                     Example: {"a": ["b"], "b": ["a"]}

    Returns:
        List of cycles, where each cycle is a list of nodes forming the
        cycle path (first node repeated at the end). Empty list if no
        cycles detected.

    Example:
        >>> cycles = detect_cycles({"a": ["b"], "b": ["c"], "c": ["a"]})
        >>> len(cycles)
        1

    Complexity:
        Time: O(V + E) where V = nodes, E = edges
        Space: O(V) for visited/recursion tracking
    """
    visited: set[N] = set()
    cycles: list[list[N]] = []
    seen_cycle_keys: set[frozenset[N]] = set()

    for start_node in dependencies:
        if start_node in visited:
            continue

        path: list[N] = []
        rec_stack: set[N] = set()
        stack: list[tuple[N, _NodeState]] = [(start_node, _NodeState.ENTER)]

        while stack:
            node, state = stack.pop()

            if state == _NodeState.ENTER:
                if node in visited:
                    continue

                visited.add(node)
                rec_stack.add(node)
                path.append(node)

                # Exit marker is processed after all neighbors
                stack.append((node, _NodeState.EXIT))

                for neighbor in reversed(dependencies.get(node, ())):
                    if neighbor not in visited:
                        stack.append((neighbor, _NodeState.ENTER))
                    elif neighbor in rec_stack:
                        cycle_start = path.index(neighbor)
                        cycle = [*path[cycle_start:], neighbor]
                        cycle_key = frozenset(cycle)
                        if cycle_key not in seen_cycle_keys:  # pragma: no branch
                            seen_cycle_keys.add(cycle_key)
                            cycles.append(cycle)

            else:  # EXIT state
                if path and path[-1] == node:  # pragma: no branch
                    path.pop()
                rec_stack.discard(node)

    return cycles


class FallbackGraph[N: Hashable]:
    """Directed map from a locale to its ordered direct fallbacks.

    Immutable after construction. A node with no entry has no fallbacks.

    Example:
        >>> graph = FallbackGraph({"pt-BR": ["pt-PT", "en"], "pt-PT": ["en"]})
        >>> sorted(graph.closure("pt-BR"))
        ['en', 'pt-BR', 'pt-PT']
        >>> list(graph.resolution_order("pt-BR"))
        ['pt-BR', 'pt-PT', 'en']
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Mapping[N, Sequence[N]] | None = None) -> None:
        """Initialize graph.

        Args:
            edges: Mapping from node to ordered direct fallbacks
        """
        self._edges: dict[N, tuple[N, ...]] = {
            node: tuple(fallbacks) for node, fallbacks in (edges or {}).items()
        }

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"FallbackGraph({self._edges!r})"

    def __contains__(self, node: object) -> bool:
        return node in self._edges

    @property
    def edges(self) -> Mapping[N, tuple[N, ...]]:
        """Declared fallback lists (read-only copy)."""
        return dict(self._edges)

    def fallbacks(self, node: N) -> tuple[N, ...]:
        """Direct fallbacks of a node in declared order."""
        return self._edges.get(node, ())

    def closure(self, node: N) -> set[N]:
        """Node plus the transitive closure of its fallbacks.

        Order of discovery is not preserved; the set only decides what to
        load. Cycles terminate because visited nodes are never expanded
        twice.

        Args:
            node: Starting node

        Returns:
            Set containing node and every node reachable through fallbacks
        """
        result: set[N] = {node}
        pending: list[N] = [node]
        while pending:
            current = pending.pop()
            for fallback in self.fallbacks(current):
                if fallback not in result:
                    result.add(fallback)
                    pending.append(fallback)
        return result

    def resolution_order(self, node: N) -> Iterator[N]:
        """Yield nodes in lookup priority order.

        Depth-first over declared fallback lists: a node is followed by its
        first fallback and all of that fallback's fallbacks before the next
        sibling. A node already yielded is not yielded again, which both
        breaks cycles and skips re-checking shared ancestors (a lookup that
        missed once misses again).

        Args:
            node: Starting node (yielded first)

        Yields:
            Nodes in priority order
        """
        seen: set[N] = set()
        stack: list[N] = [node]
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            yield current
            stack.extend(reversed(self.fallbacks(current)))

    def undeclared(self, declared: Collection[N]) -> set[N]:
        """Fallback targets that are not in the declared collection.

        Args:
            declared: Nodes that may legitimately appear as fallbacks

        Returns:
            Referenced fallback nodes missing from declared
        """
        return {
            fallback
            for fallbacks in self._edges.values()
            for fallback in fallbacks
            if fallback not in declared
        }

    def cycles(self) -> list[list[N]]:
        """Cycles present in the declared fallback lists."""
        return detect_cycles(self._edges)
