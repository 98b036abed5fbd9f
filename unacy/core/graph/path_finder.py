"""
Breadth-first shortest path search over the conversion graph.
"""

from collections import deque
from collections.abc import Hashable

from unacy.config import MAX_DEPTH
from unacy.core.graph.unit_graph import UnitGraph
from unacy.utils.exceptions import CycleError, MaxDepthError
from unacy.utils.logger import get_logger

logger = get_logger(__name__)


def find_shortest_path(
    source: Hashable,
    target: Hashable,
    graph: UnitGraph,
    max_depth: int = MAX_DEPTH,
) -> list[Hashable] | None:
    """
    Find the shortest path between two units.

    Ties between equal-length paths go to the first one discovered in
    adjacency (registration) order. Visited units are never re-entered,
    so returned paths are acyclic.

    Args:
        source: Starting unit
        target: Destination unit
        graph: Conversion graph to search
        max_depth: Maximum number of edges in the path

    Returns:
        List of units from source to target (both included), or None if
        the search is exhausted without reaching the target

    Raises:
        CycleError: If source and target are the same unit
        MaxDepthError: If the search has to extend a path past max_depth edges
    """
    if source == target:
        raise CycleError([source, target])

    queue: deque[tuple[Hashable, list[Hashable]]] = deque([(source, [source])])
    visited = {source}

    while queue:
        current, path = queue.popleft()

        for neighbor in graph.neighbors(current):
            # Extending a path of N units gives N edges
            if len(path) > max_depth:
                logger.debug(f"Depth limit {max_depth} hit searching {source} -> {target}")
                raise MaxDepthError(source, target, max_depth)

            if neighbor == target:
                return [*path, neighbor]

            if neighbor in visited:
                continue

            visited.add(neighbor)
            queue.append((neighbor, [*path, neighbor]))

    return None
