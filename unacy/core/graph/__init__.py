"""
Conversion graph for Unacy.

- UnitGraph: persistent directed adjacency of converters
- find_shortest_path: BFS with self-conversion and depth guards
- compose_converters: chain converters along a path
"""

from unacy.core.graph.composer import compose_converters
from unacy.core.graph.path_finder import find_shortest_path
from unacy.core.graph.unit_graph import UnitGraph

__all__ = [
    "UnitGraph",
    "find_shortest_path",
    "compose_converters",
]
