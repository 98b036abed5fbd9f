"""
Shared test fixtures for registry tests.
"""

import pytest

from unacy import create_registry
from unacy.core.graph import UnitGraph


def double(x):
    return x * 2


@pytest.fixture
def empty_registry():
    """Create an empty registry."""
    return create_registry()


@pytest.fixture
def chain_registry():
    """Registry with A -> B (x2) -> C (x3) -> D (x5)."""
    return (
        create_registry()
        .register("A", "B", lambda a: a * 2)
        .register("B", "C", lambda b: b * 3)
        .register("C", "D", lambda c: c * 5)
    )


@pytest.fixture
def distance_registry():
    """Registry with bidirectional meters <-> kilometers <-> miles."""
    return (
        create_registry()
        .register("meters", "kilometers", {"to": lambda m: m / 1000, "from": lambda km: km * 1000})
        .register(
            "kilometers", "miles", {"to": lambda km: km * 0.621371, "from": lambda mi: mi / 0.621371}
        )
    )


@pytest.fixture
def chain_graph():
    """Graph with a linear chain of n edges: U1 -> U2 -> ... -> U(n+1)."""

    def build(n: int) -> UnitGraph:
        graph = UnitGraph()
        for i in range(1, n + 1):
            graph = graph.add_edge(f"U{i}", f"U{i + 1}", double)
        return graph

    return build
