"""Global pytest configuration and shared sample graphs.

Each graph fixture returns ``(graph, nodes)`` where ``nodes`` maps node names
to their handles. Edge payloads are integer capacities.
"""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

import pytest

from arenagraph.graph.arena import Graph, NodeRef

NamedGraph = Tuple[Graph, Dict[str, NodeRef]]


def build_graph(
    names: Iterable[str], edges: Iterable[Tuple[str, str, int]]
) -> NamedGraph:
    """Build a graph whose node payloads are ``names`` and edge payloads capacities."""
    g: Graph = Graph()
    nodes = {name: g.add_node(name) for name in names}
    for src, dst, cap in edges:
        g.add_directed_edge(nodes[src], nodes[dst], cap)
    return g, nodes


@pytest.fixture
def make_graph():
    """Factory fixture exposing `build_graph` to tests."""
    return build_graph


@pytest.fixture
def line1() -> NamedGraph:
    #     [3]      [2]
    #  A──────►B──────►C
    return build_graph("ABC", [("A", "B", 3), ("B", "C", 2)])


@pytest.fixture
def disconnected() -> NamedGraph:
    #  A      B
    return build_graph("AB", [])


@pytest.fixture
def parallel() -> NamedGraph:
    #      [1]
    #   ┌──────┐
    #   │      ▼
    #   A      B
    #   │      ▲
    #   └──────┘
    #      [1]
    return build_graph("AB", [("A", "B", 1), ("A", "B", 1)])


@pytest.fixture
def diamond() -> NamedGraph:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   └────────►C─────────┘
    #       [1]        [1]
    return build_graph(
        "ABCD",
        [("A", "B", 1), ("A", "C", 1), ("B", "D", 1), ("C", "D", 1)],
    )


@pytest.fixture
def diamond_cycle() -> NamedGraph:
    # Diamond with a back edge D -> A; edges are numbered in insertion order:
    #   e0 A->B, e1 A->C, e2 B->D, e3 C->D, e4 D->A
    return build_graph(
        "ABCD",
        [
            ("A", "B", 1),
            ("A", "C", 1),
            ("B", "D", 1),
            ("C", "D", 1),
            ("D", "A", 1),
        ],
    )


@pytest.fixture
def crossover() -> NamedGraph:
    # Max flow S -> T is 2 with unit capacities. The shortest path S-A-B-T is
    # found first and blocks R; the second augmenting path S-R-B-A-P-Q-T has
    # to cancel the flow on A->B through its reverse residual edge.
    #
    #   S───►A───►P───►Q
    #   │    │         │
    #   ▼    ▼         ▼
    #   R───►B────────►T
    return build_graph(
        "SABTPQR",
        [
            ("S", "A", 1),
            ("A", "B", 1),
            ("B", "T", 1),
            ("A", "P", 1),
            ("P", "Q", 1),
            ("Q", "T", 1),
            ("S", "R", 1),
            ("R", "B", 1),
        ],
    )


@pytest.fixture
def graph5() -> NamedGraph:
    # Fully connected 5 nodes, capacity 1 on every directed edge
    names = "ABCDE"
    return build_graph(names, [(u, v, 1) for u in names for v in names if u != v])


@pytest.fixture
def square_cycle() -> NamedGraph:
    # A 4-cycle with a chord and large capacities:
    #
    #        [10]
    #   A─────────►B
    #   ▲ ╲        │
    #   │   ╲[4]   │[6]
    #   │[2]  ╲    ▼
    #   D◄─────────C
    #        [8]    (A->C chord)
    return build_graph(
        "ABCD",
        [
            ("A", "B", 10),
            ("B", "C", 6),
            ("C", "D", 8),
            ("D", "A", 2),
            ("A", "C", 4),
        ],
    )
