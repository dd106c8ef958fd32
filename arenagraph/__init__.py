"""arenagraph: arena-backed directed graphs with traversal and max-flow.

Nodes and edges live in append-only arenas and are addressed by lightweight
`NodeRef` / `EdgeRef` handles that never go stale.

Primary API:
    Graph - Arena graph with typed node and edge payloads
    NodeRef, EdgeRef - Stable handles returned by Graph construction calls
    visit_dfs / visit_bfs - Visitor-driven traversals
    calc_max_flow / calc_min_cut - Integer-capacity max-flow / min-cut
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from arenagraph import Graph

    g = Graph()
    a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
    g.add_directed_edge(a, b, 3)
    g.add_directed_edge(b, c, 2)

    order = []
    g.visit_bfs_nodes(a, lambda ref, name: order.append(name))
    assert order == ["A", "B", "C"]
    assert g.max_flow(a, c) == g.min_cut(a, c) == 2
"""

from __future__ import annotations

from arenagraph import logging
from arenagraph._version import __version__
from arenagraph.algorithms.base import PathSearch
from arenagraph.algorithms.max_flow import (
    calc_max_flow,
    calc_min_cut,
    run_sensitivity,
    saturated_edges,
)
from arenagraph.algorithms.traversal import (
    visit_bfs,
    visit_bfs_edges,
    visit_bfs_nodes,
    visit_dfs,
    visit_dfs_edges,
    visit_dfs_nodes,
)
from arenagraph.algorithms.types import FlowSummary
from arenagraph.config import FLOW_CONFIG, FlowSolverConfig
from arenagraph.graph.arena import AdjEntry, EdgeRef, Graph, IncEntry, NodeRef
from arenagraph.graph.convert import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph
    "Graph",
    "NodeRef",
    "EdgeRef",
    "AdjEntry",
    "IncEntry",
    # Traversal
    "visit_dfs",
    "visit_dfs_nodes",
    "visit_dfs_edges",
    "visit_bfs",
    "visit_bfs_nodes",
    "visit_bfs_edges",
    # Flow
    "calc_max_flow",
    "calc_min_cut",
    "saturated_edges",
    "run_sensitivity",
    "FlowSummary",
    "PathSearch",
    # Configuration
    "FlowSolverConfig",
    "FLOW_CONFIG",
    # NetworkX interop
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
