"""Result containers for algorithm analytics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set

from arenagraph.graph.arena import EdgeRef, NodeRef


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Flow carried by each edge.
        residual_cap: Capacity left on each edge after placement.
        reachable: Nodes reachable from the source in the final residual graph.
        min_cut: Edges leaving ``reachable``; their capacities sum to ``total_flow``.
    """

    total_flow: int
    edge_flow: Dict[EdgeRef, int]
    residual_cap: Dict[EdgeRef, int]
    reachable: Set[NodeRef]
    min_cut: List[EdgeRef]
