"""NetworkX interop for the arena graph.

`to_networkx` exposes a `Graph` as an ``nx.MultiDiGraph`` so the wider
NetworkX algorithm catalogue can be applied to it; `from_networkx` builds a
`Graph` from any NetworkX graph and returns a `NodeMap` to translate between
original node names and node handles.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "t", capacity=4)
    >>> graph, node_map = from_networkx(G, edge_attr="capacity")
    >>> graph.max_flow(node_map.to_ref["s"], node_map.to_ref["t"])
    4
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Optional, Tuple

import networkx as nx

from arenagraph.graph.arena import Graph, NodeRef

_NX_TYPES = (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)


@dataclass
class NodeMap:
    """Bidirectional mapping between NetworkX node names and node handles.

    Attributes:
        to_ref: Maps original node names to handles.
        to_name: Maps handles back to original node names.
    """

    to_ref: Dict[Hashable, NodeRef] = field(default_factory=dict)
    to_name: Dict[NodeRef, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Iterable[Hashable]) -> "NodeMap":
        """Create a NodeMap assigning handles to ``names`` in iteration order."""
        node_map = cls()
        for idx, name in enumerate(names):
            ref = NodeRef(idx)
            node_map.to_ref[name] = ref
            node_map.to_name[ref] = name
        return node_map

    def __len__(self) -> int:
        return len(self.to_ref)


def to_networkx(
    graph: Graph,
    *,
    node_attr: str = "payload",
    edge_attr: str = "payload",
) -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Nodes are keyed by node index and edges by edge index, so handles map
    straight onto the result: ``G.nodes[ref.idx]`` and
    ``G.edges[u.idx, v.idx, e.idx]``. Payloads are shared, not copied.

    Args:
        graph: Graph to convert.
        node_attr: Node attribute name holding the node payload.
        edge_attr: Edge attribute name holding the edge payload.

    Returns:
        nx.MultiDiGraph: Graph with one node per node slot and one keyed edge
        per edge slot, in insertion order.
    """
    nx_graph = nx.MultiDiGraph()
    for ref, payload in graph.nodes():
        nx_graph.add_node(ref.idx, **{node_attr: payload})
    for ref, src, dst, payload in graph.edges():
        nx_graph.add_edge(src.idx, dst.idx, key=ref.idx, **{edge_attr: payload})
    return nx_graph


def from_networkx(
    G: Any,
    *,
    edge_attr: Optional[str] = None,
    default: Any = None,
) -> Tuple[Graph, NodeMap]:
    """Build a `Graph` from a NetworkX graph.

    Node payloads are the original node names, in NetworkX iteration order.
    Edges of undirected NetworkX graphs become undirected edge pairs.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        edge_attr: If given, the edge payload is ``data[edge_attr]`` (or
            ``default`` when the attribute is missing). Otherwise the payload
            is a shallow copy of the edge attribute dict.
        default: Payload used when ``edge_attr`` is missing on an edge.

    Returns:
        Tuple of the new graph and the name/handle mapping.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    if not isinstance(G, _NX_TYPES):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(G.nodes())
    graph: Graph = Graph()
    for name in node_map.to_ref:
        graph.add_node(name)

    add_edge = graph.add_directed_edge if G.is_directed() else graph.add_undirected_edge
    for u, v, data in G.edges(data=True):
        payload = dict(data) if edge_attr is None else data.get(edge_attr, default)
        add_edge(node_map.to_ref[u], node_map.to_ref[v], payload)

    return graph, node_map
