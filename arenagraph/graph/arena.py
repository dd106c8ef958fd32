"""Append-only arena graph with stable index handles.

`Graph` stores node payloads, edge payloads, per-node adjacency lists and an
edge incidence table in plain Python lists. Nodes and edges are addressed by
`NodeRef` / `EdgeRef` handles which are nothing more than list positions, so
the graph never holds references between its own elements and handles stay
valid for the lifetime of the graph (there is no removal).

Handles do not know which graph produced them. Passing a handle to a graph
that did not create it is a caller error: an out-of-range index raises
``IndexError``, an in-range one silently addresses the wrong slot.
"""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass
from pickle import dumps, loads
from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)

if TYPE_CHECKING:
    from arenagraph.algorithms.base import PathSearch

N = TypeVar("N")
E = TypeVar("E")


@dataclass(frozen=True, order=True)
class NodeRef:
    """Handle to a node slot in a `Graph`.

    Attributes:
        idx: Position of the node in the node arena.
    """

    idx: int

    def __repr__(self) -> str:
        return f"NodeRef({self.idx})"


@dataclass(frozen=True, order=True)
class EdgeRef:
    """Handle to a directed edge slot in a `Graph`.

    Attributes:
        idx: Position of the edge in the edge arena.
    """

    idx: int

    def __repr__(self) -> str:
        return f"EdgeRef({self.idx})"


class AdjEntry(NamedTuple):
    """Outgoing adjacency entry: the neighbour and the edge leading to it."""

    node: NodeRef
    edge: EdgeRef


class IncEntry(NamedTuple):
    """Endpoints of a directed edge."""

    src: NodeRef
    dst: NodeRef


NodeVisitor = Callable[[NodeRef, N], object]
EdgeVisitor = Callable[[EdgeRef, E], object]


class Graph(Generic[N, E]):
    """Directed multigraph backed by append-only arenas.

    Self-loops and parallel edges are kept as separate edges. Adjacency and
    incidence entries are always written together: for every edge ``e = u->v``
    ``endpoints(e) == (u, v)`` and ``neighbors(u)`` holds ``(v, e)`` once.

    Example:
        >>> g = Graph()
        >>> a = g.add_node("A")
        >>> b = g.add_node("B")
        >>> e = g.add_directed_edge(a, b, 3)
        >>> g[e]
        3
        >>> g.max_flow(a, b)
        3
    """

    def __init__(self) -> None:
        self._nodes: List[N] = []
        self._edges: List[E] = []
        self._adjacency: List[List[AdjEntry]] = []
        self._incidence: List[IncEntry] = []

    @classmethod
    def empty(cls) -> Graph[N, E]:
        """Construct an empty graph."""
        return cls()

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def node_count(self) -> int:
        """Number of nodes in the arena."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Number of directed edges in the arena."""
        return len(self._edges)

    #
    # Handle validation
    #
    def _check_node(self, ref: NodeRef) -> int:
        if not isinstance(ref, NodeRef):
            raise TypeError(f"Expected NodeRef, got {type(ref).__name__}")
        if not 0 <= ref.idx < len(self._nodes):
            raise IndexError(
                f"{ref!r} is out of range for a graph with {len(self._nodes)} nodes"
            )
        return ref.idx

    def _check_edge(self, ref: EdgeRef) -> int:
        if not isinstance(ref, EdgeRef):
            raise TypeError(f"Expected EdgeRef, got {type(ref).__name__}")
        if not 0 <= ref.idx < len(self._edges):
            raise IndexError(
                f"{ref!r} is out of range for a graph with {len(self._edges)} edges"
            )
        return ref.idx

    def has_node(self, ref: NodeRef) -> bool:
        """Return True if ``ref`` indexes a node slot of this graph."""
        return isinstance(ref, NodeRef) and 0 <= ref.idx < len(self._nodes)

    def has_edge(self, ref: EdgeRef) -> bool:
        """Return True if ``ref`` indexes an edge slot of this graph."""
        return isinstance(ref, EdgeRef) and 0 <= ref.idx < len(self._edges)

    #
    # Construction
    #
    def add_node(self, payload: N) -> NodeRef:
        """Append a node and return its handle.

        Args:
            payload: Value stored in the new node slot.

        Returns:
            NodeRef: Handle equal to the node's arena position.
        """
        ref = NodeRef(len(self._nodes))
        self._nodes.append(payload)
        self._adjacency.append([])
        return ref

    def add_directed_edge(self, src: NodeRef, dst: NodeRef, payload: E) -> EdgeRef:
        """Append a directed edge ``src -> dst`` and return its handle.

        Both endpoints are validated before anything is written, so a failed
        call leaves the graph untouched.

        Args:
            src: Source node handle.
            dst: Destination node handle.
            payload: Value stored in the new edge slot.

        Returns:
            EdgeRef: Handle equal to the edge's arena position.

        Raises:
            IndexError: If either handle does not index a node of this graph.
            TypeError: If either handle is not a NodeRef.
        """
        src_idx = self._check_node(src)
        self._check_node(dst)

        ref = EdgeRef(len(self._edges))
        self._edges.append(payload)
        self._adjacency[src_idx].append(AdjEntry(dst, ref))
        self._incidence.append(IncEntry(src, dst))
        return ref

    def add_undirected_edge(
        self, a: NodeRef, b: NodeRef, payload: E
    ) -> Tuple[EdgeRef, EdgeRef]:
        """Add ``a -> b`` and ``b -> a`` carrying independent payload copies.

        Each edge stores its own deep copy of ``payload``; neither aliases the
        caller's object nor the other direction.

        Args:
            a: First endpoint.
            b: Second endpoint.
            payload: Value for both directions; must support ``copy.deepcopy``.

        Returns:
            Tuple[EdgeRef, EdgeRef]: Handles for ``a -> b`` and ``b -> a``.
        """
        self._check_node(a)
        self._check_node(b)
        forward = self.add_directed_edge(a, b, _copy.deepcopy(payload))
        backward = self.add_directed_edge(b, a, _copy.deepcopy(payload))
        return forward, backward

    #
    # Payload access
    #
    @overload
    def __getitem__(self, ref: NodeRef) -> N: ...

    @overload
    def __getitem__(self, ref: EdgeRef) -> E: ...

    def __getitem__(self, ref: Union[NodeRef, EdgeRef]) -> Union[N, E]:
        if isinstance(ref, EdgeRef):
            return self._edges[self._check_edge(ref)]
        return self._nodes[self._check_node(ref)]

    @overload
    def __setitem__(self, ref: NodeRef, value: N) -> None: ...

    @overload
    def __setitem__(self, ref: EdgeRef, value: E) -> None: ...

    def __setitem__(self, ref: Union[NodeRef, EdgeRef], value) -> None:
        if isinstance(ref, EdgeRef):
            self._edges[self._check_edge(ref)] = value
        else:
            self._nodes[self._check_node(ref)] = value

    #
    # Structure queries
    #
    def node_refs(self) -> Iterator[NodeRef]:
        """Iterate node handles in insertion order."""
        return (NodeRef(i) for i in range(len(self._nodes)))

    def edge_refs(self) -> Iterator[EdgeRef]:
        """Iterate edge handles in insertion order."""
        return (EdgeRef(i) for i in range(len(self._edges)))

    def nodes(self) -> Iterator[Tuple[NodeRef, N]]:
        """Iterate ``(NodeRef, payload)`` pairs in insertion order."""
        for i, payload in enumerate(self._nodes):
            yield NodeRef(i), payload

    def edges(self) -> Iterator[Tuple[EdgeRef, NodeRef, NodeRef, E]]:
        """Iterate ``(EdgeRef, src, dst, payload)`` tuples in insertion order."""
        for i, (payload, inc) in enumerate(zip(self._edges, self._incidence)):
            yield EdgeRef(i), inc.src, inc.dst, payload

    def neighbors(self, node: NodeRef) -> Tuple[AdjEntry, ...]:
        """Return the adjacency entries of ``node`` in insertion order."""
        return tuple(self._adjacency[self._check_node(node)])

    def out_edges(self, node: NodeRef) -> List[EdgeRef]:
        """Return handles of the edges leaving ``node``."""
        return [adj.edge for adj in self._adjacency[self._check_node(node)]]

    def in_edges(self, node: NodeRef) -> List[EdgeRef]:
        """Return handles of the edges entering ``node``.

        This scans the incidence table, so it is O(E).
        """
        self._check_node(node)
        return [
            EdgeRef(i) for i, inc in enumerate(self._incidence) if inc.dst == node
        ]

    def endpoints(self, edge: EdgeRef) -> IncEntry:
        """Return the ``(src, dst)`` pair connected by ``edge``."""
        return self._incidence[self._check_edge(edge)]

    def edges_between(self, u: NodeRef, v: NodeRef) -> List[EdgeRef]:
        """List handles of all edges ``u -> v``, or an empty list if none exist."""
        u_idx = self._check_node(u)
        self._check_node(v)
        return [adj.edge for adj in self._adjacency[u_idx] if adj.node == v]

    def copy(self) -> Graph[N, E]:
        """Return a deep copy of this graph.

        Handles issued by the original resolve to the same slots in the copy.
        Payloads must be picklable.
        """
        return loads(dumps(self))

    #
    # Traversal
    #
    def visit_dfs(
        self,
        begin: NodeRef,
        node_visitor: Optional[NodeVisitor] = None,
        edge_visitor: Optional[EdgeVisitor] = None,
    ) -> None:
        """Depth-first walk from ``begin``; see `arenagraph.algorithms.traversal`."""
        # Import here to avoid circular import
        from arenagraph.algorithms.traversal import visit_dfs

        visit_dfs(self, begin, node_visitor, edge_visitor)

    def visit_dfs_nodes(self, begin: NodeRef, node_visitor: NodeVisitor) -> None:
        """Visit reachable nodes in depth-first order."""
        self.visit_dfs(begin, node_visitor, None)

    def visit_dfs_edges(self, begin: NodeRef, edge_visitor: EdgeVisitor) -> None:
        """Visit outgoing edges of reachable nodes in depth-first order."""
        self.visit_dfs(begin, None, edge_visitor)

    def visit_bfs(
        self,
        begin: NodeRef,
        node_visitor: Optional[NodeVisitor] = None,
        edge_visitor: Optional[EdgeVisitor] = None,
    ) -> None:
        """Breadth-first walk from ``begin``; see `arenagraph.algorithms.traversal`."""
        from arenagraph.algorithms.traversal import visit_bfs

        visit_bfs(self, begin, node_visitor, edge_visitor)

    def visit_bfs_nodes(self, begin: NodeRef, node_visitor: NodeVisitor) -> None:
        """Visit reachable nodes in breadth-first order."""
        self.visit_bfs(begin, node_visitor, None)

    def visit_bfs_edges(self, begin: NodeRef, edge_visitor: EdgeVisitor) -> None:
        """Visit outgoing edges of reachable nodes in breadth-first order."""
        self.visit_bfs(begin, None, edge_visitor)

    #
    # Flow
    #
    def max_flow(
        self,
        src: NodeRef,
        dst: NodeRef,
        path_search: Optional[PathSearch] = None,
    ) -> int:
        """Maximum flow from ``src`` to ``dst`` using edge payloads as capacities."""
        from arenagraph.algorithms.max_flow import calc_max_flow

        return calc_max_flow(self, src, dst, path_search=path_search)  # type: ignore[arg-type]

    def min_cut(
        self,
        src: NodeRef,
        dst: NodeRef,
        path_search: Optional[PathSearch] = None,
    ) -> int:
        """Capacity of the minimum ``src``/``dst`` cut; equal to ``max_flow``."""
        return self.max_flow(src, dst, path_search=path_search)
