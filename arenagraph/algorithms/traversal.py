"""Depth-first and breadth-first traversal with injected visitors.

Both walks start from a single node and follow directed edges only. The node
visitor fires exactly once per reachable node. The edge visitor fires once for
every outgoing edge of each visited node, including edges that lead back to
nodes already seen.

Visitors are plain callables taking ``(ref, payload)``; pass ``None`` to skip
one. To stop a walk early, let the visitor record that it is done and ignore
further calls, or raise: exceptions from visitors propagate unchanged.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Optional

from arenagraph.graph.arena import (
    AdjEntry,
    EdgeVisitor,
    Graph,
    NodeRef,
    NodeVisitor,
)


def _noop(_ref, _payload) -> None:
    return None


def visit_dfs(
    graph: Graph,
    begin: NodeRef,
    node_visitor: Optional[NodeVisitor] = None,
    edge_visitor: Optional[EdgeVisitor] = None,
) -> None:
    """Depth-first traversal from ``begin``.

    Nodes are visited in pre-order. For each visited node its adjacency list
    is walked in insertion order; every entry fires the edge visitor and then
    descends into the neighbour if it has not been visited yet.

    The walk keeps an explicit stack of adjacency iterators instead of
    recursing, so long chains do not hit the interpreter recursion limit. The
    visit order is identical to the recursive formulation.

    Args:
        graph: Graph to walk.
        begin: Start node.
        node_visitor: Called as ``node_visitor(node_ref, node_payload)``.
        edge_visitor: Called as ``edge_visitor(edge_ref, edge_payload)``.

    Raises:
        IndexError: If ``begin`` does not index a node of ``graph``.
    """
    on_node = _noop if node_visitor is None else node_visitor
    on_edge = _noop if edge_visitor is None else edge_visitor

    nodes = graph._nodes
    edges = graph._edges
    adjacency = graph._adjacency

    start = graph._check_node(begin)
    visited = [False] * len(nodes)

    visited[start] = True
    on_node(begin, nodes[start])
    stack: List[Iterator[AdjEntry]] = [iter(adjacency[start])]

    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue

        on_edge(entry.edge, edges[entry.edge.idx])

        neighbor = entry.node.idx
        if visited[neighbor]:
            continue
        visited[neighbor] = True
        on_node(entry.node, nodes[neighbor])
        stack.append(iter(adjacency[neighbor]))


def visit_dfs_nodes(graph: Graph, begin: NodeRef, node_visitor: NodeVisitor) -> None:
    """Visit every node reachable from ``begin`` in depth-first order."""
    visit_dfs(graph, begin, node_visitor, None)


def visit_dfs_edges(graph: Graph, begin: NodeRef, edge_visitor: EdgeVisitor) -> None:
    """Visit the outgoing edges of reachable nodes in depth-first order."""
    visit_dfs(graph, begin, None, edge_visitor)


def visit_bfs(
    graph: Graph,
    begin: NodeRef,
    node_visitor: Optional[NodeVisitor] = None,
    edge_visitor: Optional[EdgeVisitor] = None,
) -> None:
    """Breadth-first traversal from ``begin``.

    A FIFO queue is seeded with ``begin``. Each popped node that has not been
    visited yet is marked, handed to the node visitor, and its adjacency list
    is walked: every entry fires the edge visitor and enqueues the neighbour
    unconditionally. Duplicate queue entries are dropped when popped.

    Nodes come out in non-decreasing hop distance from ``begin``, ties broken
    by adjacency insertion order.

    Args:
        graph: Graph to walk.
        begin: Start node.
        node_visitor: Called as ``node_visitor(node_ref, node_payload)``.
        edge_visitor: Called as ``edge_visitor(edge_ref, edge_payload)``.

    Raises:
        IndexError: If ``begin`` does not index a node of ``graph``.
    """
    on_node = _noop if node_visitor is None else node_visitor
    on_edge = _noop if edge_visitor is None else edge_visitor

    nodes = graph._nodes
    edges = graph._edges
    adjacency = graph._adjacency

    start = graph._check_node(begin)
    visited = [False] * len(nodes)
    queue = deque([NodeRef(start)])

    while queue:
        node = queue.popleft()
        if visited[node.idx]:
            continue
        visited[node.idx] = True
        on_node(node, nodes[node.idx])

        for entry in adjacency[node.idx]:
            on_edge(entry.edge, edges[entry.edge.idx])
            queue.append(entry.node)


def visit_bfs_nodes(graph: Graph, begin: NodeRef, node_visitor: NodeVisitor) -> None:
    """Visit every node reachable from ``begin`` in breadth-first order."""
    visit_bfs(graph, begin, node_visitor, None)


def visit_bfs_edges(graph: Graph, begin: NodeRef, edge_visitor: EdgeVisitor) -> None:
    """Visit the outgoing edges of reachable nodes in breadth-first order."""
    visit_bfs(graph, begin, None, edge_visitor)
