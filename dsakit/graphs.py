"""Graphs: deep copies of node graphs and topological ordering."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(eq=False)
class GraphNode:
    """A graph vertex holding a value and its outgoing neighbours."""

    value: Any
    neighbors: list["GraphNode"] = field(default_factory=list, repr=False)


def clone_graph(node: Optional[GraphNode]) -> Optional[GraphNode]:
    """Deep-copy the graph reachable from ``node``, preserving its cycles."""
    copies: dict[GraphNode, GraphNode] = {}

    def copy(original: GraphNode) -> GraphNode:
        existing = copies.get(original)
        if existing is not None:
            return existing
        duplicate = GraphNode(original.value)
        copies[original] = duplicate
        duplicate.neighbors = [copy(neighbor) for neighbor in original.neighbors]
        return duplicate

    return None if node is None else copy(node)


def topological_sort(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Order vertices so each edge points forward (Kahn's algorithm).

    ``adjacency[u]`` lists the vertices ``u`` has edges to. Vertices caught in
    a cycle, or reachable only through one, are left out of the result.
    """
    indegree = [0] * len(adjacency)
    for targets in adjacency:
        for target in targets:
            indegree[target] += 1
    ready = deque(vertex for vertex, count in enumerate(indegree) if count == 0)
    order: list[int] = []
    while ready:
        vertex = ready.popleft()
        order.append(vertex)
        for target in adjacency[vertex]:
            indegree[target] -= 1
            if indegree[target] == 0:
                ready.append(target)
    return order