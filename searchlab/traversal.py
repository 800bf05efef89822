"""Breadth-first and depth-first traversal of adjacency lists from node 0."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check(adjacency: Sequence[Sequence[int]]) -> None:
    if not adjacency:
        raise ValueError("graph has no vertices")
    count = len(adjacency)
    for node, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            if not 0 <= neighbour < count:
                raise ValueError(f"node {node} lists unknown neighbour {neighbour}")


def bfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Nodes reachable from 0 in breadth-first order."""
    _check(adjacency)
    visited = {0}
    queue = deque([0])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first order from 0, tracking visited nodes per path.

    Only the nodes on the current path count as visited, so a node reached by
    several simple paths from 0 is listed once for each of them.  On a tree
    this is the ordinary pre-order.
    """
    _check(adjacency)
    order: list[int] = []

    def visit(node: int, path: frozenset[int]) -> None:
        path = path | {node}
        order.append(node)
        for neighbour in adjacency[node]:
            if neighbour not in path:
                visit(neighbour, path)

    visit(0, frozenset())
    return order