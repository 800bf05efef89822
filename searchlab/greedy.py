"""Greedy graph algorithms on adjacency matrices: Dijkstra, Prim and Kruskal."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Matrix = list[list[int]]


def _square(matrix: Sequence[Sequence[int]]) -> Matrix:
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("graph has no vertices")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("adjacency matrix must be square")
    return rows


def build_matrix(vertex_count: int, edges: Iterable[tuple[int, int, int]]) -> Matrix:
    """Symmetric adjacency matrix from 1-based (u, v, weight) edges; 0 means no edge."""
    if vertex_count < 1:
        raise ValueError("graph needs at least one vertex")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for u, v, weight in edges:
        if not (1 <= u <= vertex_count and 1 <= v <= vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 1..{vertex_count}")
        matrix[u - 1][v - 1] = weight
        matrix[v - 1][u - 1] = weight
    return matrix


class DisjointSet:
    """Union-find with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, node: int) -> int:
        """Representative of the set holding ``node``."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; False if they were already one set."""
        pu, pv = self.find(u), self.find(v)
        if pu == pv:
            return False
        if self._rank[pu] > self._rank[pv]:
            self._parent[pv] = pu
        elif self._rank[pu] < self._rank[pv]:
            self._parent[pu] = pv
        else:
            self._parent[pv] = pu
            self._rank[pu] += 1
        return True


@dataclass(frozen=True)
class SpanningTree:
    """Total weight of a spanning tree and each vertex's parent (None at the root)."""

    cost: int
    parents: tuple[int | None, ...]

    def path_from_last(self) -> list[int]:
        """Vertices from the last one up through its parents to the root, 0-based."""
        node: int | None = len(self.parents) - 1
        path = []
        while node is not None:
            path.append(node)
            node = self.parents[node]
        return path


def dijkstra(matrix: Sequence[Sequence[int]]) -> list[int | None]:
    """Shortest distances from vertex 0 over positive weights; None if unreachable."""
    rows = _square(matrix)
    dist: list[int | None] = [None] * len(rows)
    dist[0] = 0
    visited: set[int] = set()
    for _ in rows:
        candidates = [
            (d, i) for i, d in enumerate(dist) if i not in visited and d is not None
        ]
        if not candidates:
            break
        base, node = min(candidates)
        visited.add(node)
        for neighbour, weight in enumerate(rows[node]):
            if weight <= 0 or neighbour in visited:
                continue
            current = dist[neighbour]
            if current is None or base + weight < current:
                dist[neighbour] = base + weight
    return dist


def prim(matrix: Sequence[Sequence[int]]) -> SpanningTree:
    """Minimum spanning tree grown from vertex 0; non-zero entries are edges."""
    rows = _square(matrix)
    count = len(rows)
    in_tree = [False] * count
    parents: list[int | None] = [None] * count
    cost = 0
    heap = [(0, 0, -1)]
    while heap:
        weight, node, parent = heapq.heappop(heap)
        if in_tree[node]:
            continue
        in_tree[node] = True
        cost += weight
        parents[node] = None if parent < 0 else parent
        for neighbour, edge in enumerate(rows[node]):
            if edge != 0 and not in_tree[neighbour]:
                heapq.heappush(heap, (edge, neighbour, node))
    return SpanningTree(cost, tuple(parents))


def kruskal(matrix: Sequence[Sequence[int]]) -> int:
    """Weight of a minimum spanning forest, taking edges in (weight, u, v) order."""
    rows = _square(matrix)
    count = len(rows)
    candidates = sorted(
        (weight, u, v)
        for u, row in enumerate(rows)
        for v, weight in enumerate(row)
        if weight != 0
    )
    sets = DisjointSet(count)
    cost = 0
    taken = 0
    for weight, u, v in candidates:
        if not sets.union(u, v):
            continue
        cost += weight
        taken += 1
        if taken == count - 1:
            break
    return cost


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_graph(tokens: Iterator[str]) -> Matrix:
    print("Enter the number of vertices: ")
    vertex_count = _next_int(tokens)
    print("Enter the number of edges: ")
    edge_count = _next_int(tokens)
    edges = []
    for _ in range(edge_count):
        print("Enter the node1, node2 and weight:- ")
        edges.append((_next_int(tokens), _next_int(tokens), _next_int(tokens)))
    return build_matrix(vertex_count, edges)


def main(argv: Sequence[str] | None = None) -> int:
    """Menu-driven runner reading graphs from standard input."""
    parser = argparse.ArgumentParser(description="Greedy graph algorithms.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    while True:
        print("----------------------Greedy Algorithm----------------------")
        print("1. Dijkstra Algorithm")
        print("2. Prim's Algorithm")
        print("3. Kruskal's Algorithm")
        print("-1. Exit")
        print("------------------------------------------------------------")
        print("Enter your choice:- ")
        try:
            choice = _next_int(tokens)
            if choice == -1:
                return 0
            matrix = _read_graph(tokens)
        except EOFError:
            return 0
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1

        if choice == 1:
            for vertex, distance in enumerate(dijkstra(matrix), start=1):
                shown = "unreachable" if distance is None else distance
                print(f"Distance to {vertex}: {shown}")
        elif choice == 2:
            tree = prim(matrix)
            print("->".join(str(node + 1) for node in tree.path_from_last()))
            print(f"Cost of MST:- {tree.cost}")
        else:
            print(f"Cost:- {kruskal(matrix)}")


if __name__ == "__main__":
    sys.exit(main())