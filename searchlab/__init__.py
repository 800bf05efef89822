"""Classic AI search, graph and constraint algorithms: A* 8-puzzle, BFS/DFS, Dijkstra, Prim, Kruskal, N-Queens and an employee evaluation expert system."""

__version__ = "0.1.0"