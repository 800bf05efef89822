# searchlab

Classic AI search, graph and constraint algorithms, usable as a library or
run interactively from the command line. No third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `searchlab.puzzle`: A* on the 3×3 sliding-tile puzzle

- `make_state(tiles)` builds a starting `PuzzleState` from a 3×3 grid that
  holds a `0` for the empty square; it raises `ValueError` for a grid of the
  wrong shape or one without a `0`.
- `PuzzleState` is a frozen dataclass with `tiles`, `zero` (position of the
  empty square), `g` (moves made), `h` (heuristic) and the property `cost`
  (`g + h`). `successors()` returns the states reached by moving the empty
  square left, right, up or down.
- `manhattan_distance(tiles)` sums each tile's distance from its place in the
  layout `1 2 3 / 4 5 6 / 7 8 0`. The heuristic always measures against this
  layout, whatever goal is passed to the search.
- `a_star_search(initial, goal)` is a generator that yields states in the
  order they are expanded and stops after yielding the goal. If the goal
  cannot be reached, it yields until the frontier is exhausted.
- `format_puzzle(state)` renders the board one row per line followed by
  `-----`.

### `searchlab.traversal`: BFS and DFS from node 0

- `bfs(adjacency)` returns the nodes reachable from node 0 in breadth-first
  order.
- `dfs(adjacency)` returns a depth-first order from node 0. Only nodes on the
  current path count as visited, so on a graph with several simple paths to a
  node that node is listed once per path; on a tree it is the ordinary
  pre-order.

Both raise `ValueError` for an empty graph or a neighbour index outside the
graph.

### `searchlab.greedy`: Dijkstra, Prim and Kruskal

- `build_matrix(vertex_count, edges)` makes a symmetric adjacency matrix from
  1-based `(u, v, weight)` edges; `0` means no edge.
- `dijkstra(matrix)` returns shortest distances from vertex 0 over positive
  weights, with `None` for unreachable vertices.
- `prim(matrix)` returns a `SpanningTree` grown from vertex 0, with `cost` and
  `parents` (`None` at the root and at vertices not reached).
  `SpanningTree.path_from_last()` walks from the last vertex up to the root,
  0-based.
- `kruskal(matrix)` returns the total weight of a minimum spanning forest.
- `DisjointSet` is a union-find with path compression and union by rank;
  `union(u, v)` returns `False` if the two were already in one set.

### `searchlab.queens`: N-Queens

- `solve_backtracking(n)` and `solve_branch_and_bound(n)` return the first
  placement found (a list of rows, `1` for a queen) or `None` when there is no
  solution. A negative `n` raises `ValueError`.
- `is_safe(board, row, col)` checks the row, column and both diagonals.
- `format_board(board, symbols="01")` renders each cell as `symbols[cell]`
  followed by a space: the first symbol is an empty square, the second a
  queen.

### `searchlab.expert`: employee performance evaluation

- `Employee` holds ratings on a 0–10 scale (`punctuality`,
  `task_completion`, `quality`, `communication`, `teamwork`), `late_days` and
  `base_salary` (default 50000).
- `Employee.evaluate()` returns an `Evaluation` with a weighted
  `final_score`, `performance`, `badge`, `recommendation`, improvement
  `suggestions` for ratings below 6, and `salary` reduced by 500 per late day.
- `Evaluation.report()` gives a readable report; `Evaluation.csv_row()` a
  comma-separated summary line.
- `summarize(evaluations)` returns a `TeamSummary` with the `average` score
  and the first employee with the highest score (`best_performer`,
  `best_score`); it raises `ValueError` for no evaluations.

## Library use

```python
from searchlab.traversal import bfs, dfs
from searchlab.greedy import build_matrix, kruskal, prim
from searchlab.queens import solve_backtracking, format_board

adjacency = [[1, 2], [0, 3], [0], [1]]
print(bfs(adjacency))   # [0, 1, 2, 3]
print(dfs(adjacency))   # [0, 1, 3, 2]

matrix = build_matrix(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)])
print(kruskal(matrix))  # 5
print(prim(matrix).path_from_last())  # [2, 1, 0]

board = solve_backtracking(4)
print(format_board(board, ".Q"))
```

## Command-line programs

Each program reads its input from standard input, as whitespace-separated
tokens, and prompts for it.

```
searchlab-puzzle                 # enter start and goal boards, watch A* expand states
searchlab-greedy                 # menu: 1 Dijkstra, 2 Prim, 3 Kruskal on an entered graph; -1 exits
searchlab-queens [--symbols XY]  # menu: 1 backtracking, 2 branch and bound; -1 exits
searchlab-expert [--output FILE] # evaluate employees; writes employee_summary.txt by default
```

`searchlab-greedy` reads vertex and edge counts and then 1-based edges;
Dijkstra prints the distance to each vertex, Prim prints the path from the
last vertex to the root and the tree's cost, Kruskal prints the cost.

`searchlab-expert` keeps evaluating while the answer to "evaluate another"
starts with `y` or `Y`. The output file holds a CSV header, one row per
employee, then the team average and best performer.

## Limitations

- The puzzle is fixed at 3×3.
- Graph traversal has no command; `bfs` and `dfs` are library functions only.
- Nothing is stored between runs apart from the summary file that
  `searchlab-expert` writes, which is overwritten each time.