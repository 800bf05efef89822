"""A* search over the 3x3 sliding-tile puzzle."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

N = 3

# Left, Right, Up, Down: the direction the empty tile moves.
_MOVES = ((0, -1), (0, 1), (-1, 0), (1, 0))

Tiles = tuple[tuple[int, ...], ...]


def manhattan_distance(tiles: Sequence[Sequence[int]]) -> int:
    """Sum of each non-empty tile's distance from its place in 1..8,0 order."""
    return sum(
        abs(i - (value - 1) // N) + abs(j - (value - 1) % N)
        for i, row in enumerate(tiles)
        for j, value in enumerate(row)
        if value != 0
    )


@dataclass(frozen=True)
class PuzzleState:
    """A board, the position of its empty tile, moves so far and heuristic."""

    tiles: Tiles
    zero: tuple[int, int]
    g: int = 0
    h: int = 0

    @property
    def cost(self) -> int:
        """Estimated total cost, moves made plus heuristic."""
        return self.g + self.h

    def successors(self) -> list[PuzzleState]:
        """States reachable by sliding one tile into the empty square."""
        row, col = self.zero
        result = []
        for d_row, d_col in _MOVES:
            new_row, new_col = row + d_row, col + d_col
            if not (0 <= new_row < N and 0 <= new_col < N):
                continue
            grid = [list(line) for line in self.tiles]
            grid[row][col], grid[new_row][new_col] = grid[new_row][new_col], grid[row][col]
            tiles = tuple(tuple(line) for line in grid)
            result.append(
                PuzzleState(tiles, (new_row, new_col), self.g + 1, manhattan_distance(tiles))
            )
        return result


def make_state(tiles: Iterable[Iterable[int]]) -> PuzzleState:
    """Build a starting state (no moves made) from a 3x3 grid holding a 0."""
    grid = tuple(tuple(int(value) for value in row) for row in tiles)
    if len(grid) != N or any(len(row) != N for row in grid):
        raise ValueError(f"puzzle must be {N}x{N}")
    zeros = [(i, j) for i, row in enumerate(grid) for j, value in enumerate(row) if value == 0]
    if not zeros:
        raise ValueError("puzzle has no empty tile (0)")
    return PuzzleState(grid, zeros[-1], 0, manhattan_distance(grid))


def a_star_search(initial: PuzzleState, goal: PuzzleState) -> Iterator[PuzzleState]:
    """Yield states in the order they are expanded, ending with the goal if found."""
    order = itertools.count()
    frontier = [(initial.cost, next(order), initial)]
    visited: set[Tiles] = set()
    while frontier:
        _, _, current = heapq.heappop(frontier)
        yield current
        if current.tiles == goal.tiles:
            return
        for following in current.successors():
            if following.tiles not in visited:
                visited.add(following.tiles)
                heapq.heappush(frontier, (following.cost, next(order), following))


def format_puzzle(state: PuzzleState) -> str:
    """Render the board one row per line, followed by a separator line."""
    rows = "".join("".join(f"{value} " for value in row) + "\n" for row in state.tiles)
    return rows + "-----\n"


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask_int(tokens: Iterator[str], prompt: str) -> int:
    print(prompt, end="", flush=True)
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None
    return int(token)


def _read_state(tokens: Iterator[str], prompt: str) -> PuzzleState:
    print(f"{prompt} (0 represents the empty tile):")
    grid = [
        [_ask_int(tokens, f"Enter value at position ({i}, {j}): ") for j in range(N)]
        for i in range(N)
    ]
    return make_state(grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Read two boards from standard input and trace the A* search between them."""
    parser = argparse.ArgumentParser(description="Solve the 8-puzzle with A* search.")
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        initial = _read_state(tokens, "Enter the initial state of the puzzle")
        goal = _read_state(tokens, "Enter the final state of the puzzle")
    except (EOFError, ValueError) as error:
        print(f"\nerror: {error}", file=sys.stderr)
        return 1

    print("Initial State:")
    print(format_puzzle(initial), end="")

    for state in a_star_search(initial, goal):
        print("Current State:")
        print(format_puzzle(state), end="")
        print(f"Number of moves: {state.g}")
        print(f"Heuristic cost: {state.h}")
        print("-------------------")
        if state.tiles == goal.tiles:
            print("Goal State Reached!")
            print(f"Number of moves: {state.g}")
            print(f"Heuristic cost: {state.h}")
    return 0


if __name__ == "__main__":
    sys.exit(main())