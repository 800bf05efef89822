"""N-queens solved by backtracking and by branch and bound."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence

Board = list[list[int]]


def is_safe(board: Sequence[Sequence[int]], row: int, col: int) -> bool:
    """True if no queen shares the row, column or either diagonal of (row, col)."""
    n = len(board)
    if any(board[row][i] == 1 or board[i][col] == 1 for i in range(n)):
        return False
    for d_row, d_col in ((-1, -1), (1, -1), (-1, 1), (1, 1)):
        i, j = row, col
        while 0 <= i < n and 0 <= j < n:
            if board[i][j] == 1:
                return False
            i += d_row
            j += d_col
    return True


def _empty(n: int) -> Board:
    if n < 0:
        raise ValueError("board size must not be negative")
    return [[0] * n for _ in range(n)]


def solve_backtracking(n: int) -> Board | None:
    """First placement found column by column with full attack checks, or None."""
    board = _empty(n)

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if is_safe(board, row, col):
                board[row][col] = 1
                if place(col + 1):
                    return True
                board[row][col] = 0
        return False

    return board if place(0) else None


def solve_branch_and_bound(n: int) -> Board | None:
    """First placement found using occupied row and diagonal sets, or None."""
    board = _empty(n)
    rows: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row + col in sums or col - row in diffs:
                continue
            rows.add(row)
            sums.add(row + col)
            diffs.add(col - row)
            board[row][col] = 1
            if place(col + 1):
                return True
            rows.discard(row)
            sums.discard(row + col)
            diffs.discard(col - row)
            board[row][col] = 0
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]], symbols: Sequence[str] = "01") -> str:
    """One line per row, each cell as symbols[cell] followed by a space."""
    return "".join("".join(f"{symbols[cell]} " for cell in row) + "\n" for row in board)


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Menu-driven solver reading the method and board size from standard input."""
    parser = argparse.ArgumentParser(description="Solve the N-queens problem.")
    parser.add_argument(
        "--symbols",
        default="01",
        help="two characters for an empty square and a queen (default: 01)",
    )
    args = parser.parse_args(argv)
    if len(args.symbols) != 2:
        parser.error("--symbols needs exactly two characters")

    tokens = _tokens(sys.stdin)
    while True:
        print("-------------------- N Queens Problem--------------------------")
        print("1. Backtracking")
        print("2. Branch and Bound")
        print("-1. Exit")
        print("----------------------------------------------")
        print("Enter choice:- ")
        try:
            choice = _next_int(tokens)
            if choice == -1:
                return 0
            print("Enter the board size (n): ", end="", flush=True)
            n = _next_int(tokens)
            solver = solve_backtracking if choice == 1 else solve_branch_and_bound
            board = solver(n)
        except EOFError:
            return 0
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 1
        if board is None:
            print("No solution exists")
        else:
            print("Solution exists:")
            print(format_board(board, args.symbols), end="")


if __name__ == "__main__":
    sys.exit(main())