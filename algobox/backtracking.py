"""Backtracking puzzles: knight's tour, N queens, Tower of Hanoi, permutations."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "knights_tour",
    "solve_n_queens",
    "format_board",
    "hanoi_moves",
    "permutations",
]

_KNIGHT_MOVES = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))


def knights_tour(
    size: int = 8, start_row: int = 0, start_col: int = 0
) -> list[list[int]] | None:
    """Find a knight's tour by plain backtracking.

    Returns a board whose cells hold the move number (1 to size*size) at
    which the knight lands there, or None if no tour exists from the start.
    """
    if size < 1:
        raise ValueError("board size must be positive")
    if not (0 <= start_row < size and 0 <= start_col < size):
        raise ValueError("start square is off the board")
    board = [[0] * size for _ in range(size)]
    total = size * size

    def solve(row: int, col: int, step: int) -> bool:
        board[row][col] = step
        if step == total:
            return True
        for dr, dc in _KNIGHT_MOVES:
            nr, nc = row + dr, col + dc
            if 0 <= nr < size and 0 <= nc < size and board[nr][nc] == 0:
                if solve(nr, nc, step + 1):
                    return True
        board[row][col] = 0
        return False

    return board if solve(start_row, start_col, 1) else None


def solve_n_queens(n: int) -> list[list[int]] | None:
    """Place n non-attacking queens column by column.

    Returns the board with 1 where a queen stands, or None when no
    placement exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row + col in sums or row - col in diffs:
                continue
            board[row][col] = 1
            rows.add(row)
            sums.add(row + col)
            diffs.add(row - col)
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            sums.discard(row + col)
            diffs.discard(row - col)
        return False

    return board if place(0) else None


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render a board one row per line with cells separated by spaces."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in board)


def hanoi_moves(
    n: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[tuple[int, str, str]]:
    """Return the moves (disk, from_rod, to_rod) that solve Tower of Hanoi."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    moves: list[tuple[int, str, str]] = []

    def move(disks: int, frm: str, to: str, via: str) -> None:
        if disks == 0:
            return
        move(disks - 1, frm, via, to)
        moves.append((disks, frm, to))
        move(disks - 1, via, to, frm)

    move(n, source, target, auxiliary)
    return moves


def permutations(text: str) -> list[str]:
    """Return every arrangement of text in swap-based recursion order."""
    chars = list(text)
    last = len(chars) - 1
    result: list[str] = []

    def permute(pos: int) -> None:
        if pos == last:
            result.append("".join(chars))
            return
        for other in range(pos, last + 1):
            chars[pos], chars[other] = chars[other], chars[pos]
            permute(pos + 1)
            chars[pos], chars[other] = chars[other], chars[pos]

    if chars:
        permute(0)
    return result