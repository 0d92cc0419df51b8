"""A small integer matrix supporting addition."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["Matrix"]


class Matrix:
    """A rectangular matrix of numbers."""

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        data = tuple(tuple(row) for row in rows)
        if data and any(len(row) != len(data[0]) for row in data):
            raise ValueError("matrix rows differ in length")
        self.data = data

    @property
    def shape(self) -> tuple[int, int]:
        """Return (rows, columns)."""
        return len(self.data), len(self.data[0]) if self.data else 0

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("Invalid")
        return Matrix(
            [a + b for a, b in zip(row, other_row)]
            for row, other_row in zip(self.data, other.data)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self.data]!r})"

    def format(self) -> str:
        """Render one row per line with elements separated by spaces."""
        return "\n".join(" ".join(str(value) for value in row) for row in self.data)