"""Board model for the N-Queens puzzle (solver mode)."""

from __future__ import annotations

from typing import Optional, Sequence


def is_safe(placement: Sequence[Optional[int]], row: int, col: int) -> bool:
    """Return True if a queen at (*row*, *col*) clashes with no earlier row.

    Only rows ``0..row-1`` are checked. Unplaced rows (``None``) are skipped;
    row clashes cannot happen because rows are filled one at a time.
    """
    for prev_row in range(row):
        prev_col = placement[prev_row]
        if prev_col is None:
            continue
        if prev_col == col or abs(prev_col - col) == abs(prev_row - row):
            return False
    return True


def _check_size(n: int) -> int:
    if n < 1:
        raise ValueError(f"Board size must be at least 1, got {n}.")
    return n


class QueensBoard:
    """One queen per row; ``columns[r]`` is the queen's column or ``None``."""

    def __init__(self, n: int) -> None:
        self.n = _check_size(n)
        self.columns: list[Optional[int]] = [None] * n

    def reset(self, n: int | None = None) -> None:
        if n is not None:
            self.n = _check_size(n)
        self.columns = [None] * self.n

    # -- mutation -------------------------------------------------------------

    def place(self, row: int, col: int) -> None:
        if not (0 <= row < self.n and 0 <= col < self.n):
            raise ValueError(
                f"Cell ({row}, {col}) is outside a {self.n}×{self.n} board."
            )
        self.columns[row] = col

    def remove(self, row: int) -> None:
        self.columns[row] = None

    # -- queries --------------------------------------------------------------

    def is_safe(self, row: int, col: int) -> bool:
        return is_safe(self.columns, row, col)

    @property
    def queens(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c in enumerate(self.columns) if c is not None]

    @property
    def is_complete(self) -> bool:
        return all(c is not None for c in self.columns)

    def snapshot(self) -> tuple[Optional[int], ...]:
        return tuple(self.columns)

    def __repr__(self) -> str:
        return f"QueensBoard(n={self.n}, columns={self.columns})"
