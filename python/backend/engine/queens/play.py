"""Manual N-Queens play: the user places queens, conflicts are flagged live."""

from __future__ import annotations

from backend.engine.queens.conflicts import Queen, compute_conflicts, is_won


class QueensGame:
    """At most one queen per row; placing in an occupied row moves that queen."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"Board size must be at least 1, got {n}.")
        self.n = n
        self._queens: dict[int, int] = {}

    def reset(self, n: int | None = None) -> None:
        if n is not None:
            if n < 1:
                raise ValueError(f"Board size must be at least 1, got {n}.")
            self.n = n
        self._queens.clear()

    def toggle(self, row: int, col: int) -> None:
        """Remove the queen at (*row*, *col*), or place one there."""
        if not (0 <= row < self.n and 0 <= col < self.n):
            raise ValueError(
                f"Cell ({row}, {col}) is outside a {self.n}×{self.n} board."
            )
        if self._queens.get(row) == col:
            del self._queens[row]
        else:
            self._queens[row] = col

    @property
    def queens(self) -> list[Queen]:
        return sorted(self._queens.items())

    @property
    def conflicts(self) -> set[Queen]:
        return compute_conflicts(self.queens)

    @property
    def is_won(self) -> bool:
        return is_won(self.queens, self.n)
