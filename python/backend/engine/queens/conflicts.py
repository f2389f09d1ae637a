"""Attack detection for hand-placed queens."""

from __future__ import annotations

from typing import Iterable

Queen = tuple[int, int]


def compute_conflicts(placements: Iterable[Queen]) -> set[Queen]:
    """Return every placement attacked by at least one other placement.

    Two queens attack each other when they share a row, a column, or a
    diagonal. Checked pairwise, so O(k²) in the number of queens.
    """
    queens = list(dict.fromkeys(placements))
    conflicts: set[Queen] = set()

    for i, (r1, c1) in enumerate(queens):
        for r2, c2 in queens[i + 1 :]:
            if r1 == r2 or c1 == c2 or abs(r1 - r2) == abs(c1 - c2):
                conflicts.add((r1, c1))
                conflicts.add((r2, c2))
    return conflicts


def is_won(placements: Iterable[Queen], n: int) -> bool:
    """True when exactly *n* queens are placed and none attack each other."""
    queens = set(placements)
    return len(queens) == n and not compute_conflicts(queens)
