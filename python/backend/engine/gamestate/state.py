"""Tracks the mutable state of a puzzle in progress."""

from __future__ import annotations

import time

from backend.engine.gamesolver.heuristics import manhattan_distance, misplaced_tiles
from backend.models.puzzle import PuzzleState


class GameState:
    """Holds the current board, move counter, and elapsed time.

    The board itself is immutable; each move swaps in a new ``PuzzleState``.
    """

    def __init__(self, board: PuzzleState) -> None:
        self.board = board
        self.moves: int = 0
        self._start_time: float = time.time()

    @property
    def elapsed_time(self) -> float:
        return time.time() - self._start_time

    # -- moves ----------------------------------------------------------------

    def advance(self, board: PuzzleState) -> None:
        self.board = board
        self.moves += 1

    # -- live metrics ---------------------------------------------------------

    @property
    def manhattan(self) -> int:
        return manhattan_distance(self.board)

    @property
    def misplaced(self) -> int:
        return misplaced_tiles(self.board)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
