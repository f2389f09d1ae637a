"""Manual play: processes tile moves and checks the win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.puzzle import SIZE, Direction, PuzzleState
from backend.settings import DEFAULT_SHUFFLE_STEPS

# Offset from the blank to the tile that slides into it.
# UP   → tile below the blank moves up
# DOWN → tile above the blank moves down
# LEFT → tile right of the blank moves left
# RIGHT→ tile left of the blank moves right
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(
        self, steps: int = DEFAULT_SHUFFLE_STEPS, rng: random.Random | None = None
    ) -> None:
        self.state = GameState(GameGenerator.generate(steps, rng))

    @classmethod
    def from_state(cls, board: PuzzleState) -> "GamePlay":
        """Create a session from an existing board."""
        obj = object.__new__(cls)
        obj.state = GameState(board)
        return obj

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = divmod(self.state.board.blank_index, SIZE)
        dr, dc = _OFFSETS[direction]
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            return False

        self.state.advance(self.state.board.move_blank(tr * SIZE + tc))
        return True

    def move_tile(self, index: int) -> bool:
        """Move the tile at cell *index* into the blank if they are adjacent."""
        if index not in self.state.board.neighbors():
            return False

        self.state.advance(self.state.board.move_blank(index))
        return True

    def apply(self, board: PuzzleState) -> None:
        """Step to *board*, which must be exactly one move away (solver playback)."""
        if board not in self.state.board.successors():
            raise ValueError("Solver step is not one move from the current board.")
        self.state.advance(board)

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> PuzzleState:
        return self.state.board

    @property
    def moves(self) -> int:
        return self.state.moves

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
