"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.models.puzzle import GOAL_STATE, PuzzleState
from backend.settings import DEFAULT_SHUFFLE_STEPS

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by walking the blank away from the solved state."""

    @staticmethod
    def solved() -> PuzzleState:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL_STATE

    @staticmethod
    def scramble(
        state: PuzzleState, steps: int, rng: random.Random | None = None
    ) -> PuzzleState:
        """Apply *steps* random blank moves to *state*.

        The blank never steps straight back to the cell it just left unless
        it has no other choice.
        """
        if steps < 0:
            raise ValueError(f"Shuffle step count must be >= 0, got {steps}.")
        rng = rng or random.Random()
        prev_blank: int | None = None

        for _ in range(steps):
            neighbors = state.neighbors()
            if prev_blank in neighbors and len(neighbors) > 1:
                neighbors.remove(prev_blank)
            target = rng.choice(neighbors)
            prev_blank = state.blank_index
            state = state.move_blank(target)
        return state

    @staticmethod
    def generate(
        steps: int = DEFAULT_SHUFFLE_STEPS, rng: random.Random | None = None
    ) -> PuzzleState:
        """Return a random *solvable* board *steps* moves from the goal."""
        rng = rng or random.Random()
        state = GameGenerator.scramble(GameGenerator.solved(), steps, rng)

        # Ensure the board is not already solved
        while steps > 0 and state.is_solved():
            logger.debug("Shuffle landed on the goal, walking again")
            state = GameGenerator.scramble(state, steps, rng)

        return state


def generate_shuffled_start(
    step_count: int = DEFAULT_SHUFFLE_STEPS, rng: random.Random | None = None
) -> PuzzleState:
    return GameGenerator.generate(step_count, rng)
