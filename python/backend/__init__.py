"""Search cores for the sliding puzzle (A*) and N-Queens (backtracking)."""

from backend.engine.gamegenerator import GameGenerator, generate_shuffled_start
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import (
    Solver,
    manhattan_distance,
    misplaced_tiles,
    solve_puzzle,
)
from backend.engine.queens import (
    Action,
    Outcome,
    QueenEvent,
    QueensGame,
    QueensSolve,
    compute_conflicts,
    start_queens_solve,
)
from backend.models import GOAL_STATE, PuzzleState, QueensBoard, is_safe
from backend.settings import Settings

__all__ = [
    "GOAL_STATE",
    "Action",
    "GameGenerator",
    "GamePlay",
    "Outcome",
    "PuzzleState",
    "QueenEvent",
    "QueensBoard",
    "QueensGame",
    "QueensSolve",
    "Settings",
    "Solver",
    "compute_conflicts",
    "generate_shuffled_start",
    "is_safe",
    "manhattan_distance",
    "misplaced_tiles",
    "solve_puzzle",
    "start_queens_solve",
]
