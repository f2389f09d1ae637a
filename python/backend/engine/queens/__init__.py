from backend.engine.queens.backtracking import (
    Action,
    Outcome,
    QueenEvent,
    QueensSolve,
    start_queens_solve,
)
from backend.engine.queens.conflicts import compute_conflicts, is_won
from backend.engine.queens.play import QueensGame

__all__ = [
    "Action",
    "Outcome",
    "QueenEvent",
    "QueensGame",
    "QueensSolve",
    "compute_conflicts",
    "is_won",
    "start_queens_solve",
]
