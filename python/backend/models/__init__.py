from backend.models.puzzle import GOAL_STATE, Direction, PuzzleState
from backend.models.queens import QueensBoard, is_safe

__all__ = ["GOAL_STATE", "Direction", "PuzzleState", "QueensBoard", "is_safe"]
