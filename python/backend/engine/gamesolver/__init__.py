from backend.engine.gamesolver.heuristics import manhattan_distance, misplaced_tiles
from backend.engine.gamesolver.solver import SearchNode, Solver, solve_puzzle

__all__ = [
    "SearchNode",
    "Solver",
    "manhattan_distance",
    "misplaced_tiles",
    "solve_puzzle",
]
