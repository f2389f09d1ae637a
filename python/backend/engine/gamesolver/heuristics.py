"""Distance-to-goal estimates for the 3×3 sliding puzzle."""

from __future__ import annotations

from backend.models.puzzle import SIZE, PuzzleState


def manhattan_distance(state: PuzzleState) -> int:
    """Sum of horizontal + vertical steps for each tile to reach its goal cell.

    Admissible and consistent, so A* driven by it returns shortest paths.
    """
    distance = 0
    for index, tile in enumerate(state.tiles):
        if tile == 0:
            continue
        row, col = divmod(index, SIZE)
        goal_row, goal_col = divmod(tile - 1, SIZE)
        distance += abs(row - goal_row) + abs(col - goal_col)
    return distance


def misplaced_tiles(state: PuzzleState) -> int:
    """Count of non-blank tiles outside their goal cell."""
    return sum(
        1 for index, tile in enumerate(state.tiles) if tile != 0 and tile != index + 1
    )
