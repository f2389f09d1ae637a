"""Board model for the 3×3 sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable

SIZE = 3
CELLS = SIZE * SIZE


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class PuzzleState:
    """Immutable 3×3 board.

    Tiles are stored row-major as a tuple of ints; 0 represents the blank.
    Every move returns a new state.
    """

    tiles: tuple[int, ...]

    def __post_init__(self) -> None:
        tiles = tuple(self.tiles)
        if len(tiles) != CELLS:
            raise ValueError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(CELLS)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{CELLS - 1}, got {list(tiles)}."
            )
        object.__setattr__(self, "tiles", tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> PuzzleState:
        """Create a state from a flat row-major tile list.

        Example::

            PuzzleState.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(tuple(int(v) for v in flat))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def is_solved(self) -> bool:
        return self == GOAL_STATE

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == CELLS - 1
        return index == val - 1

    def neighbors(self) -> list[int]:
        """Cells the blank can move into: up, down, left, right."""
        br, bc = divmod(self.blank_index, SIZE)
        targets: list[int] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = br + dr, bc + dc
            if 0 <= nr < SIZE and 0 <= nc < SIZE:
                targets.append(nr * SIZE + nc)
        return targets

    def successors(self) -> list[PuzzleState]:
        return [self.move_blank(target) for target in self.neighbors()]

    # -- moves ----------------------------------------------------------------

    def move_blank(self, target: int) -> PuzzleState:
        """Return the state after swapping the blank with the tile at *target*."""
        blank = self.blank_index
        br, bc = divmod(blank, SIZE)
        tr, tc = divmod(target, SIZE)
        if not 0 <= target < CELLS or abs(tr - br) + abs(tc - bc) != 1:
            raise ValueError(
                f"Cell {target} is not adjacent to the blank at {blank}."
            )
        tiles = list(self.tiles)
        tiles[blank], tiles[target] = tiles[target], tiles[blank]
        return PuzzleState(tuple(tiles))

    def __str__(self) -> str:
        return "\n".join(
            " ".join("." if v == 0 else str(v) for v in row) for row in self.rows()
        )


GOAL_STATE = PuzzleState((1, 2, 3, 4, 5, 6, 7, 8, 0))
