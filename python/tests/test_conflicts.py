"""Conflict detection and manual N-Queens play."""

from __future__ import annotations

import pytest

from backend.engine.queens import QueensGame, compute_conflicts, is_won

EIGHT_QUEENS = [(0, 0), (1, 4), (2, 7), (3, 5), (4, 2), (5, 6), (6, 1), (7, 3)]


# -- compute_conflicts --------------------------------------------------------


def test_diagonal_pair_conflicts() -> None:
    assert compute_conflicts({(0, 0), (1, 1)}) == {(0, 0), (1, 1)}


def test_knight_move_is_safe() -> None:
    assert compute_conflicts({(0, 0), (1, 2)}) == set()


@pytest.mark.parametrize(
    "placements",
    [
        [(2, 0), (2, 3)],
        [(0, 1), (3, 1)],
        [(0, 3), (3, 0)],
    ],
    ids=["row", "column", "anti-diagonal"],
)
def test_shared_line_conflicts(placements: list[tuple[int, int]]) -> None:
    assert compute_conflicts(placements) == set(placements)


def test_only_attacking_queens_flagged() -> None:
    conflicts = compute_conflicts([(0, 0), (1, 2), (3, 2)])

    assert conflicts == {(1, 2), (3, 2)}


def test_valid_solution_has_no_conflicts() -> None:
    assert compute_conflicts(EIGHT_QUEENS) == set()
    assert is_won(EIGHT_QUEENS, 8)


def test_empty_and_single() -> None:
    assert compute_conflicts([]) == set()
    assert compute_conflicts([(3, 3)]) == set()


def test_won_needs_all_queens() -> None:
    assert not is_won(EIGHT_QUEENS[:-1], 8)
    assert not is_won([(0, 0), (1, 1)], 2)
    assert is_won([(0, 0)], 1)


# -- manual play --------------------------------------------------------------


def test_toggle_places_and_removes() -> None:
    game = QueensGame(4)
    game.toggle(0, 1)
    assert game.queens == [(0, 1)]

    game.toggle(0, 1)
    assert game.queens == []


def test_second_queen_in_row_replaces_first() -> None:
    game = QueensGame(4)
    game.toggle(2, 0)
    game.toggle(2, 3)

    assert game.queens == [(2, 3)]


def test_conflicts_update_live() -> None:
    game = QueensGame(4)
    game.toggle(0, 0)
    game.toggle(1, 1)
    assert game.conflicts == {(0, 0), (1, 1)}

    game.toggle(1, 2)
    assert game.conflicts == set()
    assert not game.is_won


def test_win_detected() -> None:
    game = QueensGame(4)
    for row, col in enumerate([1, 3, 0, 2]):
        game.toggle(row, col)

    assert game.is_won


def test_toggle_outside_board_rejected() -> None:
    game = QueensGame(4)

    with pytest.raises(ValueError):
        game.toggle(4, 0)
    with pytest.raises(ValueError):
        game.toggle(0, -1)


def test_reset_clears_and_resizes() -> None:
    game = QueensGame(4)
    game.toggle(0, 0)
    game.reset(6)

    assert game.n == 6
    assert game.queens == []
    with pytest.raises(ValueError):
        game.reset(0)
