"""N-Queens backtracking search and safety predicate."""

from __future__ import annotations

import itertools

import pytest

from backend.engine.queens import (
    Action,
    Outcome,
    QueenEvent,
    compute_conflicts,
    start_queens_solve,
)
from backend.models.queens import QueensBoard, is_safe


# -- is_safe ------------------------------------------------------------------


def test_is_safe_empty_board() -> None:
    assert is_safe([None] * 4, 0, 2)


def test_is_safe_column_clash() -> None:
    assert not is_safe([0, None], 1, 0)


def test_is_safe_diagonal_clash() -> None:
    assert not is_safe([0, None], 1, 1)
    assert not is_safe([2, None, None], 2, 0)


def test_is_safe_only_checks_earlier_rows() -> None:
    # Row 3 is later than the candidate and must be ignored.
    assert is_safe([1, 3, None, 0], 2, 0)


def test_board_queries() -> None:
    board = QueensBoard(4)
    board.place(0, 1)
    board.place(1, 3)

    assert board.queens == [(0, 1), (1, 3)]
    assert board.snapshot() == (1, 3, None, None)
    assert not board.is_complete
    assert board.is_safe(2, 0)
    assert not board.is_safe(2, 2)

    board.reset(5)
    assert board.snapshot() == (None,) * 5


@pytest.mark.parametrize("n", [0, -3])
def test_board_size_validated(n: int) -> None:
    with pytest.raises(ValueError):
        QueensBoard(n)
    with pytest.raises(ValueError):
        start_queens_solve(n)


def test_place_outside_board_rejected() -> None:
    with pytest.raises(ValueError):
        QueensBoard(4).place(0, 4)


# -- backtracking -------------------------------------------------------------


def test_four_queens_first_solution() -> None:
    run = start_queens_solve(4)

    assert run.run() is Outcome.SOLVED
    assert run.solution == [1, 3, 0, 2]


def test_four_queens_event_sequence() -> None:
    events = [(e.action, e.row, e.col) for e in start_queens_solve(4)]

    P, R = Action.PLACE, Action.REMOVE
    assert events == [
        (P, 0, 0),
        (P, 1, 2),
        (R, 1, 2),
        (P, 1, 3),
        (P, 2, 1),
        (R, 2, 1),
        (R, 1, 3),
        (R, 0, 0),
        (P, 0, 1),
        (P, 1, 3),
        (P, 2, 0),
        (P, 3, 2),
    ]


def test_event_snapshots_track_the_board() -> None:
    previous: tuple[int | None, ...] = (None,) * 6
    for event in start_queens_solve(6):
        assert isinstance(event, QueenEvent)
        expected = list(previous)
        expected[event.row] = event.col if event.action is Action.PLACE else None
        assert event.board == tuple(expected)
        # Rows fill strictly top to bottom.
        filled = [c is not None for c in event.board]
        assert filled == sorted(filled, reverse=True)
        previous = event.board


@pytest.mark.parametrize("n", [1, 4, 5, 6, 7, 8, 9, 10, 11, 12])
def test_solvable_sizes(n: int) -> None:
    run = start_queens_solve(n)

    assert run.run() is Outcome.SOLVED
    assert run.board.is_complete
    assert len(run.solution) == n
    assert not compute_conflicts(enumerate(run.solution))


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes_exhaust(n: int) -> None:
    run = start_queens_solve(n)

    assert run.run() is Outcome.EXHAUSTED
    assert run.solution is None
    assert run.board.snapshot() == (None,) * n
    assert run.stats.placements == run.stats.backtracks


def test_one_queen_single_event() -> None:
    events = list(start_queens_solve(1))

    assert events == [QueenEvent(0, 0, Action.PLACE, (0,))]


def test_run_is_not_restartable() -> None:
    run = start_queens_solve(4)
    list(run)

    assert list(run) == []
    assert run.outcome is Outcome.SOLVED


def test_outcome_pending_while_running() -> None:
    run = start_queens_solve(8)
    next(run)

    assert run.outcome is None


# -- cancellation -------------------------------------------------------------


def test_cancel_mid_search_keeps_partial_board() -> None:
    run = start_queens_solve(8)
    events = list(itertools.islice(run, 7))

    run.cancel()

    assert run.outcome is Outcome.CANCELLED
    assert run.cancelled
    assert list(run) == []
    assert run.board.snapshot() == events[-1].board
    assert run.solution is None


def test_cancel_before_start() -> None:
    run = start_queens_solve(5)
    run.cancel()

    assert run.outcome is Outcome.CANCELLED
    assert list(run) == []
    assert run.stats.placements == 0


def test_cancel_inside_loop() -> None:
    run = start_queens_solve(10)
    seen = 0
    for _ in run:
        seen += 1
        if seen == 3:
            run.cancel()

    assert seen == 3
    assert run.outcome is Outcome.CANCELLED


def test_cancel_after_finish_keeps_outcome() -> None:
    run = start_queens_solve(4)
    run.run()
    run.cancel()

    assert run.outcome is Outcome.SOLVED


# -- reentrancy ---------------------------------------------------------------


def test_second_solve_on_busy_board_rejected() -> None:
    board = QueensBoard(6)
    run = start_queens_solve(6, board)
    next(run)

    with pytest.raises(RuntimeError):
        start_queens_solve(6, board)

    run.cancel()
    again = start_queens_solve(4, board)
    assert again.run() is Outcome.SOLVED
    assert board.n == 4
    assert again.solution == [1, 3, 0, 2]


def test_finished_board_can_be_reused() -> None:
    board = QueensBoard(3)
    assert start_queens_solve(3, board).run() is Outcome.EXHAUSTED
    assert start_queens_solve(5, board).run() is Outcome.SOLVED


def test_stats_recorded() -> None:
    run = start_queens_solve(4)
    run.run()

    assert run.stats.placements == 8
    assert run.stats.backtracks == 4
    assert run.stats.outcome == "solved"
