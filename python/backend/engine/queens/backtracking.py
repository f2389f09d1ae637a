"""Observable backtracking search for the N-Queens puzzle.

The search is exposed as an iterator of placement/removal events so a
frontend can render each step and pace the animation itself::

    run = start_queens_solve(8)
    for event in run:
        draw(event.board)
        time.sleep(0.2)
    print(run.outcome)

Rows are filled top to bottom, columns tried left to right, and the first
complete placement found ends the search.
"""

from __future__ import annotations

import inspect
import logging
import threading
import weakref
from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter
from typing import Generator, Iterator, Optional

from backend.engine.metrics import SearchStats
from backend.models.queens import QueensBoard

logger = logging.getLogger(__name__)

# Boards with a search in progress.
_ACTIVE: "weakref.WeakSet[QueensBoard]" = weakref.WeakSet()


class Action(StrEnum):
    PLACE = "place"
    REMOVE = "remove"


class Outcome(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class QueenEvent:
    row: int
    col: int
    action: Action
    board: tuple[Optional[int], ...]


class QueensSolve:
    """A single, non-restartable run of the backtracking search.

    Iterating drives the search one event at a time. ``outcome`` stays
    ``None`` until the run ends. ``cancel()`` may be called between events;
    the run then stops without further events and leaves ``board`` as it was.
    """

    def __init__(self, board: QueensBoard) -> None:
        self.board = board
        self.outcome: Outcome | None = None
        self.stats = SearchStats()
        self._cancel = threading.Event()
        self._t0 = perf_counter()
        self._events = self._run()

    def __iter__(self) -> Iterator[QueenEvent]:
        return self

    def __next__(self) -> QueenEvent:
        return next(self._events)

    # -- control --------------------------------------------------------------

    def cancel(self) -> None:
        self._cancel.set()
        state = inspect.getgeneratorstate(self._events)
        if state == inspect.GEN_SUSPENDED:
            self._events.close()
        elif state == inspect.GEN_CREATED:
            self._events.close()
            self._finish(Outcome.CANCELLED)

    def run(self) -> Outcome:
        """Consume the remaining events without pacing and return the outcome."""
        for _ in self:
            pass
        assert self.outcome is not None
        return self.outcome

    # -- queries --------------------------------------------------------------

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def solution(self) -> list[int] | None:
        if self.outcome is not Outcome.SOLVED:
            return None
        return [c for c in self.board.columns if c is not None]

    # -- search ---------------------------------------------------------------

    def _run(self) -> Generator[QueenEvent, None, None]:
        try:
            solved = yield from self._place_row(0)
            if solved:
                self._finish(Outcome.SOLVED)
            elif self._cancel.is_set():
                self._finish(Outcome.CANCELLED)
            else:
                self._finish(Outcome.EXHAUSTED)
        finally:
            if self.outcome is None:
                self._finish(Outcome.CANCELLED)

    def _place_row(self, row: int) -> Generator[QueenEvent, None, bool]:
        board = self.board
        if row == board.n:
            return True

        for col in range(board.n):
            if self._cancel.is_set():
                return False
            if not board.is_safe(row, col):
                continue

            board.place(row, col)
            self.stats.placements += 1
            yield QueenEvent(row, col, Action.PLACE, board.snapshot())

            if (yield from self._place_row(row + 1)):
                return True
            if self._cancel.is_set():
                return False

            board.remove(row)
            self.stats.backtracks += 1
            yield QueenEvent(row, col, Action.REMOVE, board.snapshot())

        return False

    def _finish(self, outcome: Outcome) -> None:
        if self.outcome is not None:
            return
        self.outcome = outcome
        self.stats.outcome = outcome.value
        self.stats.elapsed_ms = (perf_counter() - self._t0) * 1000
        _ACTIVE.discard(self.board)
        logger.debug("N-Queens n=%d finished: %s", self.board.n, self.stats.to_dict())


def start_queens_solve(n: int, board: QueensBoard | None = None) -> QueensSolve:
    """Start a lazy search for *n* queens, optionally on an existing *board*.

    *board* is cleared and resized to *n*. Raises ``RuntimeError`` if another
    search on the same board is still running.
    """
    if n < 1:
        raise ValueError(f"Board size must be at least 1, got {n}.")
    if board is None:
        board = QueensBoard(n)
    elif board in _ACTIVE:
        raise RuntimeError("A search is already running on this board; cancel it first.")
    else:
        board.reset(n)

    _ACTIVE.add(board)
    logger.debug("Starting N-Queens search for n=%d", n)
    return QueensSolve(board)
