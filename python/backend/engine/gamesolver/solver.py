"""Sliding puzzle solver (A*)."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Callable

from backend.engine.gamesolver.heuristics import manhattan_distance
from backend.engine.metrics import SearchStats
from backend.models.puzzle import GOAL_STATE, PuzzleState
from backend.settings import DEFAULT_MAX_FRONTIER

logger = logging.getLogger(__name__)

Heuristic = Callable[[PuzzleState], int]


@dataclass
class SearchNode:
    state: PuzzleState
    g: int
    path: tuple[PuzzleState, ...]


class Solver:
    """Best-first search over board states, ordered by ``f = g + h``.

    *max_frontier* bounds the number of queued-but-unexpanded nodes; once it
    is exceeded the search stops and ``solve`` returns ``None``. Pass
    ``None`` to search without a bound.

    Every state ever queued is remembered with its best known cost. A queued
    state found again more cheaply is queued again; an expanded state is
    never reopened, which keeps paths optimal only while moves cost 1 and
    *heuristic* is consistent.
    """

    def __init__(
        self,
        max_frontier: int | None = DEFAULT_MAX_FRONTIER,
        heuristic: Heuristic = manhattan_distance,
    ) -> None:
        if max_frontier is not None and max_frontier < 1:
            raise ValueError(f"max_frontier must be >= 1, got {max_frontier}.")
        self.max_frontier = max_frontier
        self.heuristic = heuristic
        self.stats = SearchStats()

    def solve(self, start: PuzzleState) -> list[PuzzleState] | None:
        """Return the states from *start* (exclusive) to the goal (inclusive).

        ``[]`` means *start* is already solved; ``None`` means no solution
        was found, either because *start* is unsolvable or because the
        frontier outgrew ``max_frontier``.
        """
        self.stats = stats = SearchStats()
        t0 = perf_counter()

        try:
            if start.is_solved():
                stats.outcome = "solved"
                return []

            if not self.is_solvable(start):
                logger.info("Board %s is unsolvable", start.tiles)
                stats.outcome = "unsolvable"
                return None

            path = self._search(start, stats)
            stats.outcome = "solved" if path is not None else "bound"
            return path
        finally:
            stats.elapsed_ms = (perf_counter() - t0) * 1000
            logger.debug("A* finished: %s", stats.to_dict())

    def _search(
        self, start: PuzzleState, stats: SearchStats
    ) -> list[PuzzleState] | None:
        counter = itertools.count()
        frontier: list[tuple[int, int, SearchNode]] = []
        heapq.heappush(
            frontier, (self.heuristic(start), next(counter), SearchNode(start, 0, ()))
        )
        best_g: dict[PuzzleState, int] = {start: 0}
        closed: set[PuzzleState] = set()

        while frontier:
            _, _, node = heapq.heappop(frontier)
            if node.state in closed:
                continue
            if node.state == GOAL_STATE:
                return list(node.path)

            closed.add(node.state)
            stats.nodes_expanded += 1
            g = node.g + 1
            for nxt in node.state.successors():
                if g >= best_g.get(nxt, g + 1):
                    continue
                best_g[nxt] = g
                stats.nodes_generated += 1
                child = SearchNode(nxt, g, node.path + (nxt,))
                heapq.heappush(
                    frontier, (g + self.heuristic(nxt), next(counter), child)
                )

            stats.peak_frontier = max(stats.peak_frontier, len(frontier))
            if self.max_frontier is not None and len(frontier) > self.max_frontier:
                logger.info(
                    "Frontier exceeded %d nodes after %d expansions, giving up",
                    self.max_frontier,
                    stats.nodes_expanded,
                )
                return None

        return None

    def hint(self, state: PuzzleState) -> PuzzleState | None:
        """Return the next state on an optimal path, or ``None`` if solved / no solution."""
        path = self.solve(state)
        return path[0] if path else None

    @staticmethod
    def is_solvable(state: PuzzleState) -> bool:
        """Return True if *state* can reach the goal state.

        On an odd-width board a state is solvable iff the number of inversions
        among the non-blank tiles is even.
        """
        tiles = [v for v in state.tiles if v != 0]
        inversions = sum(
            1
            for i in range(len(tiles))
            for j in range(i + 1, len(tiles))
            if tiles[i] > tiles[j]
        )
        return inversions % 2 == 0


def solve_puzzle(
    state: PuzzleState, max_frontier: int | None = DEFAULT_MAX_FRONTIER
) -> list[PuzzleState] | None:
    return Solver(max_frontier=max_frontier).solve(state)
