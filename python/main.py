#!/usr/bin/env python3
"""Search Puzzles: 8-puzzle A* and N-Queens backtracking.

Usage::

    python main.py puzzle                     # interactive 8-puzzle
    python main.py queens -n 8                # watch the backtracking search
    python main.py queens --manual            # place the queens yourself
    python main.py solve -b 1,2,3,4,5,6,7,0,8 # print an optimal solution
"""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamesolver import Solver  # noqa: E402
from backend.models.puzzle import PuzzleState  # noqa: E402
from backend.settings import Settings  # noqa: E402

logger = logging.getLogger("search_puzzles")


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _parse_board(raw: str) -> PuzzleState:
    try:
        return PuzzleState.from_flat(int(tok) for tok in raw.split(",") if tok.strip())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding puzzle A* and N-Queens backtracking.")


@app.callback()
def _main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Log solver progress at DEBUG level."
    ),
) -> None:
    _setup_logging(verbose)


@app.command()
def puzzle(
    max_frontier: int = typer.Option(
        Settings.max_frontier, "--max-frontier", min=1,
        help="Give up once this many nodes are waiting in the A* frontier.",
    ),
    shuffle_steps: int = typer.Option(
        Settings.shuffle_steps, "--shuffle-steps", min=0,
        help="Random blank moves used to shuffle a new board.",
    ),
    delay: float = typer.Option(
        Settings.puzzle_delay, "--delay", min=0.0,
        help="Seconds between steps when playing back a solution.",
    ),
) -> None:
    """Play the 8-puzzle; press V to let A* finish it."""
    from frontend.cli.rich.app import run_puzzle

    settings = Settings().with_overrides(
        max_frontier=max_frontier, shuffle_steps=shuffle_steps, puzzle_delay=delay
    )
    run_puzzle(settings)


@app.command()
def queens(
    size: int = typer.Option(
        Settings.queens_size, "-n", "--size", min=1, max=12, help="Board size N."
    ),
    manual: bool = typer.Option(
        False, "--manual", help="Place the queens yourself instead of watching the AI."
    ),
    delay: float = typer.Option(
        Settings.queens_delay, "--delay", min=0.0,
        help="Seconds between backtracking steps.",
    ),
) -> None:
    """Solve N-Queens by backtracking, or play it by hand."""
    from frontend.cli.rich.app import run_queens

    settings = Settings().with_overrides(queens_size=size, queens_delay=delay)
    run_queens(settings, manual=manual)


@app.command()
def solve(
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help="Comma-separated tiles, row-major, 0 for the blank. Omit to shuffle.",
    ),
    shuffle_steps: int = typer.Option(
        Settings.shuffle_steps, "--shuffle-steps", min=0,
        help="Random blank moves used when no board is given.",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the shuffle."),
    max_frontier: int = typer.Option(
        Settings.max_frontier, "--max-frontier", min=1,
        help="Give up once this many nodes are waiting in the A* frontier.",
    ),
) -> None:
    """Print an optimal solution for a board without the interactive UI."""
    from frontend.cli.rich.app import print_solution

    if board is not None:
        start = _parse_board(board)
    else:
        start = GameGenerator.generate(shuffle_steps, random.Random(seed))

    solver = Solver(max_frontier=max_frontier)
    path = solver.solve(start)
    logger.debug("Solved %s -> %s", start.tiles, solver.stats.outcome)
    print_solution(start, path, solver.stats)
    if path is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
