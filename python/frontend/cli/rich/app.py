"""Rich terminal frontend with styled tables, colours, and panels.

Renders the 8-puzzle and N-Queens boards, plays back solver output with a
per-step delay, and forwards key presses to the backend engines.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.metrics import SearchStats
from backend.engine.queens import Action, Outcome, QueensGame, start_queens_solve
from backend.models.puzzle import Direction, PuzzleState
from backend.models.queens import QueensBoard
from backend.settings import Settings
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

MIN_QUEENS = 1
MAX_QUEENS = 12

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- puzzle rendering ---------------------------------------------------------


def _render_puzzle(board: PuzzleState) -> Table:
    """Return a Rich Table representing the 3×3 grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r * 3 + c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_metrics(game: GamePlay) -> Table:
    """Moves taken (g) next to the two distance estimates (h)."""
    table = Table(show_header=False, box=rich.box.SIMPLE, padding=(0, 1))
    table.add_column(style="dim")
    table.add_column(justify="right")
    table.add_row("Moves taken (g)", f"[bold blue]{game.moves}[/bold blue]")
    table.add_row(
        "Manhattan distance (h)", f"[bold green]{game.state.manhattan}[/bold green]"
    )
    table.add_row(
        "Misplaced tiles (h2)", f"[bold magenta]{game.state.misplaced}[/bold magenta]"
    )
    return table


def _draw_puzzle(game: GamePlay, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve with A*   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Group(Align.center(_render_puzzle(game.board)), Align.center(_render_metrics(game))),
        title="[bold cyan]8-Puzzle[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- puzzle solver helpers ----------------------------------------------------


def _describe_failure(solver: Solver) -> str:
    if solver.stats.outcome == "unsolvable":
        return "[red]Board is unsolvable.[/red]"
    return (
        f"[red]No solution within {solver.max_frontier} frontier nodes "
        f"(raise --max-frontier).[/red]"
    )


def _apply_hint(game: GamePlay, solver: Solver) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    step = solver.hint(game.board)
    if step is None:
        return _describe_failure(solver)
    game.apply(step)
    return "[cyan]Hint applied.[/cyan]"


def _auto_solve(game: GamePlay, solver: Solver, delay: float) -> str:
    path = solver.solve(game.board)
    if path is None:
        return _describe_failure(solver)
    if not path:
        return "[green]Already solved![/green]"

    for i, step in enumerate(path):
        game.apply(step)
        _draw_puzzle(game, f"[bold cyan]Solving… step {i + 1}/{len(path)}[/bold cyan]")
        sys.stdout.flush()
        time.sleep(delay)

    return (
        f"[bold green]Solved in {len(path)} moves[/bold green] "
        f"[dim]({solver.stats.nodes_expanded} nodes expanded, "
        f"{solver.stats.elapsed_ms:.1f} ms)[/dim]"
    )


# -- queens rendering ---------------------------------------------------------


def _render_queens(
    n: int,
    queens: list[tuple[int, int]],
    conflicts: set[tuple[int, int]] | None = None,
    cursor: tuple[int, int] | None = None,
) -> Table:
    conflicts = conflicts or set()
    occupied = set(queens)
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.SQUARE,
        border_style="magenta",
        padding=(0, 0),
    )
    for _ in range(n):
        table.add_column(width=3, justify="center")

    for r in range(n):
        cells: list[Text] = []
        for c in range(n):
            bg = "on grey23" if (r + c) % 2 else "on grey11"
            if cursor == (r, c):
                bg = "on dark_cyan"
            if (r, c) in conflicts:
                cells.append(Text(" ♛ ", style=f"bold red {bg}"))
            elif (r, c) in occupied:
                cells.append(Text(" ♛ ", style=f"bold yellow {bg}"))
            else:
                cells.append(Text("   ", style=bg))
        table.add_row(*cells)
    return table


def _draw_queens(
    n: int,
    queens: list[tuple[int, int]],
    *,
    manual: bool,
    status: str = "",
    conflicts: set[tuple[int, int]] | None = None,
    cursor: tuple[int, int] | None = None,
) -> None:
    console.clear()

    controls = Text()
    if manual:
        controls.append("  ↑↓←→", style="bold cyan")
        controls.append("  cursor   ", style="dim")
        controls.append("Space", style="bold cyan")
        controls.append("  place/remove   ", style="dim")
    else:
        controls.append("  V", style="bold cyan")
        controls.append("  solve   ", style="dim")
    controls.append("+/-", style="bold cyan")
    controls.append("  size   ", style="dim")
    controls.append("M", style="bold cyan")
    controls.append("  mode   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    mode = "You play" if manual else "AI backtracking"
    panel = Panel(
        Align.center(_render_queens(n, queens, conflicts, cursor)),
        title=f"[bold magenta]{n}-Queens  ·  {mode}[/bold magenta]",
        border_style="magenta",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _animate_queens(board: QueensBoard, delay: float) -> tuple[str, str | None]:
    """Play the backtracking search on *board*.

    Returns the status line and the key that interrupted the run, if any.
    """
    run = start_queens_solve(board.n, board)
    interrupt: str | None = None

    for event in run:
        verb = "Placed" if event.action is Action.PLACE else "Removed"
        _draw_queens(
            board.n,
            board.queens,
            manual=False,
            status=f"[cyan]{verb} queen at row {event.row}, column {event.col}[/cyan]",
        )
        key = get_key_timeout(delay)
        if key in ("quit", "restart", "mode", "grow", "shrink"):
            interrupt = key
            run.cancel()
            break

    stats = run.stats
    if run.outcome is Outcome.SOLVED:
        status = (
            f"[bold green]Solved![/bold green] [dim]({stats.placements} placements, "
            f"{stats.backtracks} backtracks)[/dim]"
        )
    elif run.outcome is Outcome.EXHAUSTED:
        status = f"[red]No solution exists for {board.n}×{board.n}.[/red]"
    else:
        status = "[yellow]Solve cancelled.[/yellow]"
    return status, interrupt


# -- loops --------------------------------------------------------------------


def _puzzle_loop(settings: Settings) -> None:
    solver = Solver(max_frontier=settings.max_frontier)
    game = GamePlay(settings.shuffle_steps)
    status = ""

    while True:
        if game.is_won and not status:
            status = "[bold green]★ Solved! ★[/bold green]"
        _draw_puzzle(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif key == "restart":
            game = GamePlay(settings.shuffle_steps)
            status = "[yellow]Shuffled![/yellow]"
        elif key == "hint":
            status = _apply_hint(game, solver)
        elif key == "solve":
            status = _auto_solve(game, solver, settings.puzzle_delay)
        elif key == "quit":
            return


def _queens_loop(settings: Settings, manual: bool) -> None:
    n = settings.queens_size
    board = QueensBoard(n)
    game = QueensGame(n)
    cursor = (0, 0)
    status = ""
    pending: str | None = None

    while True:
        if manual:
            if game.is_won:
                status = status or "[bold green]★ All queens safe! ★[/bold green]"
            _draw_queens(
                n,
                game.queens,
                manual=True,
                status=status,
                conflicts=game.conflicts,
                cursor=cursor,
            )
        else:
            _draw_queens(n, board.queens, manual=False, status=status)
        status = ""

        if pending:
            key, pending = pending, None
        else:
            key = get_key()

        if key == "quit":
            return
        if key in ("grow", "shrink", "mode", "restart"):
            if key == "grow":
                n = min(MAX_QUEENS, n + 1)
            elif key == "shrink":
                n = max(MIN_QUEENS, n - 1)
            elif key == "mode":
                manual = not manual
            # Any size or mode change starts from an empty board.
            board.reset(n)
            game.reset(n)
            cursor = (0, 0)
        elif manual and key in _DIRECTIONS:
            dr, dc = {
                "up": (-1, 0),
                "down": (1, 0),
                "left": (0, -1),
                "right": (0, 1),
            }[key]
            cursor = ((cursor[0] + dr) % n, (cursor[1] + dc) % n)
        elif manual and key == "toggle":
            game.toggle(*cursor)
        elif not manual and key == "solve":
            status, pending = _animate_queens(board, settings.queens_delay)


# -- public entry points ------------------------------------------------------


def run_puzzle(settings: Settings) -> None:
    """Launch the interactive 8-puzzle."""
    _puzzle_loop(settings)


def run_queens(settings: Settings, manual: bool = False) -> None:
    """Launch the interactive N-Queens board."""
    _queens_loop(settings, manual)


def print_solution(
    start: PuzzleState, path: list[PuzzleState] | None, stats: SearchStats
) -> None:
    """Print a solved path as a row of boards (non-interactive)."""
    if path is None:
        reason = "unsolvable" if stats.outcome == "unsolvable" else "search bound exceeded"
        console.print(f"[red]No solution found ({reason}).[/red]")
        return

    boards = [_render_puzzle(start)] + [_render_puzzle(step) for step in path]
    grid = Table.grid(padding=(0, 2))
    for _ in range(min(len(boards), 4)):
        grid.add_column()
    for i in range(0, len(boards), 4):
        grid.add_row(*boards[i : i + 4])

    console.print(grid)
    console.print(
        f"[bold green]{len(path)} moves[/bold green] "
        f"[dim]({stats.nodes_expanded} expanded, {stats.nodes_generated} generated, "
        f"peak frontier {stats.peak_frontier}, {stats.elapsed_ms:.1f} ms)[/dim]"
    )
