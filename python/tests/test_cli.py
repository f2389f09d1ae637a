"""Settings and the non-interactive ``solve`` command."""

from __future__ import annotations

from typer.testing import CliRunner

from backend.settings import DEFAULT_MAX_FRONTIER, Settings
from main import app

runner = CliRunner()


def test_settings_overrides_skip_none() -> None:
    settings = Settings().with_overrides(max_frontier=None, shuffle_steps=10)

    assert settings.max_frontier == DEFAULT_MAX_FRONTIER
    assert settings.shuffle_steps == 10


def test_solve_given_board() -> None:
    result = runner.invoke(app, ["solve", "--board", "1,2,3,4,5,6,7,0,8"])

    assert result.exit_code == 0, result.output
    assert "1 moves" in result.output


def test_solve_shuffled_board_with_seed() -> None:
    result = runner.invoke(app, ["solve", "--shuffle-steps", "10", "--seed", "3"])

    assert result.exit_code == 0, result.output
    assert "moves" in result.output


def test_solve_unsolvable_board_exits_nonzero() -> None:
    result = runner.invoke(app, ["solve", "-b", "1,2,3,4,5,6,8,7,0"])

    assert result.exit_code == 1
    assert "unsolvable" in result.output


def test_solve_rejects_malformed_board() -> None:
    result = runner.invoke(app, ["solve", "-b", "1,2,3"])

    assert result.exit_code == 2


def test_tight_frontier_reports_bound() -> None:
    result = runner.invoke(
        app, ["solve", "-b", "1,2,3,4,5,6,7,0,8", "--max-frontier", "1"]
    )

    assert result.exit_code == 1
    assert "bound" in result.output
