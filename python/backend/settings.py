"""Tunable defaults shared by the engines and the frontends."""

from __future__ import annotations

from dataclasses import dataclass, replace

# A* gives up once this many nodes are queued but unexpanded.
DEFAULT_MAX_FRONTIER = 5000
DEFAULT_SHUFFLE_STEPS = 50
DEFAULT_PUZZLE_DELAY = 0.3
DEFAULT_QUEENS_DELAY = 0.2
DEFAULT_QUEENS_SIZE = 4


@dataclass(frozen=True)
class Settings:
    max_frontier: int | None = DEFAULT_MAX_FRONTIER
    shuffle_steps: int = DEFAULT_SHUFFLE_STEPS
    puzzle_delay: float = DEFAULT_PUZZLE_DELAY
    queens_delay: float = DEFAULT_QUEENS_DELAY
    queens_size: int = DEFAULT_QUEENS_SIZE

    def with_overrides(self, **overrides: object) -> Settings:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
