"""Counters collected by the search engines."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class SearchStats:
    nodes_expanded: int = 0
    nodes_generated: int = 0
    peak_frontier: int = 0
    placements: int = 0
    backtracks: int = 0
    elapsed_ms: float = 0.0
    outcome: str = ""

    def to_dict(self) -> dict[str, int | float | str]:
        return asdict(self)
