"""Full Spiess-Florian run: optimal strategy followed by demand assignment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .demand import Volumes, assign_demand
from .network import Link
from .strategy import Strategy, find_optimal_strategy


@dataclass
class SFResult:
    """Optimal strategy and the volumes assigned along it."""

    strategy: Strategy
    volumes: Volumes


def compute_sf(
    links: list[Link],
    stops: Iterable[str],
    destination: str,
    od_matrix: Mapping[str, Mapping[str, float]],
    verbose: bool = False,
) -> SFResult:
    """Find the optimal strategy to ``destination`` and assign the OD demand."""
    stops = list(stops)
    strategy = find_optimal_strategy(links, stops, destination, verbose)
    volumes = assign_demand(links, stops, strategy, od_matrix, destination, verbose)
    return SFResult(strategy, volumes)