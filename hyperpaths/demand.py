"""Demand assignment along an optimal strategy."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping

import numpy as np

from .network import Link
from .strategy import Strategy, link_frequency


def _fmt(value) -> str:
    return str(np.float32(value))


@dataclass
class Volumes:
    """Assigned volumes for links (from -> to -> volume) and nodes."""

    links: dict[str, dict[str, np.float32]] = field(default_factory=dict)
    nodes: dict[str, np.float32] = field(default_factory=dict)


def assign_demand(
    links: list[Link],
    stops: Iterable[str],
    strategy: Strategy,
    trips: Mapping[str, Mapping[str, float]],
    destination: str,
    verbose: bool = False,
) -> Volumes:
    """Load trips bound for ``destination`` onto the strategy's attractive links.

    The strategy's attractive set is sorted in place by u_j + c_a, descending.
    """
    zero = np.float32(0)
    strategy.aset.sort(
        key=lambda a: strategy.labels.get(a.to_node, zero) + np.float32(a.travel_cost),
        reverse=True,
    )
    nodes: dict[str, np.float32] = {stop: zero for stop in stops}
    for origin, row in trips.items():
        if destination in row:
            amount = np.float32(row[destination])
            nodes[origin] = amount
            nodes[destination] = nodes.get(destination, zero) + amount
    nodes[destination] = nodes.get(destination, zero) * np.float32(-1)

    link_volumes: dict[str, dict[str, np.float32]] = {}
    for a in links:
        link_volumes.setdefault(a.from_node, {})[a.to_node] = zero

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        for a in strategy.aset:
            freq = link_frequency(a)
            combined = strategy.freqs.get(a.from_node, zero)
            origin_volume = nodes.get(a.from_node, zero)
            va = np.float32((freq / combined) * origin_volume)
            before = nodes.get(a.to_node, zero)
            if verbose:
                print(f"Assigning demand for link: ({a.from_node}, {a.to_node}) \\\\ ")
                print(
                    f"\\quad $v_{{({a.from_node}, {a.to_node})}} = \\frac{{{_fmt(freq)}}}"
                    f"{{{_fmt(combined)}}}{_fmt(origin_volume)} = {_fmt(va)}$ \\\\ "
                )
                print(
                    f"\\quad $V_{{{a.to_node}}} = V_{{{a.to_node}}} + "
                    f"v_{{({a.from_node}, {a.to_node}) = {_fmt(before)} + {_fmt(va)} = "
                    f"{_fmt(before + va)}}}$ \\\\ "
                )
            link_volumes.setdefault(a.from_node, {})[a.to_node] = va
            nodes[a.to_node] = np.float32(before + va)

    if verbose:
        print("Final node volumes: \\\\")
        for node, volume in nodes.items():
            print(f"\\quad $V_{{{node}}} = {_fmt(volume)}$ \\\\ ")
    return Volumes(links=link_volumes, nodes=nodes)