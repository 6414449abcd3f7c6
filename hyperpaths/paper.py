"""Worked example network from the Spiess-Florian paper."""

from __future__ import annotations

import argparse

from .network import Link
from .spiess_florian import SFResult, compute_sf


def paper_network():
    """Return (links, stops, destination, od_matrix) of the paper's example."""
    stops = ["A", "X", "X2", "Y", "Y3", "B"]
    links = [
        Link("A", "B", "Line 1", 25, 6),
        Link("A", "X2", "Line 2", 7, 6),
        Link("X2", "X", "Line 2", 0, 0),
        Link("X", "X2", "Line 2", 0, 6),
        Link("X2", "Y", "Line 2", 6, 0),
        Link("Y3", "Y", "Line 3", 0, 15),
        Link("Y", "B", "Line 4", 10, 3),
        Link("X", "Y3", "Line 3", 4, 15),
        Link("Y", "Y3", "Line 3", 0, 15),
        Link("Y3", "B", "Line 3", 4, 0),
    ]
    return links, stops, "B", {"A": {"B": 1}}


def format_result(result: SFResult) -> str:
    """Render a result as the human-readable report."""
    lines = ["Optimal strategy:", "\tNode labels:"]
    lines += [f"\t\tu_{{i}} = {n}: {float(v):f}" for n, v in result.strategy.labels.items()]
    lines.append("\tNodes probablities:")
    lines += [f"\t\tf_{{i}} = {n}: {float(v):f}" for n, v in result.strategy.freqs.items()]
    lines.append("\tAttractive links set:")
    lines += [f"\t\t a = (i, j) = ({a.from_node}, {a.to_node})" for a in result.strategy.aset]
    lines += ["Volumes:", "\tLinks volumes:"]
    for src, row in result.volumes.links.items():
        lines += [f"\t\tv_{{i, j}} = ({src}, {dst}): {float(v):f}" for dst, v in row.items()]
    lines.append("\tNodes volumes:")
    lines += [f"\t\tv_{{i}} = {n}: {float(v):f}" for n, v in result.volumes.nodes.items()]
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the paper's example network.")
    parser.add_argument("-v", "--verbose", action="store_true", help="print algorithm steps")
    args = parser.parse_args(argv)
    links, stops, destination, od_matrix = paper_network()
    result = compute_sf(links, stops, destination, od_matrix, args.verbose)
    print(format_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())