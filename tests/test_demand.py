import numpy as np
import pytest

from hyperpaths.demand import assign_demand
from hyperpaths.network import Link
from hyperpaths.strategy import Strategy

NODES = ["A", "X", "X2", "Y", "Y3", "B"]


def paper_links():
    return [
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


def paper_strategy(links):
    f32 = np.float32
    labels = {"A": 27.75, "X": 19.071426, "X2": 17.5, "Y": 11.500001, "Y3": 4, "B": 0}
    freqs = {"A": 0.33333334, "X": 0.23333335, "X2": 1e11, "Y": 0.4, "Y3": 1e11, "B": 0}
    return Strategy(
        labels={k: f32(v) for k, v in labels.items()},
        freqs={k: f32(v) for k, v in freqs.items()},
        aset=[links[k] for k in (9, 6, 8, 7, 4, 1, 0, 3)],
    )


def test_paper_demand():
    links = paper_links()
    volumes = assign_demand(links, NODES, paper_strategy(links), {"A": {"B": 1}}, "B")
    expected_links = {
        "A": {"B": 0.5, "X2": 0.5},
        "X2": {"X": 0.0, "Y": 0.5},
        "X": {"X2": 0.0, "Y3": 0.0},
        "Y": {"Y3": 0.083333336, "B": 0.4166667},
        "Y3": {"Y": 0.0, "B": 0.083333336},
    }
    expected_nodes = {"A": 1.0, "X2": 0.5, "X": 0.0, "Y3": 0.083333336, "Y": 0.5, "B": 0.0}
    assert set(volumes.links) == set(expected_links)
    for src, row in volumes.links.items():
        assert set(row) == set(expected_links[src])
        for dst, value in row.items():
            assert float(value) == pytest.approx(expected_links[src][dst], abs=1e-6)
    assert set(volumes.nodes) == set(expected_nodes)
    for node, value in volumes.nodes.items():
        assert float(value) == pytest.approx(expected_nodes[node], abs=1e-6)


def test_attractive_set_sorted_descending():
    links = paper_links()
    strategy = paper_strategy(links)
    assign_demand(links, NODES, strategy, {"A": {"B": 1}}, "B")
    keys = [float(strategy.labels[a.to_node]) + a.travel_cost for a in strategy.aset]
    assert keys == sorted(keys, reverse=True)


def test_no_trips_gives_zero_volumes():
    links = paper_links()
    volumes = assign_demand(links, NODES, paper_strategy(links), {}, "B")
    assert all(float(v) == 0 for row in volumes.links.values() for v in row.values())
    assert all(float(v) == 0 for v in volumes.nodes.values())