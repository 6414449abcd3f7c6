# hyperpaths

Transit assignment with the Spiess-Florian algorithm. Given a network of
transit links (each with a travel cost and a service headway), the package
finds the optimal strategy towards one destination: the expected travel time
from every stop, the combined frequency at every stop and the set of
attractive links. It then spreads the origin-destination demand bound for
that destination over the strategy.

Arithmetic is done in single precision (`numpy.float32`), so labels,
frequencies and volumes come back as `numpy.float32` values.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Usage

```python
from hyperpaths.network import Link
from hyperpaths.spiess_florian import compute_sf

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

result = compute_sf(links, stops, "B", {"A": {"B": 1.0}})

result.strategy.labels   # expected time to destination per stop (u_i)
result.strategy.freqs    # combined frequency per stop (f_i)
result.strategy.aset     # attractive links
result.volumes.links     # volume on each link: {from_node: {to_node: volume}}
result.volumes.nodes     # volume at each stop
```

`Link(from_node, to_node, route_id, travel_cost, headway=0.0)` is a frozen
dataclass. A link's `headway` is the interval between vehicles; a headway of
zero marks an on-board (dwell) link, which is treated as having an
effectively infinite frequency (`hyperpaths.strategy.link_frequency`).

The two stages can also be run separately:

- `hyperpaths.strategy.find_optimal_strategy(links, stops, destination, verbose=False)`
  returns a `Strategy` whose `aset` lists the attractive links in the order
  they were chosen.
- `hyperpaths.demand.assign_demand(links, stops, strategy, trips, destination, verbose=False)`
  returns a `Volumes`. It sorts `strategy.aset` in place by `u_j + c_a`,
  largest first, before loading the trips; after `compute_sf` the
  strategy's `aset` is therefore in that order.

Passing `verbose=True` to any of these functions prints each step of the
computation as LaTeX-formatted lines.

`hyperpaths.strategy.PriorityQueue` is the min-heap of links used by the
strategy search; it supports `push(link, priority)`, `pop()` returning
`(link, priority)`, `update(link, priority)` and `PriorityQueue.from_items`.

## The worked example

The network above is the classic example from the Spiess-Florian paper. Run

```
hyperpaths-paper
```

to compute it and print the node labels, frequencies, attractive links and
assigned volumes; add `-v` / `--verbose` to print the algorithm steps as
well. From code, `hyperpaths.paper.paper_network()` returns
`(links, stops, destination, od_matrix)` for the same network and
`hyperpaths.paper.format_result(result)` renders a result as text.

## What it does not do

Each run handles a single destination; loop over destinations yourself to
assign a full origin-destination matrix. The package does not read networks
or demand from files: links, stops and trips are passed in as Python
objects, and the only command is the worked example above.