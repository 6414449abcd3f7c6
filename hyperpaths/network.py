"""Transit network primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Link:
    """A directed edge of the transit graph.

    ``travel_cost`` is usually the in-vehicle time along the link.
    ``headway`` is the service interval; zero means the link has no
    waiting (for example an on-board or alighting link).
    """

    from_node: str
    to_node: str
    route_id: str
    travel_cost: float
    headway: float = 0.0