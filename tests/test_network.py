import dataclasses

import pytest

from hyperpaths.network import Link


def test_fields_are_kept():
    link = Link("A", "B", "Line 1", 25, 6)
    assert (link.from_node, link.to_node, link.route_id) == ("A", "B", "Line 1")
    assert link.travel_cost == 25
    assert link.headway == 6


def test_default_headway_is_zero():
    assert Link("X2", "Y", "Line 2", 6).headway == 0


def test_link_is_immutable():
    link = Link("A", "B", "Line 1", 25, 6)
    with pytest.raises(dataclasses.FrozenInstanceError):
        link.travel_cost = 1
    assert link.travel_cost == 25


def test_equal_links_compare_and_hash_equal():
    a = Link("Y", "B", "Line 4", 10, 3)
    b = Link("Y", "B", "Line 4", 10, 3)
    assert a == b
    assert len({a, b}) == 1