"""Optimal strategy search of the Spiess-Florian transit assignment."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Mapping

import numpy as np

from .network import Link

ALPHA = np.float32(1.0)
INFINITE_FREQUENCY = np.float32(99999999999.0)
_INF = np.float32(np.inf)
_PRIORITY_CUTOFF = 99999999


def _fmt(value) -> str:
    return str(np.float32(value))


def link_frequency(link: Link) -> np.float32:
    """Return 1/headway, or a very large frequency when there is no headway."""
    headway = np.float32(link.headway)
    if headway > 0:
        return np.float32(1) / headway
    return INFINITE_FREQUENCY


class _Entry:
    __slots__ = ("link", "priority", "index")

    def __init__(self, link: Link, priority, index: int) -> None:
        self.link = link
        self.priority = np.float32(priority)
        self.index = index


class PriorityQueue:
    """Binary min-heap of links keyed by priority, supporting priority updates."""

    def __init__(self) -> None:
        self._heap: list[_Entry] = []
        self._entries: dict[int, _Entry] = {}

    def __len__(self) -> int:
        return len(self._heap)

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].priority < self._heap[j].priority

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, n: int) -> bool:
        i = start
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start

    def heapify(self) -> None:
        """Restore the heap property over all entries."""
        n = len(self._heap)
        for i in range(n // 2 - 1, -1, -1):
            self._down(i, n)

    def _append(self, link: Link, priority) -> _Entry:
        entry = _Entry(link, priority, len(self._heap))
        self._heap.append(entry)
        self._entries[id(link)] = entry
        return entry

    def push(self, link: Link, priority) -> None:
        """Add a link with the given priority."""
        self._append(link, priority)
        self._up(len(self._heap) - 1)

    def pop(self) -> tuple[Link, np.float32]:
        """Remove and return the link with the smallest priority."""
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        self._down(0, last)
        entry = self._heap.pop()
        entry.index = -1
        return entry.link, entry.priority

    def update(self, link: Link, priority) -> None:
        """Change the priority of a link that has been pushed."""
        try:
            entry = self._entries[id(link)]
        except KeyError:
            raise KeyError(f"link {link!r} is not in the queue") from None
        entry.priority = np.float32(priority)
        if entry.index < 0:
            return
        if not self._down(entry.index, len(self._heap)):
            self._up(entry.index)

    @classmethod
    def from_items(cls, items: Iterable[tuple[Link, object]]) -> "PriorityQueue":
        """Build a queue from (link, priority) pairs in one pass."""
        queue = cls()
        for link, priority in items:
            queue._append(link, priority)
        queue.heapify()
        return queue


@dataclass
class Strategy:
    """Optimal strategy: node labels u_i, combined frequencies f_i, attractive links."""

    labels: dict[str, np.float32] = field(default_factory=dict)
    freqs: dict[str, np.float32] = field(default_factory=dict)
    aset: list[Link] = field(default_factory=list)


def find_optimal_strategy(
    links: list[Link],
    stops: Iterable[str],
    destination: str,
    verbose: bool = False,
) -> Strategy:
    """Compute the optimal strategy towards ``destination``."""
    stops = list(stops)
    if verbose:
        print("1.1 Initialization \\\\")
    u: dict[str, np.float32] = {}
    f: dict[str, np.float32] = {}
    for stop in stops:
        if verbose:
            print(f"$f_{{{stop}}} = 0$ \\\\ ")
        f[stop] = np.float32(0)
        if stop == destination:
            if verbose:
                print(f"$u_{{{destination}}} = 0$ \\\\ ")
            u[stop] = np.float32(0)
        else:
            if verbose:
                print(f"$u_{{{stop}}} = Infinity$ \\\\ ")
            u[stop] = _INF

    def label(node: str) -> np.float32:
        return u.get(node, np.float32(0))

    def freq_at(node: str) -> np.float32:
        return f.get(node, np.float32(0))

    attractive: list[Link] = []
    by_from: dict[str, list[Link]] = defaultdict(list)
    for link in links:
        by_from[link.from_node].append(link)
    queue = PriorityQueue.from_items(
        (link, label(link.to_node) + np.float32(link.travel_cost)) for link in links
    )

    with np.errstate(invalid="ignore", over="ignore", divide="ignore"):
        while queue:
            a, priority = queue.pop()
            if priority > _PRIORITY_CUTOFF:
                break
            i, j = a.from_node, a.to_node
            cost = np.float32(a.travel_cost)
            sum_uc = label(j) + cost
            if verbose:
                print(f"Process: $a = (i, j) = ({i}, {j})$, \\\\ ")
            if label(i) < sum_uc:
                continue
            if verbose:
                print(
                    f"\\quad $u_i < u_j + c_a : {_fmt(label(i))} < "
                    f"{_fmt(label(j))} + {_fmt(cost)}$ - FALSE \\\\ "
                )
            freq = link_frequency(a)
            if verbose:
                print(f"\\quad $f_a = {_fmt(freq)}$ \\\\ ")
                print(f"\\quad $u_j + c_a = {_fmt(sum_uc)}$ \\\\ ")
                print(f"\\quad $u_i = {_fmt(label(i))}$ \\\\ ")
            part1 = freq_at(i) * label(i)
            if np.isnan(part1):
                part1 = ALPHA
            part2 = freq * (label(j) + cost)
            if np.isnan(part2):
                part2 = ALPHA
            numerator = np.float32(part1 + part2)
            denominator = np.float32(freq_at(i) + freq)
            u[i] = np.float32(numerator / denominator)
            if verbose:
                print(
                    f"\\quad \\quad $\\frac{{({_fmt(part1)}) + ({_fmt(part2)})}}"
                    f"{{({_fmt(freq_at(i))}) + ({_fmt(freq)})}} = "
                    f"\\frac{{{_fmt(numerator)}}}{{{_fmt(denominator)}}} = {_fmt(u[i])}$ \\\\ "
                )
                print(
                    f"\\quad $f_i = f_{{i}} + f_a = ({_fmt(freq_at(i))}) + "
                    f"({_fmt(freq)}) = {_fmt(denominator)}$ \\\\ "
                )
                print(
                    f"\\quad $\\overline{{A}} = \\overline{{A}} \\cup {{a}} = "
                    f"\\overline{{A}} \\cup {{({i}, {j})}}$ \\\\ "
                )
            f[i] = denominator
            attractive.append(a)

            for link in links:
                if link.to_node != i:
                    continue
                match = next(
                    (cand for cand in by_from.get(link.from_node, ()) if cand.to_node == i),
                    None,
                )
                if match is not None:
                    queue.update(match, u[i] + np.float32(link.travel_cost))
            if verbose:
                print("Node labels: \\\\")
                for s in stops:
                    print(f"${s} -> (u_i, f_i) = ({_fmt(label(s))}, {_fmt(freq_at(s))})$ \\\\ ")

    return Strategy(labels=u, freqs=f, aset=attractive)