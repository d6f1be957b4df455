"""Shortest-path computation using Dijkstra's algorithm.

``ShortestPathEngine`` drives a ``Graph`` and a ``MinHeap`` to compute
the distance and predecessor of every node from one source, then answers
distance, route and table queries for that run. The scheduling state
lives on the graph's nodes, so one graph supports one run at a time.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..domain.models import DistanceRow, RouteResult
from .min_heap import MinHeap
from .network import Graph

logger = logging.getLogger(__name__)

TABLE_HEADER = f"{'Vertex':<10}{'CityName':<20}{'Distance':<20}{'Previous':<20}"
TABLE_SUBHEADER = f"{'From Source':>41}"
NO_PREDECESSOR = "----------"
UNREACHABLE_MARKER = "unreachable"


class ShortestPathEngine:
    """Single-source shortest paths over a graph of cities.

    Usage:
        engine = ShortestPathEngine(graph)
        engine.run(graph.index_of_name("York"))
        result = engine.route(graph.index_of_name("Leeds"))
    """

    def __init__(self, graph: Graph, heap: Optional[MinHeap] = None) -> None:
        self.graph = graph
        self.heap = heap if heap is not None else MinHeap()
        self.source: Optional[int] = None

    def run(self, source: int) -> None:
        """Finalize the distance and predecessor of every node from ``source``."""
        graph, heap = self.graph, self.heap
        source_node = graph.node_at(source)
        heap.clear()

        for node in graph:
            node.reset()
            if node is source_node:
                node.distance = 0
            heap.push(node)

        pops = 0
        while not heap.is_empty():
            u = heap.pop()
            pops += 1
            # Once an unreached node surfaces, every node after it is unreached.
            if u.is_reached:
                for edge in u.edges:
                    v = edge.target
                    if v.visited:
                        continue
                    alternative = u.distance + edge.distance
                    if v.distance is None or alternative < v.distance:
                        v.distance = alternative
                        v.predecessor = u
                        heap.decrease_key(v)
            u.visited = True

        self.source = source
        logger.debug(
            "Dijkstra run complete",
            extra={"source": source_node.name, "nodes_finalized": pops},
        )

    def distance_to(self, index: int) -> Optional[int]:
        """Return the distance from the last run's source, or None if unreached."""
        self._require_run()
        node = self.graph.node_at(index)
        return node.distance

    def reconstruct_path(self, source: int, destination: int) -> List[str]:
        """Return city names from ``source`` to ``destination``.

        An unreachable destination yields an empty list; callers report
        it as "no route".
        """
        self._require_run(source)
        node = self.graph.node_at(destination)
        if not node.is_reached:
            return []

        names: List[str] = []
        current = node
        while current is not None:
            names.append(current.name)
            current = current.predecessor
        names.reverse()
        return names

    def route(self, destination: int) -> RouteResult:
        """Build the RouteResult from the last run's source to ``destination``."""
        self._require_run()
        assert self.source is not None
        path = self.reconstruct_path(self.source, destination)
        return RouteResult(
            source=self.graph.node_at(self.source).name,
            destination=self.graph.node_at(destination).name,
            path=tuple(path),
            total_distance=self.distance_to(destination),
        )

    def distance_table(self) -> List[DistanceRow]:
        """Return index, name, distance and predecessor of every node."""
        self._require_run()
        return [
            DistanceRow(
                index=node.index,
                name=node.name,
                distance=node.distance,
                predecessor=node.predecessor.name if node.predecessor else None,
            )
            for node in self.graph
        ]

    def format_distance_table(self) -> str:
        lines = [TABLE_HEADER, TABLE_SUBHEADER, ""]
        for row in self.distance_table():
            distance = UNREACHABLE_MARKER if row.distance is None else str(row.distance)
            previous = row.predecessor or NO_PREDECESSOR
            lines.append(f"{row.index:<10}{row.name:<20}{distance:<20}{previous:<20}".rstrip())
        return "\n".join(lines) + "\n"

    def _require_run(self, source: Optional[int] = None) -> None:
        if self.source is None:
            raise RuntimeError("run() must be called before querying results")
        if source is not None and source != self.source:
            raise ValueError(
                f"results are for source {self.source}, not {source}"
            )


def dijkstra(graph: Graph, start: str, end: str) -> Tuple[List[str], Optional[int]]:
    """Compute the shortest path between two cities using Dijkstra.

    Parameters
    ----------
    graph:
        City graph, e.g. as produced by ``Graph.from_edges``.
    start:
        Name of the departure city.
    end:
        Name of the arrival city.

    Returns
    -------
    list[str], int | None
        The city names from ``start`` to ``end`` (inclusive) and the
        total distance. If no path exists, returns ``([], None)``.

    Raises
    ------
    CityNotFoundError
        If either name is not in the graph.
    """
    source = graph.index_of_name(start)
    destination = graph.index_of_name(end)

    engine = ShortestPathEngine(graph)
    engine.run(source)
    return engine.reconstruct_path(source, destination), engine.distance_to(destination)


__all__ = ["ShortestPathEngine", "dijkstra"]
