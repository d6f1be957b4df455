"""Dijkstra Route Solver adapter.

This adapter wraps the shortest-path engine and adds:
- City name resolution
- Domain model output (RouteResult)
- Typed errors for unknown cities and missing routes
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NoRouteFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import ShortestPathEngine
from ...graph.min_heap import MinHeap
from ...graph.network import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort. The heap is kept between
    calls and cleared at the start of every run.

    Attributes:
        print_table: Log the full distance table after every run
    """

    print_table: bool = False
    _heap: MinHeap = field(default_factory=MinHeap, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest path between two cities.

        Args:
            graph: The city graph.
            source: Source city name.
            destination: Destination city name.

        Returns:
            RouteResult with path and distance.

        Raises:
            CityNotFoundError: If either city is not in the graph.
            NoRouteFoundError: If no path exists.
        """
        result = self.solve_safe(graph, source, destination)
        if result.is_empty:
            raise NoRouteFoundError(
                f"No path from {source} to {destination}",
                source=source,
                destination=destination,
            )
        return result

    def solve_safe(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest path, returning an empty result when unreachable.

        Unknown city names still raise CityNotFoundError.
        """
        self._logger.debug(
            "Solving route",
            extra={"source": source, "destination": destination},
        )

        source_index = graph.index_of_name(source)
        destination_index = graph.index_of_name(destination)

        engine = ShortestPathEngine(graph, self._heap)
        engine.run(source_index)

        if self.print_table:
            self._logger.info("Distance table\n%s", engine.format_distance_table())

        result = engine.route(destination_index)
        if result.is_empty:
            self._logger.warning(
                "No route found",
                extra={"source": source, "destination": destination},
            )
        else:
            self._logger.info(
                "Route found",
                extra={
                    "source": source,
                    "destination": destination,
                    "stops": result.num_stops,
                    "distance": result.total_distance,
                },
            )
        return result
