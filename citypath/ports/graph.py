"""Graph ports - Abstractions for graph loading, routing and reporting.

These protocols define the contracts between the route planner service
and the adapters that read input files, compute routes and write
results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import QueryRecord, RouteResult
    from ..graph.network import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph and query data.

    Implementation: adapters/graph/delimited_repository.py
    """

    def load(self) -> Graph:
        """Load the city graph.

        Returns:
            The graph built from every connection in the data source.
        """
        ...

    def load_queries(self) -> Sequence[QueryRecord]:
        """Load the (source, destination) pairs to answer.

        Returns:
            Queries in file order.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

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
            NoRouteFoundError: If the destination cannot be reached.
        """
        ...

    def solve_safe(
        self,
        graph: Graph,
        source: str,
        destination: str,
    ) -> RouteResult:
        """Find the shortest path, tolerating an unreachable destination.

        Returns:
            RouteResult with path and distance, or an empty result with
            no distance when the destination cannot be reached.
        """
        ...


class RouteReporterPort(Protocol):
    """Port for publishing computed routes.

    Implementations: adapters/reporting/
    """

    def report(self, results: Sequence[RouteResult]) -> None:
        """Publish the results of a batch of queries.

        Args:
            results: One result per query, in query order.
        """
        ...
