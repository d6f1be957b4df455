"""Route planner service - Main orchestrator.

Loads the city graph once, answers every (source, destination) query
with one shortest-path run and hands the results to a reporter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.models import QueryRecord, RouteResult
from ..ports.graph import GraphRepositoryPort, RouteReporterPort, RouteSolverPort


@dataclass
class RoutePlannerService:
    """Main service for answering batches of route queries.

    This service orchestrates:
    1. Graph loading
    2. Query loading and name validation
    3. Route computation, one run per query
    4. Optional reporting

    Attributes:
        graph_repository: Loads the city graph and queries
        route_solver: Computes shortest paths
        reporter: Optional sink for the computed routes
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort
    reporter: Optional[RouteReporterPort] = None

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan_all(self, queries: Optional[Sequence[QueryRecord]] = None) -> List[RouteResult]:
        """Answer every query and report the results.

        Args:
            queries: Queries to answer, defaults to the repository's.

        Returns:
            One RouteResult per query, in order.

        Raises:
            CityNotFoundError: If any query names an unknown city. No
                route is computed or reported in that case.
        """
        graph = self.graph_repository.load()
        if queries is None:
            queries = self.graph_repository.load_queries()

        for query in queries:
            graph.index_of_name(query.source)
            graph.index_of_name(query.destination)

        self._logger.info(
            "Calculating fastest routes",
            extra={"queries": len(queries)},
        )
        results = [
            self.route_solver.solve_safe(graph, query.source, query.destination)
            for query in queries
        ]

        if self.reporter is not None:
            self.reporter.report(results)
        return results

    def plan(self, source: str, destination: str) -> RouteResult:
        """Answer a single query without reporting it.

        Raises:
            CityNotFoundError: If either city is unknown.
        """
        graph = self.graph_repository.load()
        return self.route_solver.solve_safe(graph, source, destination)
