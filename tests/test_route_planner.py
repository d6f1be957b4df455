"""Tests for the route planner service."""

from dataclasses import dataclass, field
from typing import List

import pytest

from citypath.adapters.graph import DijkstraRouteSolver
from citypath.adapters.reporting import InMemoryReporter
from citypath.domain.errors import CityNotFoundError
from citypath.domain.models import EdgeRecord, QueryRecord
from citypath.graph.network import Graph
from citypath.services import RoutePlannerService


@dataclass
class StubRepository:
    edges: List[EdgeRecord]
    queries: List[QueryRecord] = field(default_factory=list)
    loads: int = 0

    def load(self) -> Graph:
        self.loads += 1
        return Graph.from_edges(self.edges)

    def load_queries(self) -> List[QueryRecord]:
        return list(self.queries)


EDGES = [
    EdgeRecord("A", "B", 4),
    EdgeRecord("B", "C", 5),
    EdgeRecord("A", "C", 10),
    EdgeRecord("X", "Y", 1),
]


def make_service(queries):
    reporter = InMemoryReporter()
    service = RoutePlannerService(
        graph_repository=StubRepository(EDGES, queries),
        route_solver=DijkstraRouteSolver(),
        reporter=reporter,
    )
    return service, reporter


def test_plan_all_answers_queries_in_order():
    service, reporter = make_service(
        [QueryRecord("A", "C"), QueryRecord("C", "A"), QueryRecord("A", "Y")]
    )

    results = service.plan_all()

    assert [r.total_distance for r in results] == [9, 9, None]
    assert results[1].path == ("C", "B", "A")
    assert reporter.results == results
    assert "A to Y: no route" in reporter.text


def test_unknown_city_aborts_whole_batch():
    service, reporter = make_service(
        [QueryRecord("A", "C"), QueryRecord("A", "Nowhere")]
    )

    with pytest.raises(CityNotFoundError) as excinfo:
        service.plan_all()

    assert excinfo.value.city_name == "Nowhere"
    assert reporter.results == []


def test_plan_all_with_explicit_queries():
    service, _ = make_service([])

    (result,) = service.plan_all([QueryRecord("B", "A")])

    assert result.path == ("B", "A")


def test_plan_single_query_is_not_reported():
    service, reporter = make_service([])

    result = service.plan("A", "C")

    assert result.path == ("A", "B", "C")
    assert reporter.results == []


class TolerantOnlySolver(DijkstraRouteSolver):
    """Solver whose strict entry point must not be used by the planner."""

    def solve(self, graph, source, destination):
        raise AssertionError("planner should call solve_safe")


def test_planner_uses_tolerant_solver_entry_point():
    service = RoutePlannerService(
        graph_repository=StubRepository(EDGES, [QueryRecord("A", "Y"), QueryRecord("A", "C")]),
        route_solver=TolerantOnlySolver(),
    )

    unreachable, reachable = service.plan_all()

    assert unreachable.is_empty and unreachable.total_distance is None
    assert reachable.total_distance == 9
    assert service.plan("X", "Y").path == ("X", "Y")
