import pytest

from citypath.domain.errors import CityNotFoundError, InvalidInputError
from citypath.domain.models import EdgeRecord
from citypath.graph.network import NOT_IN_HEAP, Graph


def test_create_node_assigns_sequential_indices():
    graph = Graph()

    assert graph.create_node("York") == 0
    assert graph.create_node("Leeds") == 1
    assert graph.create_node("Hull") == 2
    assert graph.node_count() == 3
    assert graph.names() == ["York", "Leeds", "Hull"]


def test_create_node_is_idempotent():
    graph = Graph()
    first = graph.create_node("York")
    graph.create_node("Leeds")

    assert graph.create_node("York") == first
    assert graph.node_count() == 2


def test_new_node_has_reset_scheduling_fields():
    graph = Graph()
    node = graph.node_at(graph.create_node("York"))

    assert node.distance is None
    assert node.predecessor is None
    assert node.visited is False
    assert node.heap_position == NOT_IN_HEAP


def test_add_undirected_edge_links_both_directions():
    graph = Graph()
    a = graph.create_node("A")
    b = graph.create_node("B")

    graph.add_undirected_edge(a, b, 7)

    (forward,) = graph.edges_of(a)
    (backward,) = graph.edges_of(b)
    assert forward.target is graph.node_at(b)
    assert backward.target is graph.node_at(a)
    assert forward.distance == backward.distance == 7


def test_parallel_edges_are_kept_in_insertion_order():
    graph = Graph()
    a = graph.create_node("A")
    b = graph.create_node("B")

    graph.add_undirected_edge(a, b, 4)
    graph.add_undirected_edge(a, b, 2)

    assert [edge.distance for edge in graph.edges_of(a)] == [4, 2]
    assert [edge.distance for edge in graph.edges_of(b)] == [4, 2]


@pytest.mark.parametrize("distance", [0, -3])
def test_non_positive_distance_is_rejected(distance):
    graph = Graph()
    a = graph.create_node("York")
    b = graph.create_node("Leeds")

    with pytest.raises(InvalidInputError) as excinfo:
        graph.add_undirected_edge(a, b, distance)

    assert excinfo.value.city_a == "York"
    assert excinfo.value.city_b == "Leeds"
    assert graph.edges_of(a) == ()


def test_index_of_name_unknown_city():
    graph = Graph()
    graph.create_node("York")

    with pytest.raises(CityNotFoundError) as excinfo:
        graph.index_of_name("Atlantis")

    assert excinfo.value.city_name == "Atlantis"
    assert "Atlantis" in str(excinfo.value)


def test_node_at_out_of_range():
    with pytest.raises(IndexError):
        Graph().node_at(0)


def test_from_edges_builds_graph():
    graph = Graph.from_edges(
        [
            EdgeRecord("A", "B", 4),
            EdgeRecord("B", "C", 5),
            EdgeRecord("A", "C", 10),
        ]
    )

    assert graph.names() == ["A", "B", "C"]
    assert "B" in graph
    assert graph.has_name("C")
    assert not graph.has_name("D")
    assert len(graph.edges_of(graph.index_of_name("A"))) == 2


def test_from_edges_reports_line_of_bad_distance():
    records = [
        EdgeRecord("A", "B", 4, line_number=1),
        EdgeRecord("B", "C", 0, line_number=2),
    ]

    with pytest.raises(InvalidInputError) as excinfo:
        Graph.from_edges(records)

    assert excinfo.value.line_number == 2
    assert (excinfo.value.city_a, excinfo.value.city_b) == ("B", "C")


def test_adjacency_lines():
    graph = Graph.from_edges([EdgeRecord("York", "Leeds", 40), EdgeRecord("York", "Hull", 61)])

    assert graph.adjacency_lines() == [
        "York: Leeds(40), Hull(61)",
        "Leeds: York(40)",
        "Hull: York(61)",
    ]


def test_node_repr_does_not_recurse():
    graph = Graph.from_edges([EdgeRecord("A", "B", 1)])

    assert "A" in repr(graph.node_at(0))
