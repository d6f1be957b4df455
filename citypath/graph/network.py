"""Adjacency-list graph of named cities.

Each city is a ``Node`` identified by a dense index assigned in creation
order. Undirected connections are stored as two directed ``Edge``
records, one on each endpoint. Nodes also carry the scheduling fields
(distance, predecessor, visited flag and heap slot) that a shortest-path
run reads and writes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from ..domain.errors import CityNotFoundError, InvalidInputError
from ..domain.models import EdgeRecord

# Heap position of a node that is not currently enqueued.
NOT_IN_HEAP = -1


@dataclass(eq=False)
class Node:
    """A city in the graph.

    ``index`` and ``name`` never change after creation. The remaining
    fields are scheduling state owned by the shortest-path run in
    progress. A ``distance`` of None means the node is unreached.
    """

    index: int
    name: str
    edges: List[Edge] = field(default_factory=list, repr=False)

    distance: Optional[int] = None
    predecessor: Optional[Node] = field(default=None, repr=False)
    visited: bool = False
    heap_position: int = NOT_IN_HEAP

    @property
    def is_reached(self) -> bool:
        return self.distance is not None

    def reset(self) -> None:
        """Clear the scheduling fields before a new run."""
        self.distance = None
        self.predecessor = None
        self.visited = False
        self.heap_position = NOT_IN_HEAP


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed half of an undirected connection."""

    target: Node
    distance: int


class Graph:
    """Undirected weighted graph of named cities.

    Nodes are created on first sight of a name and indexed 0..n-1 in
    creation order. Parallel edges between the same pair are kept.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._index_by_name: Dict[str, int] = {}

    @classmethod
    def from_edges(cls, records: Iterable[EdgeRecord]) -> Graph:
        """Build a graph from edge records.

        Raises:
            InvalidInputError: On the first record with a distance below 1.
                No partially built graph is returned.
        """
        graph = cls()
        for record in records:
            index_a = graph.create_node(record.city_a)
            index_b = graph.create_node(record.city_b)
            try:
                graph.add_undirected_edge(index_a, index_b, record.distance)
            except InvalidInputError as e:
                e.line_number = record.line_number
                raise
        return graph

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._index_by_name

    def __iter__(self):
        return iter(self._nodes)

    def create_node(self, name: str) -> int:
        """Register ``name`` and return its index.

        Idempotent: a known name returns the index assigned on first sight.
        """
        index = self._index_by_name.get(name)
        if index is not None:
            return index

        index = len(self._nodes)
        self._nodes.append(Node(index=index, name=name))
        self._index_by_name[name] = index
        return index

    def add_undirected_edge(self, index_a: int, index_b: int, distance: int) -> None:
        """Connect two nodes in both directions with the same distance.

        Raises:
            InvalidInputError: If ``distance`` is below 1.
        """
        node_a = self.node_at(index_a)
        node_b = self.node_at(index_b)
        if distance < 1:
            raise InvalidInputError(
                f"Distance must be a positive integer, got {distance} "
                f"between {node_a.name} and {node_b.name}",
                city_a=node_a.name,
                city_b=node_b.name,
            )

        node_a.edges.append(Edge(target=node_b, distance=distance))
        node_b.edges.append(Edge(target=node_a, distance=distance))

    def node_count(self) -> int:
        return len(self._nodes)

    def node_at(self, index: int) -> Node:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"No node with index {index}")
        return self._nodes[index]

    def edges_of(self, index: int) -> Sequence[Edge]:
        """Return the edges leaving ``index`` in insertion order."""
        return tuple(self.node_at(index).edges)

    def index_of_name(self, name: str) -> int:
        """Resolve a city name to its node index.

        Raises:
            CityNotFoundError: If the name was never registered.
        """
        try:
            return self._index_by_name[name]
        except KeyError:
            raise CityNotFoundError(
                f"Unknown city: {name}",
                city_name=name,
            ) from None

    def has_name(self, name: str) -> bool:
        return name in self._index_by_name

    def names(self) -> List[str]:
        return [node.name for node in self._nodes]

    def adjacency_lines(self) -> List[str]:
        """Describe the adjacency list, one line per city.

        Example: ``"York: Leeds(40), Hull(61)"``.
        """
        lines: List[str] = []
        for node in self._nodes:
            neighbours = ", ".join(
                f"{edge.target.name}({edge.distance})" for edge in node.edges
            )
            lines.append(f"{node.name}: {neighbours}")
        return lines
