"""Immutable domain models for the city route planner.

All models are frozen dataclasses with slots. They carry data between
the file adapters, the shortest-path engine and the reporters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

ROUTE_SEPARATOR = " ---> "


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """One undirected connection read from the city distances file.

    Attributes:
        city_a: Name of the first city
        city_b: Name of the second city
        distance: Distance between the two cities
        line_number: Source line, when read from a file
    """

    city_a: str
    city_b: str
    distance: int
    line_number: Optional[int] = None


@dataclass(frozen=True, slots=True)
class QueryRecord:
    """A (source, destination) request read from the city pairs file."""

    source: str
    destination: str
    line_number: Optional[int] = None


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a shortest-path query between two cities.

    Attributes:
        source: Source city name
        destination: Destination city name
        path: Ordered city names from source to destination
        total_distance: Length of the route, None when unreachable
    """

    source: str
    destination: str
    path: tuple[str, ...]
    total_distance: Optional[int]

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of cities on the route."""
        return len(self.path)

    def render(self, unit: str = "") -> str:
        """Render the route as line-oriented text.

        An unreachable destination is reported as "no route" rather
        than an empty route.
        """
        if self.total_distance is None:
            return f"{self.source} to {self.destination}: no route\n"
        return (
            f"{self.source} to {self.destination} is {self.total_distance}{unit}\n"
            f"Route:\n"
            f"{ROUTE_SEPARATOR.join(self.path)}\n"
        )


@dataclass(frozen=True, slots=True)
class DistanceRow:
    """One line of the per-run distance table."""

    index: int
    name: str
    distance: Optional[int]
    predecessor: Optional[str]
