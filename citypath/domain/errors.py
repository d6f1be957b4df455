"""Typed domain errors for the city route planner.

Bad input is reported through these typed errors instead of terminating
the process, so callers decide how to surface them. All errors inherit
from CityPathError and can optionally wrap a root cause exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CityPathError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidInputError(CityPathError):
    """An edge was given a distance of zero or less.

    Attributes:
        city_a: First city of the offending connection
        city_b: Second city of the offending connection
        line_number: Line of the input file, when loaded from a file
    """

    city_a: str = ""
    city_b: str = ""
    line_number: Optional[int] = None


@dataclass
class MalformedRecordError(CityPathError):
    """A line of a delimited data file could not be parsed.

    Attributes:
        file_path: File being read
        line_number: 1-based number of the bad line
        line: Raw content of the line
    """

    file_path: Optional[str] = None
    line_number: int = 0
    line: str = ""


@dataclass
class CityNotFoundError(CityPathError):
    """City name not registered in the graph.

    Attributes:
        city_name: The name that was looked up
    """

    city_name: str = ""


@dataclass
class NoRouteFoundError(CityPathError):
    """No path exists between the requested cities.

    Attributes:
        source: Source city name
        destination: Destination city name
    """

    source: str = ""
    destination: str = ""


@dataclass
class GraphError(CityPathError):
    """Graph data files could not be read.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ConfigurationError(CityPathError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
