"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CityNotFoundError,
    CityPathError,
    ConfigurationError,
    GraphError,
    InvalidInputError,
    MalformedRecordError,
    NoRouteFoundError,
)
from .models import DistanceRow, EdgeRecord, QueryRecord, RouteResult

__all__ = [
    # Models
    "EdgeRecord",
    "QueryRecord",
    "RouteResult",
    "DistanceRow",
    # Errors
    "CityPathError",
    "InvalidInputError",
    "MalformedRecordError",
    "CityNotFoundError",
    "NoRouteFoundError",
    "GraphError",
    "ConfigurationError",
]
