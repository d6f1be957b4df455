"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- DelimitedGraphRepository: Loads the graph and queries from text files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .delimited_repository import DelimitedGraphRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["DelimitedGraphRepository", "DijkstraRouteSolver"]
