"""Graph-related modules for representing the city network.

This subpackage contains the adjacency-list graph, the indexed min-heap
and the Dijkstra engine that runs on top of them.
"""

from .dijkstra import ShortestPathEngine, dijkstra
from .min_heap import HeapEntry, MinHeap
from .network import NOT_IN_HEAP, Edge, Graph, Node

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "NOT_IN_HEAP",
    "MinHeap",
    "HeapEntry",
    "ShortestPathEngine",
    "dijkstra",
]
