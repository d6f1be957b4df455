"""Top-level package for the city route planner.

This package builds an adjacency-list graph of cities from delimited
text files and answers shortest-route queries between them with
Dijkstra's algorithm on an indexed min-heap.
"""
