"""Adapters layer - Concrete implementations of the ports.

- graph: file-backed graph repository and Dijkstra solver
- reporting: text reporters for computed routes
"""
