"""Reporting adapters - Implementations of the RouteReporterPort.

Available implementations:
- TextFileReporter: Writes the route report to a file
- InMemoryReporter: Collects results in memory (testing, stdout)
"""

from .text_file import InMemoryReporter, TextFileReporter, render_report

__all__ = ["TextFileReporter", "InMemoryReporter", "render_report"]
