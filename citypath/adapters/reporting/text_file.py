"""Text reporters for computed routes.

Each route is rendered as a block of lines:

    York to Hull is 98km
    Route:
    York ---> Leeds ---> Hull

Blocks are separated by a blank line. Unreachable destinations are
written as "no route".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import RouteResult


def render_report(results: Sequence[RouteResult], unit: str = "") -> str:
    """Render a batch of results as the report text."""
    return "\n".join(result.render(unit) for result in results)


@dataclass
class TextFileReporter:
    """Reporter that writes routes to a text file.

    This adapter implements RouteReporterPort.

    Attributes:
        config: Graph configuration (output path, distance unit)
        output_path: Optional override of ``config.output_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    output_path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if self.output_path is None:
            self.output_path = self.config.output_path

    def report(self, results: Sequence[RouteResult]) -> None:
        """Write every result to the output file, replacing its content.

        Raises:
            GraphError: If the file cannot be written.
        """
        assert self.output_path is not None
        text = render_report(results, self.config.distance_unit)
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self.output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise GraphError(
                f"Failed to write report to {self.output_path}",
                cause=e,
                file_path=str(self.output_path),
            ) from e

        self._logger.info(
            "Routes written",
            extra={"output_path": str(self.output_path), "routes": len(results)},
        )


@dataclass
class InMemoryReporter:
    """Reporter that keeps the rendered report in memory."""

    unit: str = ""
    results: List[RouteResult] = field(default_factory=list)

    def report(self, results: Sequence[RouteResult]) -> None:
        self.results.extend(results)

    @property
    def text(self) -> str:
        return render_report(self.results, self.unit)
