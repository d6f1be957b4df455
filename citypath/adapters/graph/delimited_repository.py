"""Delimited text file graph repository adapter.

Reads the city distances file (``city<TAB>city<TAB>distance`` per line)
and the city pairs file (``city<TAB>city`` per line), and adds:
- Configuration injection (paths and delimiter from config)
- Caching of the built graph
- Line-level validation with typed errors
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from ...config import GraphConfig, get_config
from ...domain.errors import ConfigurationError, GraphError, MalformedRecordError
from ...domain.models import EdgeRecord, QueryRecord
from ...graph.network import Graph


@dataclass
class DelimitedGraphRepository:
    """Graph repository that loads from delimited text files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, delimiter)
        cities_path: Optional override of ``config.cities_path``
        pairs_path: Optional override of ``config.pairs_path``
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    cities_path: Optional[Path] = None
    pairs_path: Optional[Path] = None
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        if len(self.config.delimiter) != 1:
            raise ConfigurationError(
                f"Delimiter must be a single character, got {self.config.delimiter!r}",
                setting_name="delimiter",
                expected_type="single character",
            )
        if self.cities_path is None:
            self.cities_path = self.config.cities_path
        if self.pairs_path is None:
            self.pairs_path = self.config.pairs_path

    def load(self) -> Graph:
        """Load the city graph from the distances file.

        Returns:
            The graph with one node per distinct city name.

        Raises:
            GraphError: If the file cannot be read.
            MalformedRecordError: If a line does not hold two names and
                an integer distance.
            InvalidInputError: If a distance is zero or negative.
        """
        if self._graph is not None:
            return self._graph

        assert self.cities_path is not None
        self._logger.debug(
            "Loading graph",
            extra={"cities_path": str(self.cities_path)},
        )

        graph = Graph.from_edges(self.read_edges())
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": graph.node_count()},
        )
        return graph

    def read_edges(self) -> List[EdgeRecord]:
        """Parse every line of the distances file into an EdgeRecord."""
        assert self.cities_path is not None
        records: List[EdgeRecord] = []
        for line_number, fields in self._read_rows(self.cities_path):
            if len(fields) != 3:
                raise self._malformed(self.cities_path, line_number, fields, 3)
            city_a, city_b, distance_str = fields
            try:
                distance = int(distance_str)
            except ValueError as e:
                raise MalformedRecordError(
                    f"Distance is not an integer on line {line_number} "
                    f"of {self.cities_path.name}: {distance_str!r}",
                    cause=e,
                    file_path=str(self.cities_path),
                    line_number=line_number,
                    line=self.config.delimiter.join(fields),
                ) from e
            records.append(EdgeRecord(city_a, city_b, distance, line_number))
        return records

    def load_queries(self) -> Sequence[QueryRecord]:
        """Parse every line of the pairs file into a QueryRecord.

        Raises:
            GraphError: If the file cannot be read.
            MalformedRecordError: If a line does not hold two names.
        """
        assert self.pairs_path is not None
        queries: List[QueryRecord] = []
        for line_number, fields in self._read_rows(self.pairs_path):
            if len(fields) != 2:
                raise self._malformed(self.pairs_path, line_number, fields, 2)
            queries.append(QueryRecord(fields[0], fields[1], line_number))

        self._logger.info(
            "Queries loaded",
            extra={"pairs_path": str(self.pairs_path), "queries": len(queries)},
        )
        return queries

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")

    def _read_rows(self, path: Path) -> Iterator[Tuple[int, List[str]]]:
        """Yield (line number, stripped fields) for each non-blank line."""
        try:
            data = path.read_bytes()
        except OSError as e:
            raise GraphError(
                f"Failed to read {path}",
                cause=e,
                file_path=str(path),
            ) from e

        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            line_number = data.count(b"\n", 0, e.start) + 1
            raise MalformedRecordError(
                f"Line {line_number} of {path.name} is not valid UTF-8",
                cause=e,
                file_path=str(path),
                line_number=line_number,
                line=data.splitlines()[line_number - 1].decode("utf-8", "replace"),
            ) from e

        reader = csv.reader(io.StringIO(text, newline=""), delimiter=self.config.delimiter)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                raise MalformedRecordError(
                    f"Could not parse line {reader.line_num} of {path.name}",
                    cause=e,
                    file_path=str(path),
                    line_number=reader.line_num,
                ) from e

            fields = [value.strip() for value in row]
            if not any(fields):
                continue
            yield reader.line_num, fields

    def _malformed(
        self, path: Path, line_number: int, fields: List[str], expected: int
    ) -> MalformedRecordError:
        return MalformedRecordError(
            f"Expected {expected} fields on line {line_number} of {path.name}, "
            f"got {len(fields)}",
            file_path=str(path),
            line_number=line_number,
            line=self.config.delimiter.join(fields),
        )
