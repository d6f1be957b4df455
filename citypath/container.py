"""Dependency injection container.

Maps each port to a factory producing its adapter. The CLI builds one
container per invocation with ``Container.create_default`` and resolves
the route planner from it; tests register their own adapters instead.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Port-to-adapter registry.

    Usage:
        container = Container.create_default(config, cities_path=path)
        planner = container.resolve(RoutePlannerService)

        container.register(RouteReporterPort, InMemoryReporter)

    Attributes:
        config: Application configuration the adapters are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _shared: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _shared_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        Args:
            port_type: Port (usually a Protocol) or concrete class.
            factory: Zero-argument callable building the adapter.
            singleton: Build once and share, or build on every resolve.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._shared.pop(port_type, None)
            if singleton:
                self._shared_types.add(port_type)
            else:
                self._shared_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the adapter bound to ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            factory = self._factories.get(port_type)
            if factory is None:
                raise KeyError(f"Type not registered: {port_type}")
            if port_type not in self._shared_types:
                return factory()
            if port_type not in self._shared:
                self._shared[port_type] = factory()
            return self._shared[port_type]

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        *,
        cities_path: Optional[Path] = None,
        pairs_path: Optional[Path] = None,
        output_path: Optional[Path] = None,
        print_table: bool = False,
    ) -> Container:
        """Bind the file repository, Dijkstra solver and text file reporter.

        Args:
            config: Optional configuration override.
            cities_path: Distances file to read instead of the configured one.
            pairs_path: Pairs file to read instead of the configured one.
            output_path: Report file to write instead of the configured one.
            print_table: Log the distance table after every run.
        """
        from .adapters.graph import DelimitedGraphRepository, DijkstraRouteSolver
        from .adapters.reporting import TextFileReporter
        from .ports.graph import GraphRepositoryPort, RouteReporterPort, RouteSolverPort
        from .services import RoutePlannerService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: DelimitedGraphRepository(
                config.graph, cities_path=cities_path, pairs_path=pairs_path
            ),
        )
        container.register(
            RouteSolverPort,
            lambda: DijkstraRouteSolver(print_table=print_table),
        )
        container.register(
            RouteReporterPort,
            lambda: TextFileReporter(config.graph, output_path=output_path),
        )
        container.register(
            RoutePlannerService,
            lambda: RoutePlannerService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
                reporter=container.resolve(RouteReporterPort),
            ),
        )
        return container
