"""Command-line entry point for the city route planner.

Batch mode reads the city distances and city pairs files and writes the
shortest route for every pair to the report file:

    python -m citypath --cities ukcities.txt --pairs citypairs.txt

Single-query mode prints one route to stdout:

    python -m citypath --source York --destination Hull
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import configure_logging, get_config
from .container import Container
from .domain.errors import CityPathError
from .services import RoutePlannerService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citypath",
        description="Find the shortest routes between cities with Dijkstra's algorithm.",
    )
    parser.add_argument(
        "--cities",
        type=Path,
        default=None,
        help="Tab-delimited file of 'city<TAB>city<TAB>distance' lines.",
    )
    parser.add_argument(
        "--pairs",
        type=Path,
        default=None,
        help="Tab-delimited file of 'source<TAB>destination' lines.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="File the routes are written to.",
    )
    parser.add_argument("--source", help="Source city for a single query.")
    parser.add_argument("--destination", help="Destination city for a single query.")
    parser.add_argument(
        "--table",
        action="store_true",
        help="Log the distance table of every run.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to CITYPATH_LOG_LEVEL or INFO).",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.source is None) != (args.destination is None):
        parser.error("--source and --destination must be given together")

    config = get_config()
    configure_logging(config.observability, level=args.log_level)

    container = Container.create_default(
        config,
        cities_path=args.cities,
        pairs_path=args.pairs,
        output_path=args.output,
        print_table=args.table,
    )
    planner: RoutePlannerService = container.resolve(RoutePlannerService)

    try:
        if args.source is not None:
            result = planner.plan(args.source, args.destination)
            sys.stdout.write(result.render(config.graph.distance_unit))
        else:
            planner.plan_all()
    except CityPathError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
