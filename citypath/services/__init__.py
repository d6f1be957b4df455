"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Answers batches of shortest-route queries
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
