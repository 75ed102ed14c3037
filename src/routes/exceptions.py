from typing import List
from src.routes.schemas import RouteValidationError

class RoutePlanningError(Exception):
    """Journey could not be computed"""

    def __init__(self, message: str = "Failed to calculate route."):
        super().__init__(message)
        self.message = message

class InvalidRouteRequestError(RoutePlanningError):
    """Origin/destination rejected before any search runs"""

    def __init__(self, errors: List[RouteValidationError]):
        super().__init__("Origin and destination are invalid.")
        self.errors = errors

class NoRouteFoundError(RoutePlanningError):
    """No path between the requested stations.

    ``reason`` is ``unknown_station`` when a name matches no station and
    ``unreachable`` when both resolve but are not connected.
    """

    UNKNOWN_STATION = "unknown_station"
    UNREACHABLE = "unreachable"

    def __init__(self, reason: str):
        super().__init__("No metro route found between these stations.")
        self.reason = reason
