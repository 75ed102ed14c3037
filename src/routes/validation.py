from typing import List
from src.network.graph import normalize_station_name
from src.routes.schemas import DirectionsRequest, RouteValidationError

class RouteValidator:
    """Service for validating journey planning requests"""

    def validate_directions_request(self, request: DirectionsRequest) -> List[RouteValidationError]:
        """Validate a directions request before any search runs"""
        errors = []

        origin = normalize_station_name(request.origin or "")
        destination = normalize_station_name(request.destination or "")

        if not origin:
            errors.append(RouteValidationError(
                error_code="MISSING_ORIGIN",
                error_message="Origin station is required",
                field="origin"
            ))

        if not destination:
            errors.append(RouteValidationError(
                error_code="MISSING_DESTINATION",
                error_message="Destination station is required",
                field="destination"
            ))

        if origin and origin == destination:
            errors.append(RouteValidationError(
                error_code="SAME_STATION",
                error_message="Origin and destination stations cannot be the same",
                field="destination"
            ))

        return errors
