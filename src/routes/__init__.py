"""
Route Planning Module

This module provides journey planning for the Hyderabad Metro network.
It includes:

- Fastest route search using Dijkstra's algorithm over line-aware nodes
- Ride and interchange instructions for the rider
- Rail distance along the travelled corridors
- Station-count fare slabs

Key Components:
- service.py: PathFinder search and RouteService result assembly
- itinerary.py: ride/change instruction compression
- distance.py: haversine ride distance
- fare_service.py: fare slab lookup
- validation.py: request validation before any search runs
- router.py: FastAPI endpoints for directions and fares
- schemas.py: Pydantic models for request/response structures
"""

from .router import router
from .service import PathFinder, RouteService
from .itinerary import ItineraryBuilder, count_hops, is_line_change
from .distance import haversine_km, ride_distance_km
from .fare_service import FareCalculator
from .validation import RouteValidator
from .exceptions import InvalidRouteRequestError, NoRouteFoundError, RoutePlanningError
from .schemas import (
    DirectionsRequest, PathResult, RideInstruction, ChangeInstruction,
    JourneyPlan, RouteValidationError, FareSlab, FareTableResponse, FareQuoteResponse
)

__all__ = [
    "router",
    "PathFinder",
    "RouteService",
    "count_hops",
    "ItineraryBuilder",
    "is_line_change",
    "haversine_km",
    "ride_distance_km",
    "FareCalculator",
    "RouteValidator",
    "InvalidRouteRequestError",
    "NoRouteFoundError",
    "RoutePlanningError",
    "DirectionsRequest",
    "PathResult",
    "RideInstruction",
    "ChangeInstruction",
    "JourneyPlan",
    "RouteValidationError",
    "FareSlab",
    "FareTableResponse",
    "FareQuoteResponse"
]
