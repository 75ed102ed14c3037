from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union
from decimal import Decimal
import math

from src.network.schemas import Edge, Station

class DirectionsRequest(BaseModel):
    """Request schema for journey planning by station name"""
    origin: Optional[str] = None
    destination: Optional[str] = None

class PathResult(BaseModel):
    """Fastest path found by the path finder.

    ``legs[i]`` is the edge travelled from ``stations[i]`` to ``stations[i + 1]``.
    An empty path with infinite time means no route was found.
    """
    stations: List[Station] = []
    legs: List[Edge] = []
    total_minutes: float = math.inf
    hops: int = 0

    @property
    def found(self) -> bool:
        return len(self.stations) > 0

class RideInstruction(BaseModel):
    """Stay on one line for a number of stops"""
    type: Literal["ride"] = "ride"
    from_station: str = Field(alias="from")
    to_station: str = Field(alias="to")
    line: str
    stations: int = Field(ge=1)  # stops travelled

    class Config:
        populate_by_name = True

class ChangeInstruction(BaseModel):
    """Interchange to another line"""
    type: Literal["change"] = "change"
    station: str
    to_line: str

Instruction = Annotated[Union[RideInstruction, ChangeInstruction], Field(discriminator="type")]

class JourneyPlan(BaseModel):
    """Complete itinerary returned for a directions request"""
    origin: str
    destination: str
    path: List[Station]
    total_stations: int  # includes origin
    estimated_time_minutes: int
    fare: Decimal
    currency: str = "INR"
    distance_km: float
    transfers: int
    instructions: List[Instruction]

class RouteValidationError(BaseModel):
    """Route validation error details"""
    error_code: str
    error_message: str
    field: Optional[str] = None

class FareSlab(BaseModel):
    """Fare applying up to and including ``max_hops`` stations travelled"""
    max_hops: Optional[int] = None  # None for the open-ended top slab
    fare: Decimal

class FareTableResponse(BaseModel):
    currency: str
    slabs: List[FareSlab]

class FareQuoteResponse(BaseModel):
    hops: int
    fare: Decimal
    currency: str
