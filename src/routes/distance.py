from typing import Optional
import math

from src.network.schemas import RideEdge, TransferEdge
from src.routes.schemas import PathResult

EARTH_RADIUS_KM = 6371


def haversine_km(
    lat1: Optional[float],
    lon1: Optional[float],
    lat2: Optional[float],
    lon2: Optional[float]
) -> float:
    """Great-circle distance between two coordinates, 0 if any is missing"""
    if lat1 is None or lon1 is None or lat2 is None or lon2 is None:
        return 0.0

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def ride_distance_km(path: PathResult) -> float:
    """Rail distance of a path; walks between lines count as zero"""
    km = 0.0
    for previous, current, leg in zip(path.stations, path.stations[1:], path.legs):
        if isinstance(leg, TransferEdge):
            continue
        elif isinstance(leg, RideEdge):
            km += haversine_km(previous.latitude, previous.longitude, current.latitude, current.longitude)
        else:
            raise TypeError(f"Unknown edge type: {type(leg).__name__}")
    return km
