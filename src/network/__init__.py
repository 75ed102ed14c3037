"""
Metro Network Module

Static, line-aware model of the Hyderabad Metro network, built once at startup
and shared read-only by every route planning request.

Key Components:
- data.py: corridor and interchange declarations
- graph.py: NetworkModel construction, lookups and name matching
- schemas.py: station, node key and tagged edge models
- dependencies.py: FastAPI dependency exposing the shared model
"""

from .exceptions import NetworkConfigurationError
from .graph import NetworkModel, build_default_network, normalize_station_name
from .schemas import (
    Edge, InterchangeDeclaration, LineSummary, NodeKey, RideEdge, Station,
    StationSeed, TransferEdge
)

__all__ = [
    "NetworkConfigurationError",
    "NetworkModel",
    "build_default_network",
    "normalize_station_name",
    "Edge",
    "InterchangeDeclaration",
    "LineSummary",
    "NodeKey",
    "RideEdge",
    "Station",
    "StationSeed",
    "TransferEdge"
]
