from fastapi import APIRouter, Depends, Query
from typing import List

from src.network.dependencies import get_network
from src.network.graph import NetworkModel
from src.network.schemas import Station
from src.stations.schemas import InterchangeList, LineList
from src.stations.service import StationService

router = APIRouter()

@router.get("/", response_model=List[Station])
def get_stations(network: NetworkModel = Depends(get_network)):
    """Full station catalog for map display"""
    return StationService.get_stations(network)

@router.get("/search", response_model=List[Station])
def search_stations(
    q: str = Query(..., min_length=1, description="Search query"),
    limit: int = Query(10, ge=1, le=50, description="Maximum number of results"),
    network: NetworkModel = Depends(get_network)
):
    """Search stations by name for autocomplete"""
    return StationService.search_stations_by_name(network, name=q, limit=limit)

@router.get("/lines", response_model=LineList)
def get_lines(network: NetworkModel = Depends(get_network)):
    """Lines with their colour and stations in running order"""
    return LineList(lines=StationService.get_lines(network))

@router.get("/interchanges", response_model=InterchangeList)
def get_interchanges(network: NetworkModel = Depends(get_network)):
    """Declared interchanges and their walking time"""
    return InterchangeList(interchanges=StationService.get_interchanges(network))
