from typing import List
from src.network.graph import NetworkModel, normalize_station_name
from src.network.schemas import InterchangeDeclaration, LineSummary, Station

class StationService:
    @staticmethod
    def get_stations(network: NetworkModel) -> List[Station]:
        """Full station catalog, one record per (station, line)"""
        return list(network.stations)

    @staticmethod
    def search_stations_by_name(network: NetworkModel, name: str, limit: int = 10) -> List[Station]:
        """Search stations by name for autocomplete"""
        needle = normalize_station_name(name)
        matches = [
            station for station in network.stations
            if needle in normalize_station_name(station.name)
        ]
        return matches[:limit]

    @staticmethod
    def get_lines(network: NetworkModel) -> List[LineSummary]:
        return network.line_summaries()

    @staticmethod
    def get_interchanges(network: NetworkModel) -> List[InterchangeDeclaration]:
        return list(network.interchanges)
