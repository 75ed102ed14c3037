from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import structlog

from src.network.data import CORRIDORS, INTERCHANGES, LINE_COLORS
from src.network.exceptions import NetworkConfigurationError
from src.network.schemas import (
    Edge, InterchangeDeclaration, LineSummary, NodeKey, RideEdge, Station,
    StationSeed, TransferEdge
)

logger = structlog.get_logger(__name__)


def normalize_station_name(name: str) -> str:
    """Matching form of a station name: trimmed and case-folded"""
    return name.strip().casefold()


class NetworkModel:
    """Line-aware graph of the metro network.

    One node per (station name, line). Ride edges join consecutive stations of
    a corridor, transfer edges join the nodes of each declared interchange.
    Built once through ``from_corridors`` and read-only afterwards.
    """

    def __init__(self):
        self._stations: List[Station] = []
        self._nodes: Dict[NodeKey, Station] = {}
        self._edges: Dict[NodeKey, List[Edge]] = {}
        self._name_index: Dict[str, List[NodeKey]] = {}
        self._corridors: Dict[str, List[NodeKey]] = {}
        self._line_colors: Dict[str, Optional[str]] = {}
        self._interchanges: List[InterchangeDeclaration] = []
        self._frozen = False

    @classmethod
    def from_corridors(
        cls,
        corridors: Mapping[str, Sequence[StationSeed]],
        interchanges: Sequence[InterchangeDeclaration],
        hop_minutes: float,
        line_colors: Optional[Mapping[str, str]] = None
    ) -> "NetworkModel":
        """Build the graph from ordered corridors and explicit interchanges"""
        if hop_minutes <= 0:
            raise NetworkConfigurationError(
                f"Ride time between stations must be positive, got {hop_minutes}"
            )
        line_colors = line_colors or {}
        network = cls()

        next_id = 1
        for line_name, seeds in corridors.items():
            color = line_colors.get(line_name)
            network._line_colors[line_name] = color
            network._corridors[line_name] = []
            for seed in seeds:
                station = Station(
                    id=next_id,
                    name=seed.name,
                    latitude=seed.lat,
                    longitude=seed.lon,
                    line_name=line_name,
                    line_color=color
                )
                network._add_node(station)
                network._corridors[line_name].append(station.key)
                next_id += 1

        # Consecutive corridor stations, both directions
        for line_name, keys in network._corridors.items():
            for current_key, next_key in zip(keys, keys[1:]):
                network._add_edge(current_key, RideEdge(target=next_key, minutes=hop_minutes, line=line_name))
                network._add_edge(next_key, RideEdge(target=current_key, minutes=hop_minutes, line=line_name))

        for interchange in interchanges:
            network._add_interchange(interchange)

        network._frozen = True
        logger.info(
            "network_built",
            stations=len(network._stations),
            lines=len(network._corridors),
            edges=network.edge_count,
            interchanges=len(network._interchanges)
        )
        return network

    def _add_node(self, station: Station):
        if station.key in self._nodes:
            raise NetworkConfigurationError(
                f"Station '{station.name}' appears more than once on {station.line_name}"
            )
        self._stations.append(station)
        self._nodes[station.key] = station
        self._edges[station.key] = []
        self._name_index.setdefault(normalize_station_name(station.name), []).append(station.key)

    def _add_edge(self, source: NodeKey, edge: Edge):
        if self._frozen:
            raise RuntimeError("Network model is read-only once built")
        self._edges[source].append(edge)

    def _add_interchange(self, interchange: InterchangeDeclaration):
        key_a = NodeKey(interchange.station_a, interchange.line_a)
        key_b = NodeKey(interchange.station_b, interchange.line_b)
        for key in (key_a, key_b):
            if key not in self._nodes:
                raise NetworkConfigurationError(
                    f"Interchange references unknown station '{key.name}' on {key.line}"
                )
        if key_a.line == key_b.line:
            raise NetworkConfigurationError(
                f"Interchange between '{key_a.name}' and '{key_b.name}' stays on {key_a.line}"
            )
        self._add_edge(key_a, TransferEdge(target=key_b, minutes=interchange.minutes))
        self._add_edge(key_b, TransferEdge(target=key_a, minutes=interchange.minutes))
        self._interchanges.append(interchange)

    @property
    def stations(self) -> Tuple[Station, ...]:
        """Full catalog in declaration order"""
        return tuple(self._stations)

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._corridors)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges.values())

    @property
    def interchanges(self) -> Tuple[InterchangeDeclaration, ...]:
        return tuple(self._interchanges)

    @property
    def adjacency(self) -> Mapping[NodeKey, Tuple[Edge, ...]]:
        return MappingProxyType({key: tuple(edges) for key, edges in self._edges.items()})

    def corridor(self, line_name: str) -> List[Station]:
        """Stations of a line in physical order"""
        if line_name not in self._corridors:
            raise KeyError(line_name)
        return [self._nodes[key] for key in self._corridors[line_name]]

    def line_summaries(self) -> List[LineSummary]:
        return [
            LineSummary(
                name=line_name,
                color=self._line_colors.get(line_name),
                stations=[key.name for key in keys]
            )
            for line_name, keys in self._corridors.items()
        ]

    def has_node(self, key: NodeKey) -> bool:
        return key in self._nodes

    def get_station(self, key: NodeKey) -> Station:
        return self._nodes[key]

    def get_neighbors(self, key: NodeKey) -> Tuple[Edge, ...]:
        """All edges leaving a node"""
        return tuple(self._edges.get(key, ()))

    def nodes_named(self, name: str) -> List[NodeKey]:
        """Every node whose station name matches, in catalog order"""
        return list(self._name_index.get(normalize_station_name(name), []))


def build_default_network(hop_minutes: float) -> NetworkModel:
    """Hyderabad Metro network from the bundled static data"""
    return NetworkModel.from_corridors(
        CORRIDORS,
        INTERCHANGES,
        hop_minutes=hop_minutes,
        line_colors=LINE_COLORS
    )
