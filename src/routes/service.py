from typing import Dict, List, Optional, Set, Tuple
from decimal import Decimal, ROUND_HALF_UP
import heapq
import itertools
import math
import structlog

from src.config import settings
from src.network.graph import NetworkModel
from src.network.schemas import Edge, NodeKey
from src.routes.distance import ride_distance_km
from src.routes.exceptions import InvalidRouteRequestError, NoRouteFoundError, RoutePlanningError
from src.routes.fare_service import FareCalculator
from src.routes.itinerary import ItineraryBuilder, count_hops
from src.routes.schemas import ChangeInstruction, DirectionsRequest, JourneyPlan, PathResult
from src.routes.validation import RouteValidator

logger = structlog.get_logger(__name__)


class PathFinder:
    """Shortest-time search over the network using Dijkstra's algorithm"""

    def __init__(self, network: NetworkModel):
        self.network = network

    def find_path(self, origin_name: str, destination_name: str) -> PathResult:
        """Fastest path from any node named ``origin_name`` to any node named
        ``destination_name``.

        Every line serving the origin is a start node and every line serving
        the destination is a goal. Returns an empty PathResult when either name
        is unknown or no goal is reachable.
        """
        start_nodes = self.network.nodes_named(origin_name)
        goal_nodes = set(self.network.nodes_named(destination_name))

        if not start_nodes or not goal_nodes:
            return PathResult()

        # Priority queue: (minutes, insertion order, node); ties pop in push order
        sequence = itertools.count()
        pq: List[Tuple[float, int, NodeKey]] = []
        times: Dict[NodeKey, float] = {}
        previous: Dict[NodeKey, Tuple[NodeKey, Edge]] = {}
        visited: Set[NodeKey] = set()

        for node in start_nodes:
            times[node] = 0.0
            heapq.heappush(pq, (0.0, next(sequence), node))

        final_node: Optional[NodeKey] = None
        while pq:
            current_time, _, current = heapq.heappop(pq)

            if current in visited:
                continue
            visited.add(current)

            if current in goal_nodes:
                final_node = current
                break

            for edge in self.network.get_neighbors(current):
                new_time = current_time + edge.minutes
                if new_time < times.get(edge.target, math.inf):
                    times[edge.target] = new_time
                    previous[edge.target] = (current, edge)
                    heapq.heappush(pq, (new_time, next(sequence), edge.target))

        if final_node is None:
            return PathResult()

        return self._reconstruct(final_node, previous, times[final_node])

    def _reconstruct(
        self,
        final_node: NodeKey,
        previous: Dict[NodeKey, Tuple[NodeKey, Edge]],
        total_minutes: float
    ) -> PathResult:
        nodes = [final_node]
        legs: List[Edge] = []
        while nodes[-1] in previous:
            node, edge = previous[nodes[-1]]
            nodes.append(node)
            legs.append(edge)
        nodes.reverse()
        legs.reverse()
        stations = [self.network.get_station(node) for node in nodes]

        return PathResult(
            stations=stations,
            legs=legs,
            total_minutes=total_minutes,
            hops=count_hops(stations)
        )


def round_half_up(value: float, places: str = "1") -> Decimal:
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


class RouteService:
    """High-level journey planning service"""

    def __init__(self, network: NetworkModel):
        self.network = network
        self.path_finder = PathFinder(network)
        self.validator = RouteValidator()
        self.itinerary_builder = ItineraryBuilder()
        self.fare_calculator = FareCalculator()

    def plan_journey(self, origin: Optional[str], destination: Optional[str]) -> JourneyPlan:
        """Fastest route between two named stations with fare and instructions"""
        request = DirectionsRequest(origin=origin, destination=destination)
        errors = self.validator.validate_directions_request(request)
        if errors:
            raise InvalidRouteRequestError(errors)

        path = self.path_finder.find_path(origin, destination)
        if not path.found or not math.isfinite(path.total_minutes):
            reason = self._not_found_reason(origin, destination)
            logger.info("journey_not_found", origin=origin, destination=destination, reason=reason)
            raise NoRouteFoundError(reason)

        if len(path.legs) != len(path.stations) - 1:
            raise RoutePlanningError("Path reconstruction produced an inconsistent route")

        instructions = self.itinerary_builder.build(path)
        distance_km = ride_distance_km(path)
        fare = self.fare_calculator.fare_for_hops(path.hops)

        plan = JourneyPlan(
            origin=path.stations[0].name,
            destination=path.stations[-1].name,
            path=path.stations,
            total_stations=path.hops + 1,
            estimated_time_minutes=int(round_half_up(path.total_minutes)),
            fare=fare,
            currency=settings.FARE_CURRENCY,
            distance_km=float(round_half_up(distance_km, "0.1")),
            transfers=sum(1 for i in instructions if isinstance(i, ChangeInstruction)),
            instructions=instructions
        )

        logger.info(
            "journey_planned",
            origin=plan.origin,
            destination=plan.destination,
            minutes=plan.estimated_time_minutes,
            hops=path.hops,
            transfers=plan.transfers
        )
        return plan

    def _not_found_reason(self, origin: str, destination: str) -> str:
        if not self.network.nodes_named(origin) or not self.network.nodes_named(destination):
            return NoRouteFoundError.UNKNOWN_STATION
        return NoRouteFoundError.UNREACHABLE
