"""Tests for journey planning result assembly."""

from decimal import Decimal
from unittest.mock import patch

import pytest

from src.routes.distance import ride_distance_km
from src.routes.exceptions import InvalidRouteRequestError, NoRouteFoundError, RoutePlanningError
from src.routes.schemas import ChangeInstruction, PathResult, RideInstruction
from src.routes.service import RouteService


class TestRouteService:
    """Tests for RouteService.plan_journey."""

    def test_single_line_journey(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Miyapur", "Ameerpet")

        assert plan.origin == "Miyapur"
        assert plan.destination == "Ameerpet"
        assert plan.instructions == [
            RideInstruction(from_station="Miyapur", to_station="Ameerpet", line="Red Line", stations=10)
        ]
        assert plan.transfers == 0
        assert plan.total_stations == 11
        assert plan.estimated_time_minutes == 25
        assert plan.fare == Decimal("35")
        assert plan.currency == "INR"

    def test_journey_with_interchange(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Bharat Nagar", "Raidurg")

        rides = [i for i in plan.instructions if isinstance(i, RideInstruction)]
        changes = [i for i in plan.instructions if isinstance(i, ChangeInstruction)]
        assert [ride.line for ride in rides] == ["Red Line", "Blue Line"]
        assert changes == [ChangeInstruction(station="Ameerpet", to_line="Blue Line")]
        assert plan.estimated_time_minutes == 32
        # Ameerpet counted once
        assert plan.total_stations == 13
        assert plan.fare == Decimal("40")
        assert plan.transfers == 1

    def test_distance_is_rounded_to_one_decimal(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Miyapur", "Ameerpet")
        raw = ride_distance_km(route_service.path_finder.find_path("Miyapur", "Ameerpet"))

        assert plan.distance_km == pytest.approx(raw, abs=0.05)
        assert round(plan.distance_km * 10) == pytest.approx(plan.distance_km * 10)

    def test_minutes_round_half_up(self, route_service: RouteService) -> None:
        assert route_service.plan_journey("Miyapur", "JNTU College").estimated_time_minutes == 3
        assert route_service.plan_journey("Miyapur", "Kukatpally").estimated_time_minutes == 8

    def test_walkway_only_journey(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Parade Ground", "JBS Parade Ground")

        assert plan.instructions == [
            RideInstruction(from_station="Parade Ground", to_station="JBS Parade Ground", line="Blue Line", stations=1)
        ]
        assert plan.distance_km == 0
        assert plan.total_stations == 2
        assert plan.fare == Decimal("10")
        assert plan.estimated_time_minutes == 2
        assert plan.transfers == 0

    def test_journey_across_the_parade_ground_walkway(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Secunderabad East", "Secunderabad West")

        assert [s.name for s in plan.path] == [
            "Secunderabad East", "Parade Ground", "JBS Parade Ground", "Secunderabad West"
        ]
        assert plan.total_stations == 4
        assert plan.fare == Decimal("15")
        assert plan.estimated_time_minutes == 7
        assert plan.transfers == 0
        assert plan.instructions == [
            RideInstruction(from_station="Secunderabad East", to_station="Secunderabad West", line="Blue Line", stations=3)
        ]

    def test_path_entries_carry_catalog_records(self, route_service: RouteService) -> None:
        plan = route_service.plan_journey("Sultan Bazar", "Malakpet")

        assert [(s.name, s.line_name) for s in plan.path] == [
            ("Sultan Bazar", "Green Line"),
            ("MG Bus Station", "Green Line"),
            ("MG Bus Station", "Red Line"),
            ("Malakpet", "Red Line"),
        ]
        assert plan.path[-1].line_color == "#E41E26"
        assert plan.path[-1].latitude == 17.3891

    def test_same_station_is_rejected_before_search(self, route_service: RouteService) -> None:
        with patch.object(route_service.path_finder, "find_path") as find_path:
            with pytest.raises(InvalidRouteRequestError) as exc_info:
                route_service.plan_journey(" ameerpet", "AMEERPET ")

        find_path.assert_not_called()
        assert [e.error_code for e in exc_info.value.errors] == ["SAME_STATION"]

    def test_missing_origin_is_rejected(self, route_service: RouteService) -> None:
        with pytest.raises(InvalidRouteRequestError):
            route_service.plan_journey(None, "Ameerpet")

    def test_unknown_station(self, route_service: RouteService) -> None:
        with pytest.raises(NoRouteFoundError) as exc_info:
            route_service.plan_journey("Charminar", "Ameerpet")

        assert exc_info.value.reason == NoRouteFoundError.UNKNOWN_STATION
        assert exc_info.value.message == "No metro route found between these stations."

    def test_unreachable_station(self, network_factory) -> None:
        service = RouteService(network_factory({"A": ["X", "Y"], "B": ["Z", "W"]}))

        with pytest.raises(NoRouteFoundError) as exc_info:
            service.plan_journey("X", "W")

        assert exc_info.value.reason == NoRouteFoundError.UNREACHABLE

    def test_inconsistent_path_is_not_returned(self, route_service: RouteService) -> None:
        good = route_service.path_finder.find_path("Miyapur", "Ameerpet")
        broken = PathResult(stations=good.stations, legs=good.legs[:-1], total_minutes=25, hops=10)

        with patch.object(route_service.path_finder, "find_path", return_value=broken):
            with pytest.raises(RoutePlanningError):
                route_service.plan_journey("Miyapur", "Ameerpet")

    def test_repeated_plans_are_identical(self, route_service: RouteService) -> None:
        first = route_service.plan_journey("Miyapur", "Sultan Bazar")
        second = route_service.plan_journey("Miyapur", "Sultan Bazar")

        assert first.model_dump_json(by_alias=True) == second.model_dump_json(by_alias=True)

    def test_swapped_journey_takes_the_same_time(self, route_service: RouteService) -> None:
        forward = route_service.plan_journey("Bharat Nagar", "Raidurg")
        backward = route_service.plan_journey("Raidurg", "Bharat Nagar")

        assert forward.estimated_time_minutes == backward.estimated_time_minutes
        assert forward.fare == backward.fare
        assert backward.instructions[0] == RideInstruction(
            from_station="Raidurg", to_station="Ameerpet", line="Blue Line", stations=8
        )


@pytest.mark.parametrize(
    "origin, destination",
    [
        ("Secunderabad East", "Secunderabad West"),
        ("Nagole", "Musheerabad"),
        ("Paradise", "Gandhi Hospital"),
        ("Parade Ground", "JBS Parade Ground"),
        ("Bharat Nagar", "Raidurg"),
        ("Miyapur", "LB Nagar"),
        ("Raidurg", "Sultan Bazar"),
        ("Sultan Bazar", "Malakpet"),
    ],
)
def test_station_count_matches_distinct_names_on_path(route_service: RouteService, origin, destination) -> None:
    plan = route_service.plan_journey(origin, destination)
    distinct_names = list(dict.fromkeys(s.name for s in plan.path))

    assert plan.total_stations == len(distinct_names)
    assert plan.fare == route_service.fare_calculator.fare_for_hops(len(distinct_names) - 1)
    assert plan.transfers == sum(
        1 for a, b in zip(plan.path, plan.path[1:]) if a.name == b.name and a.line_name != b.line_name
    )
    assert sum(i.stations for i in plan.instructions if isinstance(i, RideInstruction)) == plan.total_stations - 1
