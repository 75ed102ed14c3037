from typing import List, Optional, Sequence

from src.network.schemas import Station
from src.routes.schemas import ChangeInstruction, Instruction, PathResult, RideInstruction


def is_line_change(previous: Station, current: Station) -> bool:
    """Same station name on a different line: the rider stays in the station"""
    return previous.name == current.name and previous.line_name != current.line_name


def count_hops(stations: Sequence[Station]) -> int:
    """Distinct consecutive station-name transitions along a path"""
    return sum(1 for previous, current in zip(stations, stations[1:]) if previous.name != current.name)


class ItineraryBuilder:
    """Turns a station-by-station path into ride and change instructions"""

    def build(self, path: PathResult) -> List[Instruction]:
        """Compress consecutive stations into one ride per line.

        A line change at the same station closes the ride in progress and adds
        a change to the line being switched to.
        """
        stations = path.stations
        if len(stations) < 2:
            return []

        instructions: List[Instruction] = []
        entry: Station = stations[0]
        stops = 0

        for previous, current in zip(stations, stations[1:]):
            if is_line_change(previous, current):
                ride = self._ride(entry, previous, stops)
                if ride:
                    instructions.append(ride)
                instructions.append(ChangeInstruction(station=current.name, to_line=current.line_name))
                entry = current
                stops = 0
            else:
                stops += 1

        ride = self._ride(entry, stations[-1], stops)
        if ride:
            instructions.append(ride)

        return instructions

    def _ride(self, entry: Station, exit_station: Station, stops: int) -> Optional[RideInstruction]:
        if stops < 1:
            return None
        return RideInstruction(
            from_station=entry.name,
            to_station=exit_station.name,
            line=entry.line_name,
            stations=stops
        )
