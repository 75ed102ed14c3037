from typing import List, Tuple
from decimal import Decimal

from src.routes.schemas import FareSlab

# (inclusive upper bound on stations travelled, fare)
FARE_SLABS: Tuple[Tuple[int, Decimal], ...] = (
    (2, Decimal("10")),
    (4, Decimal("15")),
    (6, Decimal("25")),
    (8, Decimal("30")),
    (10, Decimal("35")),
    (14, Decimal("40")),
    (18, Decimal("45")),
    (22, Decimal("50")),
    (26, Decimal("55")),
    (30, Decimal("60")),
)
MAX_FARE = Decimal("65")

class FareCalculator:
    """Single journey token fare by number of stations travelled"""

    def __init__(
        self,
        slabs: Tuple[Tuple[int, Decimal], ...] = FARE_SLABS,
        max_fare: Decimal = MAX_FARE
    ):
        self.slabs = slabs
        self.max_fare = max_fare

    def fare_for_hops(self, hops: int) -> Decimal:
        """Fare for a journey of ``hops`` station-to-station transitions"""
        if hops < 0:
            raise ValueError(f"Hop count cannot be negative, got {hops}")

        for max_hops, fare in self.slabs:
            if hops <= max_hops:
                return fare
        return self.max_fare

    def fare_table(self) -> List[FareSlab]:
        """Slabs in ascending order, ending with the open-ended maximum fare"""
        table = [FareSlab(max_hops=max_hops, fare=fare) for max_hops, fare in self.slabs]
        table.append(FareSlab(max_hops=None, fare=self.max_fare))
        return table
