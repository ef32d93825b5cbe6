"""Daily driving distance policies used for transport costing."""

from typing import Protocol


class DailyDistancePolicy(Protocol):
    """Kilometres driven on a given day of the trip."""

    def km_for_day(self, day_index: int) -> float:
        """Distance for the 0-indexed trip day."""
        ...


class FixedDailyDistance:
    """Same assumed distance every day, regardless of route."""

    def __init__(self, km: float = 100.0) -> None:
        if km <= 0:
            raise ValueError("daily distance must be positive")
        self.km = km

    def km_for_day(self, day_index: int) -> float:
        return self.km

    def __repr__(self) -> str:
        return f"FixedDailyDistance(km={self.km})"
