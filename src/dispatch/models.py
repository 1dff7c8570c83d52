from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ElevatorStatus:
    """Point-in-time position of one elevator."""

    elevator_id: int
    current_floor: int
    destination_floor: int


@dataclass(frozen=True)
class FloorRange:
    """Inclusive floor bounds an elevator may travel between."""

    min_floor: int
    max_floor: int

    def __contains__(self, floor: object) -> bool:
        return isinstance(floor, int) and self.min_floor <= floor <= self.max_floor


@dataclass(frozen=True, eq=False)
class Request:
    """A single rider's wanted floor.

    Compared by identity: two riders heading to the same floor are still two
    requests.
    """

    desired_floor: int
