from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .errors import FloorOutOfBounds, InvalidConfiguration
from .models import ElevatorStatus, FloorRange, Request


@dataclass
class Elevator:
    """A single car bounded to a floor range, carrying boarded requests."""

    elevator_id: int
    min_floor: int
    max_floor: int
    current_floor: Optional[int] = None
    destination_floor: Optional[int] = None
    passengers: List[Request] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.min_floor > self.max_floor:
            raise InvalidConfiguration("invalid min/max floors")
        # Cars start parked at the bottom of their range.
        if self.current_floor is None:
            self.current_floor = self.min_floor
        if self.destination_floor is None:
            self.destination_floor = self.min_floor

    @property
    def floor_range(self) -> FloorRange:
        return FloorRange(self.min_floor, self.max_floor)

    @property
    def direction(self) -> int:
        if self.current_floor < self.destination_floor:
            return 1
        if self.current_floor > self.destination_floor:
            return -1
        return 0

    def at_rest(self) -> bool:
        return self.current_floor == self.destination_floor

    def status(self) -> ElevatorStatus:
        return ElevatorStatus(self.elevator_id, self.current_floor, self.destination_floor)

    def set_destination(self, floor: int) -> None:
        if floor not in self.floor_range:
            raise FloorOutOfBounds(
                f"floor {floor} outside [{self.min_floor}, {self.max_floor}] "
                f"for elevator {self.elevator_id}"
            )
        self.destination_floor = floor

    def move(self) -> int:
        """Advance one floor toward the destination and return the floor left."""
        previous = self.current_floor
        self.current_floor += self.direction
        return previous

    def release_passengers(self) -> List[Request]:
        released = [p for p in self.passengers if p.desired_floor == self.current_floor]
        if released:
            self.passengers = [p for p in self.passengers if p.desired_floor != self.current_floor]
        return released

    def board(self, requests: Iterable[Request]) -> None:
        self.passengers.extend(requests)
