from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidConfiguration

MAX_ELEVATORS = 16


@dataclass
class EngineLimits:
    """Construction-time bounds for a dispatch engine."""

    max_elevators: int = MAX_ELEVATORS
    min_floors: int = 1

    def validate(self, floor_count: int, elevator_count: int) -> None:
        for name, value in (("floor_count", floor_count), ("elevator_count", elevator_count)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
        if floor_count < self.min_floors:
            raise InvalidConfiguration(f"must be at least {self.min_floors} floor, got {floor_count}")
        if elevator_count < 1:
            raise InvalidConfiguration(f"must be at least 1 elevator, got {elevator_count}")
        if elevator_count > self.max_elevators:
            raise InvalidConfiguration(
                f"at most {self.max_elevators} elevators supported, got {elevator_count}"
            )
