from __future__ import annotations

import logging
import threading
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .boarding import passing_filter, resting_target, reversal_target, sweep_start_target
from .config import EngineLimits
from .elevator import Elevator
from .errors import FloorOutOfBounds, InvalidConfiguration, InvalidElevatorID, InvalidRequest
from .floor import Floor
from .models import ElevatorStatus, FloorRange, Request

logger = logging.getLogger(__name__)


class DispatchEngine:
    """Elevator bank with per-floor pending queues, advanced one tick at a time.

    Every public method holds the engine lock for its whole duration, so the
    engine can be shared between threads. Nothing here runs on its own: the
    caller decides when to call :meth:`step`.
    """

    def __init__(
        self,
        floor_count: int,
        elevator_count: int,
        limits: Optional[EngineLimits] = None,
        floor_ranges: Optional[Sequence[Tuple[int, int]]] = None,
    ) -> None:
        (limits or EngineLimits()).validate(floor_count, elevator_count)
        self.floor_count = floor_count
        self.elevators: List[Elevator] = self._build_elevators(floor_count, elevator_count, floor_ranges)
        self.floors: List[Floor] = [Floor(i) for i in range(floor_count)]
        self.delivered: int = 0
        self._lock = threading.Lock()
        logger.info("dispatch engine ready: %d floors, %d elevators", floor_count, elevator_count)

    @property
    def elevator_count(self) -> int:
        return len(self.elevators)

    def status(self) -> List[ElevatorStatus]:
        with self._lock:
            return [elevator.status() for elevator in self.elevators]

    def id_set(self) -> FrozenSet[int]:
        with self._lock:
            return frozenset(range(len(self.elevators)))

    def floor_range(self, elevator_id: int) -> FloorRange:
        with self._lock:
            return self._get_elevator(elevator_id).floor_range

    def update(self, elevator_id: int, destination_floor: int) -> None:
        with self._lock:
            elevator = self._get_elevator(elevator_id)
            self._check_floor(destination_floor)
            self._retarget(elevator, destination_floor)

    def pickup(self, pickup_floor: int, destination_floor: int) -> None:
        with self._lock:
            self._check_floor(pickup_floor)
            self._check_floor(destination_floor)
            if pickup_floor == destination_floor:
                raise InvalidRequest(f"pickup and destination are both floor {pickup_floor}")
            self.floors[pickup_floor].add_request(Request(destination_floor))
            logger.debug("pickup queued at floor %d for floor %d", pickup_floor, destination_floor)

    def step(self) -> None:
        with self._lock:
            for elevator in self.elevators:
                self._step_elevator(elevator)

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "floors": [len(floor) for floor in self.floors],
                "elevators": [
                    {
                        "id": elevator.elevator_id,
                        "current_floor": elevator.current_floor,
                        "destination_floor": elevator.destination_floor,
                        "passenger_count": len(elevator.passengers),
                        "passenger_floors": [p.desired_floor for p in elevator.passengers],
                    }
                    for elevator in self.elevators
                ],
                "waiting": [[r.desired_floor for r in floor.queue] for floor in self.floors],
                "delivered": self.delivered,
            }

    @staticmethod
    def _build_elevators(
        floor_count: int,
        elevator_count: int,
        floor_ranges: Optional[Sequence[Tuple[int, int]]],
    ) -> List[Elevator]:
        if floor_ranges is None:
            return [Elevator(i, min_floor=0, max_floor=floor_count - 1) for i in range(elevator_count)]
        if len(floor_ranges) != elevator_count:
            raise InvalidConfiguration(
                f"expected {elevator_count} floor ranges, got {len(floor_ranges)}"
            )
        elevators: List[Elevator] = []
        for i, (min_floor, max_floor) in enumerate(floor_ranges):
            if not 0 <= min_floor <= max_floor < floor_count:
                raise InvalidConfiguration(
                    f"floor range ({min_floor}, {max_floor}) for elevator {i} "
                    f"outside [0, {floor_count - 1}]"
                )
            elevators.append(Elevator(i, min_floor=min_floor, max_floor=max_floor))
        return elevators

    def _step_elevator(self, elevator: Elevator) -> None:
        if elevator.at_rest():
            self._wake(elevator)

        previous = elevator.move()

        released = elevator.release_passengers()
        if released:
            self.delivered += len(released)
            logger.debug(
                "elevator %d released %d at floor %d",
                elevator.elevator_id,
                len(released),
                elevator.current_floor,
            )

        target = reversal_target(elevator, previous)
        if target is not None:
            logger.debug(
                "elevator %d arrived at floor %d, reversing to %d",
                elevator.elevator_id,
                elevator.current_floor,
                target,
            )
            self._retarget(elevator, target)

        boarded = self.floors[elevator.current_floor].take(passing_filter(elevator))
        if boarded:
            elevator.board(boarded)
            logger.debug(
                "elevator %d boarded %d at floor %d",
                elevator.elevator_id,
                len(boarded),
                elevator.current_floor,
            )

    def _wake(self, elevator: Elevator) -> None:
        if self._board_resting(elevator):
            return
        waiting_elsewhere = any(
            self.floors[f].has_waiting() for f in range(elevator.min_floor, elevator.max_floor + 1)
        )
        if waiting_elsewhere:
            target = sweep_start_target(elevator)
            logger.debug(
                "elevator %d at rest on floor %d, sweeping toward %d",
                elevator.elevator_id,
                elevator.current_floor,
                target,
            )
            self._retarget(elevator, target)

    def _board_resting(self, elevator: Elevator) -> bool:
        reachable = elevator.floor_range
        boarded = self.floors[elevator.current_floor].take(lambda r: r.desired_floor in reachable)
        if not boarded:
            return False
        elevator.board(boarded)
        target = resting_target(boarded)
        logger.debug(
            "elevator %d at rest boarded %d at floor %d, heading to %d",
            elevator.elevator_id,
            len(boarded),
            elevator.current_floor,
            target,
        )
        self._retarget(elevator, target)
        return True

    def _retarget(self, elevator: Elevator, destination_floor: int) -> None:
        try:
            elevator.set_destination(destination_floor)
        except FloorOutOfBounds as exc:
            raise FloorOutOfBounds(f"invalid floor: {exc}") from exc

    def _check_floor(self, floor: int) -> None:
        if isinstance(floor, bool) or not isinstance(floor, int) or not 0 <= floor < self.floor_count:
            raise FloorOutOfBounds(f"floor {floor!r} out of bounds [0, {self.floor_count - 1}]")

    def _get_elevator(self, elevator_id: int) -> Elevator:
        if isinstance(elevator_id, bool) or not isinstance(elevator_id, int):
            raise InvalidElevatorID(f"invalid elevator {elevator_id!r}")
        if not 0 <= elevator_id < len(self.elevators):
            raise InvalidElevatorID(f"invalid elevator {elevator_id}")
        return self.elevators[elevator_id]
