from __future__ import annotations

import logging
import math
import random
from typing import Callable, Dict, Iterable, List, Optional

from dispatch import DispatchEngine

from .config import PickupEvent, ScenarioConfig, TrafficBurst, UpdateEvent

logger = logging.getLogger(__name__)


class Simulation:
    """Drives a :class:`DispatchEngine` tick by tick.

    Each tick applies the scripted redirects and pickups due at that time,
    adds random arrivals, then steps the engine. Observers subscribe with
    :meth:`on_event`.
    """

    def __init__(
        self,
        engine: DispatchEngine,
        arrival_rate_per_floor: float = 0.0,
        bursts: Optional[List[TrafficBurst]] = None,
        random_seed: Optional[int] = None,
        pickups: Iterable[PickupEvent] = (),
        updates: Iterable[UpdateEvent] = (),
        status_hook_interval: int = 1,
    ) -> None:
        self.engine = engine
        self.arrival_rate_per_floor = arrival_rate_per_floor
        self.bursts = bursts or []
        self.random = random.Random(random_seed)
        self.current_time: int = 0
        self.arrivals: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self.status_hook_interval = max(1, status_hook_interval)
        self._pickups = sorted(pickups, key=lambda event: event.time)
        self._updates = sorted(updates, key=lambda event: event.time)

    def run(self, duration: int) -> None:
        for _ in range(duration):
            self.step()

    def step(self) -> None:
        self._apply_updates()
        self._apply_pickups()
        self._generate_arrivals()
        self.engine.step()

        if self.current_time % self.status_hook_interval == 0:
            self._emit_status()

        self.current_time += 1

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def state(self) -> dict:
        snapshot = self.engine.snapshot()
        return {
            "time": self.current_time,
            "status": [
                {
                    "elevator_id": elevator["id"],
                    "current_floor": elevator["current_floor"],
                    "destination_floor": elevator["destination_floor"],
                }
                for elevator in snapshot["elevators"]
            ],
            "engine": snapshot,
        }

    def _apply_updates(self) -> None:
        while self._updates and self._updates[0].time <= self.current_time:
            event = self._updates[0]
            self.engine.update(event.elevator_id, event.destination_floor)
            self._updates.pop(0)
            logger.info(
                "t=%d elevator %d redirected to floor %d",
                self.current_time,
                event.elevator_id,
                event.destination_floor,
            )
            self._emit("update", event.model_dump())

    def _apply_pickups(self) -> None:
        # An event leaves the script only once the engine accepts it, so a
        # rejected tick can be retried without replaying earlier pickups.
        applied: List[List[int]] = []
        while self._pickups and self._pickups[0].time <= self.current_time:
            event = self._pickups[0]
            self.engine.pickup(event.pickup_floor, event.destination_floor)
            self._pickups.pop(0)
            self.arrivals += 1
            applied.append([event.pickup_floor, event.destination_floor])
        if applied:
            self._emit_arrivals(applied, scripted=True)

    def _generate_arrivals(self) -> None:
        if self.engine.floor_count < 2:
            return
        generated: List[List[int]] = []
        for origin in range(self.engine.floor_count):
            rate = self.arrival_rate_per_floor * self._burst_multiplier(origin)
            for _ in range(self._poisson(rate)):
                destination = self._choose_destination(origin)
                self.engine.pickup(origin, destination)
                generated.append([origin, destination])
        if generated:
            self.arrivals += len(generated)
            logger.debug("t=%d %d random arrivals", self.current_time, len(generated))
            self._emit_arrivals(generated, scripted=False)

    def _choose_destination(self, origin: int) -> int:
        active_burst = next((b for b in self.bursts if b.active(self.current_time, origin)), None)
        if (
            active_burst
            and active_burst.destination_focus is not None
            and active_burst.destination_focus != origin
        ):
            return active_burst.destination_focus
        possible_floors = [f for f in range(self.engine.floor_count) if f != origin]
        return self.random.choice(possible_floors)

    def _burst_multiplier(self, origin: int) -> float:
        for burst in self.bursts:
            if burst.active(self.current_time, origin):
                return burst.multiplier
        return 1.0

    def _poisson(self, lam: float) -> int:
        if lam <= 0:
            return 0
        L = math.exp(-lam)
        k = 0
        p = 1.0
        while p > L:
            k += 1
            p *= self.random.random()
        return k - 1

    def _emit_arrivals(self, pickups: List[List[int]], scripted: bool) -> None:
        self._emit(
            "arrival",
            {"time": self.current_time, "count": len(pickups), "scripted": scripted, "pickups": pickups},
        )

    def _emit_status(self) -> None:
        self._emit("status", self.state())

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)


def build_simulation(config: ScenarioConfig) -> Simulation:
    engine = DispatchEngine(
        floor_count=config.building.floor_count,
        elevator_count=config.building.elevator_count,
    )
    return Simulation(
        engine=engine,
        arrival_rate_per_floor=config.arrival_rate_per_floor,
        bursts=config.bursts,
        random_seed=config.random_seed,
        pickups=config.pickups,
        updates=config.updates,
        status_hook_interval=config.status_hook_interval,
    )
