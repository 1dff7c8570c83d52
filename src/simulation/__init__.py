"""Scenario driver for the LiftLogic dispatch engine."""

from .config import BuildingConfig, PickupEvent, ScenarioConfig, TrafficBurst, UpdateEvent
from .simulation import Simulation, build_simulation

__all__ = [
    "BuildingConfig",
    "PickupEvent",
    "ScenarioConfig",
    "Simulation",
    "TrafficBurst",
    "UpdateEvent",
    "build_simulation",
]
