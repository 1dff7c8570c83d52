from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from dispatch import MAX_ELEVATORS


class BuildingConfig(BaseModel):
    floor_count: int = Field(10, ge=1)
    elevator_count: int = Field(1, ge=1, le=MAX_ELEVATORS)


class PickupEvent(BaseModel):
    """A rider appearing at ``pickup_floor`` at tick ``time``."""

    time: int = Field(0, ge=0)
    pickup_floor: int
    destination_floor: int


class UpdateEvent(BaseModel):
    """An explicit redirect of one elevator at tick ``time``."""

    time: int = Field(0, ge=0)
    elevator_id: int
    destination_floor: int


class TrafficBurst(BaseModel):
    """Window of heavier random arrivals at one floor."""

    start_time: int = Field(0, ge=0)
    end_time: int = Field(0, ge=0)
    multiplier: float = Field(1.0, ge=0.0)
    origin_floor: int = 0
    destination_focus: Optional[int] = None

    @model_validator(mode="after")
    def _check_window(self) -> "TrafficBurst":
        if self.end_time < self.start_time:
            raise ValueError("end_time must not precede start_time")
        return self

    def active(self, time_step: int, origin: int) -> bool:
        return self.start_time <= time_step < self.end_time and origin == self.origin_floor


class ScenarioConfig(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    duration: int = Field(50, ge=0)
    building: BuildingConfig = Field(default_factory=BuildingConfig)
    arrival_rate_per_floor: float = Field(0.0, ge=0.0)
    random_seed: Optional[int] = None
    status_hook_interval: int = Field(1, ge=1)
    pickups: List[PickupEvent] = Field(default_factory=list)
    updates: List[UpdateEvent] = Field(default_factory=list)
    bursts: List[TrafficBurst] = Field(default_factory=list)
