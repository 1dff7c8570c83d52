"""Elevator dispatch engine for LiftLogic."""

from .config import MAX_ELEVATORS, EngineLimits
from .engine import DispatchEngine
from .errors import (
    DispatchError,
    FloorOutOfBounds,
    InvalidConfiguration,
    InvalidElevatorID,
    InvalidRequest,
)
from .models import ElevatorStatus, FloorRange, Request

__all__ = [
    "DispatchEngine",
    "DispatchError",
    "ElevatorStatus",
    "EngineLimits",
    "FloorOutOfBounds",
    "FloorRange",
    "InvalidConfiguration",
    "InvalidElevatorID",
    "InvalidRequest",
    "MAX_ELEVATORS",
    "Request",
]
