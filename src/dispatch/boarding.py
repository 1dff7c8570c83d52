"""Boarding rules consulted by the engine on every step.

Two rules decide who gets on:

* A car passing a floor mid-sweep takes the riders whose wanted floor lies in
  ``[destination_floor, current_floor)``. The check only ever matches riders
  going down (or level with the car's target), so a descending car never picks
  up someone headed up. Upward riders are left for a resting car.
* A car at rest takes everyone waiting at its floor and heads for the first
  of them. With nobody at its floor but riders waiting elsewhere in its
  range, it sets off toward the far end of the range and starts sweeping.
"""
from __future__ import annotations

from typing import Callable, List, Optional

from .elevator import Elevator
from .models import Request


def passing_filter(elevator: Elevator) -> Callable[[Request], bool]:
    destination = elevator.destination_floor
    current = elevator.current_floor

    def accept(request: Request) -> bool:
        return destination <= request.desired_floor < current

    return accept


def resting_target(boarded: List[Request]) -> Optional[int]:
    """Destination for a resting car that just took on ``boarded``."""
    if not boarded:
        return None
    return boarded[0].desired_floor


def reversal_target(elevator: Elevator, previous_floor: int) -> Optional[int]:
    """Where to send a car that reached its destination this step.

    Returns ``None`` unless the car moved and arrived. Arriving on the way up
    sends it back to the bottom of its range; arriving on the way down sends
    it to the top.
    """
    if elevator.current_floor == previous_floor or not elevator.at_rest():
        return None
    if elevator.current_floor > previous_floor:
        return elevator.min_floor
    return elevator.max_floor


def sweep_start_target(elevator: Elevator) -> int:
    """Far end of the range for a resting car that has riders waiting elsewhere."""
    if elevator.max_floor - elevator.current_floor >= elevator.current_floor - elevator.min_floor:
        return elevator.max_floor
    return elevator.min_floor
