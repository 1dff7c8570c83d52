from __future__ import annotations


class DispatchError(ValueError):
    """Base class for caller-input errors raised by the dispatch engine."""


class InvalidConfiguration(DispatchError):
    pass


class InvalidElevatorID(DispatchError):
    pass


class FloorOutOfBounds(DispatchError):
    pass


class InvalidRequest(DispatchError):
    pass
