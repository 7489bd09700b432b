"""Simulation engine components."""

from .events import EventType, RaceEvent, RaceLog
from .race import RaceResult, RaceSimulator, RaceState, RaceStatus
from .rng import RacePRNG
from .session import RaceSession

__all__ = [
    "EventType",
    "RaceEvent",
    "RaceLog",
    "RacePRNG",
    "RaceResult",
    "RaceSession",
    "RaceSimulator",
    "RaceState",
    "RaceStatus",
]
