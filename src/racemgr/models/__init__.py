"""Data models for the race simulation."""

from .driver import DriverProfile, Racecraft, SkillSet
from .race import RaceConfiguration, RaceParticipant
from .track import Track
from .vehicle import AeroCharacteristics, VehicleClass

__all__ = [
    "AeroCharacteristics",
    "DriverProfile",
    "RaceConfiguration",
    "RaceParticipant",
    "Racecraft",
    "SkillSet",
    "Track",
    "VehicleClass",
]
