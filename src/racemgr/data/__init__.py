"""Static game data."""

from .catalog import BEGINNER_TRACKS, VEHICLE_AERO_CHARACTERISTICS, get_track

__all__ = ["BEGINNER_TRACKS", "VEHICLE_AERO_CHARACTERISTICS", "get_track"]
