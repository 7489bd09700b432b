"""Dirty-air model: how closely a car can follow another."""

from racemgr.models import AeroCharacteristics, Track

SLOW_CORNER_WEIGHT = 1.5
MEDIUM_CORNER_WEIGHT = 1.0
FAST_CORNER_WEIGHT = 0.7

# Straights give slipstream and recovery opportunities
STRAIGHTS_REFERENCE = 15
STRAIGHTS_MAX_RELIEF = 0.4
STRAIGHTS_FLOOR = 0.6

DEFENSE_GAP_FACTOR = 0.1


def calculate_min_time_gap(
    aero: AeroCharacteristics,
    defender_defense: float,
    track_dirty_air_factor: float,
) -> float:
    """Minimum following time gap in seconds.

    Args:
        aero: Aero characteristics of the vehicle class
        defender_defense: Defense skill of the car being followed
        track_dirty_air_factor: Output of :func:`calculate_track_dirty_air_factor`

    Returns:
        Time gap in seconds
    """
    return (
        aero.min_following_time_gap
        * (1 + defender_defense * DEFENSE_GAP_FACTOR)
        * track_dirty_air_factor
    )


def calculate_track_dirty_air_factor(track: Track) -> float:
    """How strongly the track amplifies dirty air.

    Slow corners make following harder than fast ones; the weighted
    average over all corners is relieved by the number of straights.
    A track without corners has no dirty air and returns 0.0.
    """
    total_corners = track.total_corners
    if total_corners == 0:
        return 0.0

    corner_weighted_sum = (
        track.slow_corners * SLOW_CORNER_WEIGHT
        + track.medium_corners * MEDIUM_CORNER_WEIGHT
        + track.fast_corners * FAST_CORNER_WEIGHT
    )
    straights_effect = max(
        STRAIGHTS_FLOOR,
        1.0 - (track.straights / STRAIGHTS_REFERENCE) * STRAIGHTS_MAX_RELIEF,
    )

    return (corner_weighted_sum / total_corners) * straights_effect
