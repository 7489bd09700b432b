"""Skill-based reference pace for a driver on a track."""

from racemgr.models import DriverProfile, SkillSet, Track, VehicleClass

VEHICLE_SKILL_EFFECTIVENESS = 0.3
MAX_CONSISTENCY_BONUS = 0.05


def merge_skills(
    base: SkillSet,
    specific: SkillSet | None = None,
    hardware_bonus: dict[str, float] | None = None,
) -> SkillSet:
    """Combine base skills with vehicle-specific skills and hardware bonuses.

    Vehicle-specific skills count at 30%, hardware bonuses in full.
    """
    merged = base.model_dump()
    specific_values = specific.model_dump() if specific is not None else {}
    hardware_bonus = hardware_bonus or {}

    for key, value in merged.items():
        merged[key] = (
            value
            + specific_values.get(key, 0.0) * VEHICLE_SKILL_EFFECTIVENESS
            + hardware_bonus.get(key, 0.0)
        )

    return SkillSet(**merged)


def calculate_lap_time(
    driver: DriverProfile,
    track: Track,
    vehicle_class: VehicleClass,
    hardware_bonus: dict[str, float] | None = None,
) -> float:
    """Calculate a driver's base lap time in seconds.

    Each corner type is sped up by the skills that matter for it; straights
    always take their share of the reference time. Consistency adds up to
    a further 5%.

    Args:
        driver: Driver profile
        track: Circuit
        vehicle_class: Vehicle class being raced
        hardware_bonus: Skill bonuses from the driver's rig

    Returns:
        Lap time rounded to milliseconds

    Raises:
        ValueError: If the track has no reference time for the vehicle
            class or has no sections
    """
    reference_time = track.reference_lap_time(vehicle_class)
    if reference_time is None:
        raise ValueError(f"Track {track.id} has no reference lap time for {vehicle_class.value}")
    if track.total_sections == 0:
        raise ValueError(f"Track {track.id} has no corners or straights")

    skills = merge_skills(
        driver.skills,
        driver.specific_skills.get(vehicle_class),
        hardware_bonus,
    )

    slow_factor = skills.lines_and_apex * 0.07 + skills.throttle_control * 0.03
    medium_factor = skills.lines_and_apex * 0.06 + skills.brake_control * 0.04
    fast_factor = skills.lines_and_apex * 0.05 + skills.track_awareness * 0.03

    relative_time = (
        track.slow_corners * (1 - slow_factor)
        + track.medium_corners * (1 - medium_factor)
        + track.fast_corners * (1 - fast_factor)
        + track.straights
    )
    raw_time = relative_time * reference_time / track.total_sections

    raw_time *= 1 - min(MAX_CONSISTENCY_BONUS, skills.consistency * MAX_CONSISTENCY_BONUS)

    return round(raw_time, 3)
