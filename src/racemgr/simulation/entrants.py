"""Builds the starting field: the player plus AI opponents."""

from racemgr.models import DriverProfile, RaceConfiguration, RaceParticipant, Racecraft, SkillSet
from racemgr.simulation.laptime import calculate_lap_time
from racemgr.simulation.rng import RacePRNG

PLAYER_ID = 0
PLAYER_AGGRESSION = 3.0

# Racecraft on a 0.7-1.0 scale
RACECRAFT_FLOOR = 0.7
RACECRAFT_SPAN = 0.3

AI_PACE_DEVIATION = 0.05
AI_AGGRESSION_RANGE = (2.0, 5.0)


def build_player_participant(
    player: DriverProfile,
    config: RaceConfiguration,
    hardware_bonus: dict[str, float] | None = None,
) -> RaceParticipant:
    """Create the player's entry from their skills."""
    base_lap_time = calculate_lap_time(player, config.track, config.vehicle_class, hardware_bonus)
    skills = player.skills
    return RaceParticipant(
        id=PLAYER_ID,
        driver=player,
        base_lap_time=base_lap_time,
        aggression=PLAYER_AGGRESSION,
        racecraft=Racecraft(
            attack=RACECRAFT_FLOOR + RACECRAFT_SPAN * min(1.0, skills.racecraft),
            defense=RACECRAFT_FLOOR + RACECRAFT_SPAN * min(1.0, skills.consistency),
        ),
        is_player=True,
    )


def generate_ai_skills(rng: RacePRNG) -> SkillSet:
    """Random skills around a shared base level, clamped to [0, 1]."""
    base = rng.uniform(0.5, 0.8)

    def skill(offset: float, spread: float) -> float:
        return min(1.0, max(0.0, base + offset + rng.uniform(0.0, spread)))

    return SkillSet(
        lines_and_apex=skill(0.0, 0.2),
        brake_control=skill(-0.1, 0.2),
        throttle_control=skill(-0.05, 0.15),
        consistency=skill(-0.15, 0.25),
        tire_management=skill(-0.2, 0.2),
        track_awareness=skill(-0.1, 0.2),
        racecraft=skill(-0.05, 0.15),
        setup_understanding=skill(-0.25, 0.25),
        adaptability=skill(-0.2, 0.2),
    )


def generate_ai_opponents(config: RaceConfiguration, rng: RacePRNG) -> list[RaceParticipant]:
    """Create ``config.opponents`` AI entries paced around the reference time.

    Raises:
        ValueError: If the track has no reference time for the vehicle class
    """
    reference_time = config.track.reference_lap_time(config.vehicle_class)
    if reference_time is None:
        raise ValueError(
            f"Track {config.track.id} has no reference lap time for {config.vehicle_class.value}"
        )

    opponents = []
    for index in range(1, config.opponents + 1):
        profile = DriverProfile(name=f"AI Driver {index}", skills=generate_ai_skills(rng))
        deviation = rng.uniform(-AI_PACE_DEVIATION, AI_PACE_DEVIATION)
        opponents.append(RaceParticipant(
            id=PLAYER_ID + index,
            driver=profile,
            base_lap_time=reference_time * (1 + deviation),
            aggression=rng.uniform(*AI_AGGRESSION_RANGE),
            racecraft=Racecraft(
                attack=rng.uniform(RACECRAFT_FLOOR, RACECRAFT_FLOOR + RACECRAFT_SPAN),
                defense=rng.uniform(RACECRAFT_FLOOR, RACECRAFT_FLOOR + RACECRAFT_SPAN),
            ),
        ))

    return opponents


def build_field(
    player: DriverProfile,
    config: RaceConfiguration,
    rng: RacePRNG,
    hardware_bonus: dict[str, float] | None = None,
) -> list[RaceParticipant]:
    """Player first, then AI opponents, in starting order."""
    return [build_player_participant(player, config, hardware_bonus)] + generate_ai_opponents(config, rng)
