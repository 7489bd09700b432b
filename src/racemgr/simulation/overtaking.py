"""Overtake success probability model."""

from racemgr.models import RaceParticipant

MIN_BASE_CHANCE = 0.1
MAX_BASE_CHANCE = 0.5


def calculate_base_overtake_chance(
    attacker: RaceParticipant,
    defender: RaceParticipant,
    base_chance_per_tick: float = 0.003,
) -> float:
    """Probability that a pass attempt succeeds, before closeness.

    The ratio of the attacker's aggression-weighted attack to the
    defender's defense is clamped to [0.1, 0.5] for game balance, then
    the flat per-tick bonus is added.

    Args:
        attacker: Participant attempting the pass
        defender: Participant being passed
        base_chance_per_tick: Flat bonus from the simulation settings

    Returns:
        Probability (not clamped to 1 after the bonus)
    """
    offense = attacker.aggression * attacker.racecraft.attack
    defense = defender.racecraft.defense

    if defense <= 0:
        # An undefended car is as easy to pass as the balance allows
        ratio = MAX_BASE_CHANCE
    else:
        ratio = offense / defense

    return min(max(ratio, MIN_BASE_CHANCE), MAX_BASE_CHANCE) + base_chance_per_tick
