"""Experience and prize money for a race result."""

from dataclasses import dataclass

from racemgr.simulation.race import RaceResult

BASE_XP = 100
BASE_MONEY = 50


@dataclass
class RaceRewards:
    """What the player earns from a race."""

    position: int
    xp: int
    money: int


def calculate_rewards(results: list[RaceResult]) -> RaceRewards | None:
    """Rewards for the player's result, or None if the player did not race.

    Better finishes multiply the base rewards: the winner of an N-car race
    earns N times the base, last place earns the base.
    """
    player_result = next((r for r in results if r.is_player), None)
    if player_result is None:
        return None

    multiplier = max(1, len(results) - player_result.position + 1)
    return RaceRewards(
        position=player_result.position,
        xp=BASE_XP * multiplier,
        money=BASE_MONEY * multiplier,
    )
