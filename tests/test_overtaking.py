"""Tests for the overtake chance model."""

import math

import pytest

from racemgr.models import DriverProfile, RaceParticipant, Racecraft
from racemgr.simulation.overtaking import calculate_base_overtake_chance


def _participant(aggression: float, attack: float, defense: float) -> RaceParticipant:
    return RaceParticipant(
        id=0,
        driver=DriverProfile(name="Test Driver"),
        base_lap_time=60.0,
        aggression=aggression,
        racecraft=Racecraft(attack=attack, defense=defense),
    )


def test_chance_capped_at_maximum() -> None:
    attacker = _participant(3.0, 0.8, 0.8)
    defender = _participant(3.0, 0.8, 0.8)
    assert calculate_base_overtake_chance(attacker, defender, 0.003) == pytest.approx(0.503)


def test_chance_has_floor() -> None:
    attacker = _participant(0.1, 0.5, 0.8)
    defender = _participant(1.0, 0.8, 1.0)
    assert calculate_base_overtake_chance(attacker, defender, 0.003) == pytest.approx(0.103)


def test_chance_between_bounds() -> None:
    attacker = _participant(1.0, 0.3, 0.8)
    defender = _participant(1.0, 0.8, 1.0)
    assert calculate_base_overtake_chance(attacker, defender, 0.0) == pytest.approx(0.3)


def test_better_defense_lowers_chance() -> None:
    attacker = _participant(1.0, 0.3, 0.8)
    weak = _participant(1.0, 0.8, 0.8)
    strong = _participant(1.0, 0.8, 1.0)
    assert calculate_base_overtake_chance(attacker, weak) > calculate_base_overtake_chance(attacker, strong)


def test_zero_defense_does_not_divide_by_zero() -> None:
    attacker = _participant(2.0, 0.8, 0.8)
    defender = _participant(2.0, 0.8, 0.0)
    chance = calculate_base_overtake_chance(attacker, defender, 0.003)
    assert math.isfinite(chance)
    assert chance == pytest.approx(0.503)
