"""Tests for the skill-based lap time model."""

import pytest

from racemgr.models import DriverProfile, SkillSet, Track, VehicleClass
from racemgr.simulation.laptime import calculate_lap_time, merge_skills


def _track(**overrides) -> Track:
    data = dict(
        id="test",
        name="Test Circuit",
        length_meters=4000.0,
        slow_corners=4,
        medium_corners=5,
        fast_corners=3,
        straights=4,
        reference_lap_times={VehicleClass.GT3: 90.0, VehicleClass.F1: 70.0},
    )
    data.update(overrides)
    return Track(**data)


def _skills(value: float) -> SkillSet:
    return SkillSet(**{name: value for name in SkillSet.model_fields})


def test_zero_skills_match_reference_time() -> None:
    driver = DriverProfile(name="Rookie")
    assert calculate_lap_time(driver, _track(), VehicleClass.GT3) == pytest.approx(90.0)
    assert calculate_lap_time(driver, _track(), VehicleClass.F1) == pytest.approx(70.0)


def test_full_skills_are_faster() -> None:
    """Corners: 4*0.9 + 5*0.9 + 3*0.92 + 4 = 14.86 of 16 sections, then 5% consistency."""
    driver = DriverProfile(name="Ace", skills=_skills(1.0))
    expected = round(14.86 * 90.0 / 16 * 0.95, 3)
    assert calculate_lap_time(driver, _track(), VehicleClass.GT3) == pytest.approx(expected)


def test_consistency_bonus_is_capped() -> None:
    steady = DriverProfile(name="Steady", skills=SkillSet(consistency=1.0))
    very_steady = DriverProfile(name="Very Steady", skills=SkillSet(consistency=3.0))
    assert calculate_lap_time(steady, _track(), VehicleClass.GT3) == calculate_lap_time(
        very_steady, _track(), VehicleClass.GT3
    )


def test_lap_time_is_rounded_to_milliseconds() -> None:
    driver = DriverProfile(name="Mid", skills=_skills(0.37))
    lap_time = calculate_lap_time(driver, _track(), VehicleClass.GT3)
    assert lap_time == round(lap_time, 3)


def test_vehicle_specific_skills_help_only_their_class() -> None:
    driver = DriverProfile(
        name="GT Specialist",
        specific_skills={VehicleClass.GT3: _skills(1.0)},
    )
    assert calculate_lap_time(driver, _track(), VehicleClass.GT3) < 90.0
    assert calculate_lap_time(driver, _track(), VehicleClass.F1) == pytest.approx(70.0)


def test_hardware_bonus_speeds_up_driver() -> None:
    driver = DriverProfile(name="Rig Owner")
    with_rig = calculate_lap_time(driver, _track(), VehicleClass.GT3, {"lines_and_apex": 0.5})
    assert with_rig < calculate_lap_time(driver, _track(), VehicleClass.GT3)


def test_missing_reference_time_raises() -> None:
    driver = DriverProfile(name="Rookie")
    with pytest.raises(ValueError):
        calculate_lap_time(driver, _track(), VehicleClass.KART)


def test_track_without_sections_raises() -> None:
    track = _track(slow_corners=0, medium_corners=0, fast_corners=0, straights=0)
    with pytest.raises(ValueError):
        calculate_lap_time(DriverProfile(name="Rookie"), track, VehicleClass.GT3)


def test_merge_skills() -> None:
    """Base 0.5 + specific 0.5 at 30% + hardware 0.1."""
    merged = merge_skills(
        SkillSet(lines_and_apex=0.5),
        SkillSet(lines_and_apex=0.5),
        {"lines_and_apex": 0.1},
    )
    assert merged.lines_and_apex == pytest.approx(0.75)
    assert merged.brake_control == 0.0


def test_merge_without_extras_is_identity() -> None:
    base = _skills(0.4)
    assert merge_skills(base) == base
