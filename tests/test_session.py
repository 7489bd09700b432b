"""Tests for the race session lifecycle."""

import pytest

from racemgr.data import get_track
from racemgr.models import DriverProfile, RaceConfiguration, SkillSet, VehicleClass
from racemgr.simulation import RaceSession, RaceStatus


def _config(seed="session") -> RaceConfiguration:
    return RaceConfiguration(
        track=get_track("monza"),
        vehicle_class=VehicleClass.GT3,
        num_laps=1,
        opponents=2,
        seed=seed,
    )


def _player() -> DriverProfile:
    return DriverProfile(name="Player", skills=SkillSet(lines_and_apex=0.6, consistency=0.5))


def test_tick_before_start_raises() -> None:
    session = RaceSession(_config(), _player())
    with pytest.raises(RuntimeError):
        session.tick()
    assert session.state() is None


def test_run_to_completion() -> None:
    completed = []
    session = RaceSession(_config(), _player(), on_complete=completed.append)

    results = session.run()

    assert len(results) == 3
    assert [r.position for r in results] == [1, 2, 3]
    assert sum(r.is_player for r in results) == 1
    assert session.is_active is False
    assert session.rewards is not None
    assert completed == [results]
    assert session.state().status == RaceStatus.COMPLETE


def test_on_update_called_every_tick() -> None:
    states = []
    session = RaceSession(_config(), _player(), on_update=states.append)
    session.start()
    for _ in range(4):
        session.tick()
    assert len(states) == 4
    assert states[-1].time == pytest.approx(4 * session.settings.dt)


def test_start_twice_is_ignored() -> None:
    session = RaceSession(_config(), _player())
    session.start()
    simulator = session.simulator
    session.start()
    assert session.simulator is simulator


def test_cancel_stops_session() -> None:
    session = RaceSession(_config(), _player())
    session.start()
    session.tick()
    session.cancel()
    assert session.is_active is False
    assert session.state() is None
    with pytest.raises(RuntimeError):
        session.tick()


def test_same_seed_same_race() -> None:
    first = RaceSession(_config(seed=2024), _player()).run()
    second = RaceSession(_config(seed=2024), _player()).run()
    assert [(r.driver_name, r.total_time) for r in first] == [
        (r.driver_name, r.total_time) for r in second
    ]


def test_ticks_after_completion_do_not_advance() -> None:
    session = RaceSession(_config(), _player())
    session.run()
    time_before = session.state().time
    session.tick()
    assert session.state().time == time_before
