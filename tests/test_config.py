"""Tests for simulation settings loading."""

import pytest

from racemgr.config import SimulationSettings, load_settings


def test_defaults() -> None:
    settings = load_settings()
    assert settings.dt == 0.5
    assert settings.damage_penalty == 0.5
    assert settings.error_base_chance_per_tick == 0.001
    assert settings.overtake_base_chance_per_tick == 0.003
    assert settings.debug is False


def test_load_partial_file(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("dt: 0.25\ndebug: true\n")
    settings = load_settings(path)
    assert settings.dt == 0.25
    assert settings.debug is True
    assert settings.damage_penalty == 0.5


def test_empty_file_gives_defaults(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert load_settings(path) == SimulationSettings()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_non_mapping_rejected(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_settings(path)


def test_invalid_values_rejected(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("dt: 0\n")
    with pytest.raises(ValueError):
        load_settings(path)


def test_unknown_keys_rejected(tmp_path) -> None:
    path = tmp_path / "settings.yaml"
    path.write_text("tick_rate: 10\n")
    with pytest.raises(ValueError):
        load_settings(path)
