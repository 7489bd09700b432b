"""Simulation settings and their YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


class SimulationSettings(BaseModel):
    """Engine tunables shared by every race."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dt: float = Field(default=0.5, gt=0, description="Tick length in seconds")
    damage_penalty: float = Field(
        default=0.5,
        ge=0.0,
        description="Lap time penalty in seconds per damage point",
    )
    error_base_chance_per_tick: float = Field(
        default=0.001,
        ge=0.0,
        le=1.0,
        description="Base probability of a driver error each tick",
    )
    overtake_base_chance_per_tick: float = Field(
        default=0.003,
        ge=0.0,
        le=1.0,
        description="Flat bonus added to every overtake chance",
    )
    debug: bool = Field(default=False, description="Record debug-only race log entries")


def load_settings(path: Path | str | None = None) -> SimulationSettings:
    """Load simulation settings from a YAML file.

    Missing keys fall back to their defaults.

    Args:
        path: Settings file. ``None`` returns the defaults.

    Returns:
        Validated :class:`SimulationSettings`.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If the file is not a mapping or a value is out of range.
    """
    if path is None:
        return SimulationSettings()

    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return SimulationSettings()
    if not isinstance(data, dict):
        raise ValueError(
            f"Settings file {settings_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )

    # pydantic.ValidationError is a ValueError
    return SimulationSettings(**data)
