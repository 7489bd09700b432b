"""Race configuration and per-race participant state."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from .driver import DriverProfile, Racecraft
from .track import Track
from .vehicle import VehicleClass


class RaceConfiguration(BaseModel):
    """Immutable description of a race."""

    model_config = ConfigDict(frozen=True)

    track: Track = Field(..., description="Circuit being raced")
    vehicle_class: VehicleClass = Field(..., description="Vehicle class for all entrants")
    num_laps: int = Field(..., ge=1, description="Number of laps")
    opponents: int = Field(default=0, ge=0, description="Number of AI opponents")
    seed: int | str | None = Field(default=None, description="Random seed (None = nondeterministic)")


@dataclass
class RaceParticipant:
    """A driver's entry and live state during one race.

    The simulator owns and mutates the race-state fields for the duration
    of the race.
    """

    id: int
    driver: DriverProfile
    base_lap_time: float
    aggression: float
    racecraft: Racecraft = field(default_factory=Racecraft)
    is_player: bool = False

    # Race state
    damage: float = 0.0
    current_lap: int = 1
    track_position: float = 0.0
    finished: bool = False
    total_time: float = 0.0
    overtake_cooldown: float = 0.0
    is_attempting_overtake: bool = False
    lap_times: list[float] = field(default_factory=list)
    last_lap_time: float | None = None
    best_lap_time: float | None = None
    time_delta_to_ahead: float = 0.0

    @property
    def name(self) -> str:
        return self.driver.name

    def progress(self, track_length: float) -> float:
        """Total distance covered, counting completed laps."""
        return self.current_lap * track_length + self.track_position

    def reset_race_state(self) -> None:
        """Reset mutable state for a new race."""
        self.damage = 0.0
        self.current_lap = 1
        self.track_position = 0.0
        self.finished = False
        self.total_time = 0.0
        self.overtake_cooldown = 0.0
        self.is_attempting_overtake = False
        self.lap_times = []
        self.last_lap_time = None
        self.best_lap_time = None
        self.time_delta_to_ahead = 0.0
