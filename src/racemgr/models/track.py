"""Track model with corner mix and reference lap times."""

from pydantic import BaseModel, ConfigDict, Field

from .vehicle import VehicleClass


class Track(BaseModel):
    """Represents a circuit."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Track identifier (e.g., 'monza')")
    name: str = Field(..., description="Track name")
    country: str | None = Field(default=None, description="Country")

    length_meters: float = Field(..., gt=0, description="Lap length in meters")

    # Corner mix
    slow_corners: int = Field(default=0, ge=0, description="Number of slow corners")
    medium_corners: int = Field(default=0, ge=0, description="Number of medium-speed corners")
    fast_corners: int = Field(default=0, ge=0, description="Number of fast corners")
    straights: int = Field(default=0, ge=0, description="Number of straight sections")

    reference_lap_times: dict[VehicleClass, float] = Field(
        default_factory=dict,
        description="Reference lap time in seconds per vehicle class",
    )
    difficulty: int = Field(default=5, ge=1, le=10, description="Difficulty rating (1-10)")

    @property
    def total_corners(self) -> int:
        """Number of corners of any speed."""
        return self.slow_corners + self.medium_corners + self.fast_corners

    @property
    def total_sections(self) -> int:
        """Corners plus straights."""
        return self.total_corners + self.straights

    def reference_lap_time(self, vehicle_class: VehicleClass) -> float | None:
        """Reference lap time for a vehicle class, if the track defines one."""
        return self.reference_lap_times.get(vehicle_class)
