"""Driver profile model with skill attributes."""

from pydantic import BaseModel, Field

from .vehicle import VehicleClass


class SkillSet(BaseModel):
    """Driver skills (0.0 to 1.0 scale)."""

    lines_and_apex: float = Field(default=0.0, ge=0.0, description="Racing line through corners")
    brake_control: float = Field(default=0.0, ge=0.0, description="Braking precision")
    throttle_control: float = Field(default=0.0, ge=0.0, description="Corner exit traction")
    consistency: float = Field(default=0.0, ge=0.0, description="Lap-to-lap repeatability")
    tire_management: float = Field(default=0.0, ge=0.0, description="Tire preservation")
    racecraft: float = Field(default=0.0, ge=0.0, description="Wheel-to-wheel ability")
    setup_understanding: float = Field(default=0.0, ge=0.0, description="Car setup knowledge")
    track_awareness: float = Field(default=0.0, ge=0.0, description="Reading the track")
    adaptability: float = Field(default=0.0, ge=0.0, description="Adapting to conditions")


class DriverProfile(BaseModel):
    """A driver as known to the management game."""

    name: str = Field(..., description="Display name")
    xp: float = Field(default=0.0, ge=0.0, description="Accumulated experience points")
    skills: SkillSet = Field(default_factory=SkillSet, description="Base skills")
    specific_skills: dict[VehicleClass, SkillSet] = Field(
        default_factory=dict,
        description="Extra skills per vehicle class",
    )


class Racecraft(BaseModel):
    """Effectiveness in wheel-to-wheel duels (0-1 scale)."""

    attack: float = Field(default=0.8, ge=0.0, description="Offensive effectiveness")
    defense: float = Field(default=0.8, ge=0.0, description="Defensive effectiveness")
