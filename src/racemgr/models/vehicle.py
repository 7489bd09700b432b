"""Vehicle classes and their aerodynamic characteristics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class VehicleClass(str, Enum):
    """Racing vehicle classes."""

    GT3 = "GT3"
    GT4 = "GT4"
    F1 = "F1"
    TCR = "TCR"
    KART = "Kart"
    LMP1 = "LMP1"


class AeroCharacteristics(BaseModel):
    """How a vehicle class behaves when following another car."""

    model_config = ConfigDict(frozen=True)

    min_following_time_gap: float = Field(
        ...,
        ge=0.0,
        description="Minimum comfortable following gap in seconds",
    )
    dirty_air_sensitivity: float = Field(
        default=0.0,
        ge=0.0,
        description="How sensitive the car is to dirty air (higher = more sensitive)",
    )
