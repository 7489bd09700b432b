"""Track and vehicle catalog."""

from racemgr.models import AeroCharacteristics, Track, VehicleClass

VEHICLE_AERO_CHARACTERISTICS: dict[VehicleClass, AeroCharacteristics] = {
    VehicleClass.F1: AeroCharacteristics(min_following_time_gap=0.8, dirty_air_sensitivity=1.0),
    VehicleClass.LMP1: AeroCharacteristics(min_following_time_gap=0.7, dirty_air_sensitivity=0.9),
    VehicleClass.GT3: AeroCharacteristics(min_following_time_gap=0.5, dirty_air_sensitivity=0.7),
    VehicleClass.GT4: AeroCharacteristics(min_following_time_gap=0.4, dirty_air_sensitivity=0.5),
    VehicleClass.TCR: AeroCharacteristics(min_following_time_gap=0.3, dirty_air_sensitivity=0.3),
    # Least sensitive to dirty air
    VehicleClass.KART: AeroCharacteristics(min_following_time_gap=0.2, dirty_air_sensitivity=0.0),
}

BEGINNER_TRACKS: list[Track] = [
    Track(
        id="silverstone",
        name="Silverstone",
        country="UK",
        length_meters=5891.0,
        slow_corners=5,
        medium_corners=10,
        fast_corners=15,
        straights=5,
        reference_lap_times={VehicleClass.GT3: 120.0, VehicleClass.GT4: 130.0},
        difficulty=7,
    ),
    Track(
        id="monza",
        name="Monza",
        country="Italy",
        length_meters=5793.0,
        slow_corners=3,
        medium_corners=5,
        fast_corners=10,
        straights=10,
        reference_lap_times={VehicleClass.GT3: 110.0, VehicleClass.GT4: 125.0},
        difficulty=5,
    ),
]


def get_track(track_id: str) -> Track:
    """Look up a catalog track by id.

    Raises:
        KeyError: If no track with that id exists.
    """
    for track in BEGINNER_TRACKS:
        if track.id == track_id:
            return track
    raise KeyError(f"Unknown track: {track_id}")
