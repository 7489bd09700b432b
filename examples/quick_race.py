#!/usr/bin/env python3
"""Quick race example with a hand-built field.

Runs the simulator directly on five participants, without the session
or skill model, and prints the standings and the tail of the race log.

Usage:
    python examples/quick_race.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from racemgr.config import SimulationSettings
from racemgr.data import get_track
from racemgr.models import DriverProfile, RaceConfiguration, RaceParticipant, Racecraft, VehicleClass
from racemgr.output import ConsoleOutput
from racemgr.simulation import RaceSimulator


def create_field() -> list[RaceParticipant]:
    """A player and four opponents of similar pace."""
    field_data = [
        # name, base lap time, aggression, attack, defense
        ("Player", 110.0, 4.0, 0.9, 0.8),
        ("Opponent 1", 110.8, 2.5, 0.85, 0.9),
        ("Opponent 2", 111.5, 3.5, 0.8, 0.85),
        ("Opponent 3", 109.9, 2.0, 0.95, 0.95),
        ("Opponent 4", 112.2, 3.0, 0.75, 0.8),
    ]

    return [
        RaceParticipant(
            id=index,
            driver=DriverProfile(name=name),
            base_lap_time=lap_time,
            aggression=aggression,
            racecraft=Racecraft(attack=attack, defense=defense),
            is_player=index == 0,
        )
        for index, (name, lap_time, aggression, attack, defense) in enumerate(field_data)
    ]


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    track = get_track("monza")
    config = RaceConfiguration(
        track=track,
        vehicle_class=VehicleClass.GT3,
        num_laps=5,
        opponents=4,
        seed="quick-race",
    )

    print("Race Simulation - Quick Example")
    print("=" * 50)
    print(f"Track: {track.name} ({track.length_meters:.0f} m)")
    print(f"Laps: {config.num_laps}")

    simulator = RaceSimulator(create_field(), config, SimulationSettings())
    results = simulator.simulate_race()

    ConsoleOutput.print_race_results(results)
    ConsoleOutput.print_race_log(simulator.log.entries, limit=15)
    return 0


if __name__ == "__main__":
    sys.exit(main())
