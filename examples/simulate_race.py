#!/usr/bin/env python3
"""Example: run a full race session for a player against AI opponents.

This script demonstrates the full workflow:
1. Build a player profile and race configuration
2. Generate AI opponents and simulate tick by tick
3. Display standings, rewards and optionally export results

Usage:
    python examples/simulate_race.py [--track TRACK] [--laps N] [--opponents N]

Examples:
    python examples/simulate_race.py --track silverstone --laps 3 --seed 42
    python examples/simulate_race.py --debug --export
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from racemgr.config import load_settings
from racemgr.data import get_track
from racemgr.models import DriverProfile, RaceConfiguration, SkillSet, VehicleClass
from racemgr.output import ConsoleOutput, Exporter
from racemgr.simulation import RaceSession


def main():
    parser = argparse.ArgumentParser(description="Simulate a race against AI opponents")
    parser.add_argument(
        "--track",
        default="silverstone",
        help="Catalog track id (default: silverstone)",
    )
    parser.add_argument(
        "--vehicle-class",
        default=VehicleClass.GT3.value,
        choices=[vc.value for vc in VehicleClass],
        help="Vehicle class (default: GT3)",
    )
    parser.add_argument("--laps", type=int, default=3, help="Number of laps (default: 3)")
    parser.add_argument("--opponents", type=int, default=5, help="AI opponents (default: 5)")
    parser.add_argument("--seed", default="1234", help="Race seed (default: 1234)")
    parser.add_argument("--settings", help="YAML file with simulation settings")
    parser.add_argument(
        "--live-every",
        type=int,
        default=60,
        help="Print live standings every N ticks, 0 to disable (default: 60)",
    )
    parser.add_argument("--debug", action="store_true", help="Record debug race log entries")
    parser.add_argument("--export", action="store_true", help="Export results to CSV/JSON")
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Output directory for exports (default: output)",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        track = get_track(args.track)
        settings = load_settings(args.settings)
    except (KeyError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    if args.debug:
        settings = settings.model_copy(update={"debug": True})

    config = RaceConfiguration(
        track=track,
        vehicle_class=VehicleClass(args.vehicle_class),
        num_laps=args.laps,
        opponents=args.opponents,
        seed=args.seed,
    )
    player = DriverProfile(
        name="Player",
        skills=SkillSet(
            lines_and_apex=0.6,
            brake_control=0.4,
            throttle_control=0.5,
            consistency=0.5,
            track_awareness=0.2,
            racecraft=0.4,
        ),
    )

    print(f"Race: {track.name}, {config.num_laps} laps, {config.opponents} opponents")
    print(f"Vehicle class: {config.vehicle_class.value}, seed: {config.seed}")

    session = RaceSession(config, player, settings)
    try:
        session.start()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    ticks = 0
    while session.is_active:
        state = session.tick()
        ticks += 1
        if args.live_every and ticks % args.live_every == 0:
            ConsoleOutput.print_live_standings(state, config.num_laps)

    ConsoleOutput.print_race_results(session.results)
    ConsoleOutput.print_rewards(session.rewards)

    if args.export:
        state = session.state()
        exporter = Exporter(output_dir=args.output_dir)
        files = exporter.export_all(session.results, state.log, prefix=f"{track.id}_{config.seed}")
        print("\nExported files:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
