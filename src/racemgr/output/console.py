"""Console output formatting."""

from racemgr.simulation.race import RaceResult, RaceState
from racemgr.simulation.rewards import RaceRewards


def format_race_time(seconds: float) -> str:
    """Format seconds as m:ss.sss."""
    minutes = int(seconds // 60)
    return f"{minutes}:{seconds - minutes * 60:06.3f}"


class ConsoleOutput:
    """Formats race output for console display."""

    @staticmethod
    def print_race_results(results: list[RaceResult]) -> None:
        """Print final standings to console.

        Args:
            results: Race results sorted by position
        """
        print("\n" + "=" * 70)
        print("RACE RESULTS")
        print("=" * 70)
        print(f"{'Pos':<4} {'Driver':<20} {'Time/Gap':<14} {'Best Lap':<10} {'Damage':<7}")
        print("-" * 70)

        for result in sorted(results, key=lambda r: r.position):
            if result.position == 1:
                time_str = format_race_time(result.total_time)
            else:
                time_str = f"+{result.time_delta:.3f}s"

            best_lap = f"{result.best_lap:.3f}s" if result.best_lap is not None else "-"
            marker = " *" if result.is_player else ""

            print(
                f"{result.position:<4} "
                f"{result.driver_name + marker:<20} "
                f"{time_str:<14} "
                f"{best_lap:<10} "
                f"{result.damage:<7.1f}"
            )

        print("=" * 70)

    @staticmethod
    def print_live_standings(state: RaceState, num_laps: int) -> None:
        """Print a one-screen view of the running order."""
        print(f"\n[{state.time:7.1f}s] {state.status.value.upper()}")
        for snap in state.positions:
            gap = "Leader" if snap.position == 1 else f"+{snap.time_delta_to_ahead:.1f}s"
            lap = min(snap.current_lap, num_laps)
            print(
                f"  P{snap.position:<3} {snap.driver_name:<20} "
                f"Lap {lap}/{num_laps}  {gap:<9} dmg {snap.damage:.1f}"
            )

    @staticmethod
    def print_race_log(entries: tuple[str, ...] | list[str], limit: int | None = None) -> None:
        """Print the race log, optionally only the last ``limit`` entries."""
        if limit is not None:
            entries = entries[-limit:]
        print("\nRACE LOG:")
        print("-" * 50)
        for entry in entries:
            print(entry)

    @staticmethod
    def print_rewards(rewards: RaceRewards | None) -> None:
        if rewards is None:
            return
        print(f"\nFinished P{rewards.position}: +{rewards.xp} XP, +{rewards.money} money")
