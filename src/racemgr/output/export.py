"""Export race results to CSV, JSON and text."""

import csv
import json
from dataclasses import asdict
from pathlib import Path

from racemgr.simulation.race import RaceResult


class Exporter:
    """Exports race output to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_results_csv(
        self,
        results: list[RaceResult],
        filename: str = "race_results.csv",
    ) -> Path:
        """Export final standings to CSV.

        Args:
            results: Race results
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                "position", "participant_id", "driver_name", "total_time",
                "time_delta", "best_lap", "damage", "is_player",
            ])

            for result in results:
                writer.writerow([
                    result.position,
                    result.participant_id,
                    result.driver_name,
                    f"{result.total_time:.3f}",
                    f"{result.time_delta:.3f}",
                    f"{result.best_lap:.3f}" if result.best_lap is not None else "",
                    f"{result.damage:.2f}",
                    result.is_player,
                ])

        return filepath

    def export_lap_times_csv(
        self,
        results: list[RaceResult],
        filename: str = "lap_times.csv",
    ) -> Path:
        """Export one row per participant lap."""
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["participant_id", "driver_name", "lap", "lap_time"])

            for result in results:
                for lap, lap_time in enumerate(result.lap_times, 1):
                    writer.writerow([
                        result.participant_id,
                        result.driver_name,
                        lap,
                        f"{lap_time:.3f}",
                    ])

        return filepath

    def export_results_json(
        self,
        results: list[RaceResult],
        filename: str = "race_results.json",
    ) -> Path:
        """Export full results, lap times included, to JSON."""
        filepath = self.output_dir / filename

        with open(filepath, "w") as f:
            json.dump({"results": [asdict(r) for r in results]}, f, indent=2)

        return filepath

    def export_log(
        self,
        entries: tuple[str, ...] | list[str],
        filename: str = "race_log.txt",
    ) -> Path:
        """Write the race log, one entry per line."""
        filepath = self.output_dir / filename

        with open(filepath, "w", encoding="utf-8") as f:
            for entry in entries:
                f.write(entry + "\n")

        return filepath

    def export_all(
        self,
        results: list[RaceResult],
        log: tuple[str, ...] | list[str],
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export all formats.

        Args:
            results: Race results
            log: Race log entries
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "results_csv": self.export_results_csv(results, f"{prefix}race_results.csv"),
            "lap_times_csv": self.export_lap_times_csv(results, f"{prefix}lap_times.csv"),
            "results_json": self.export_results_json(results, f"{prefix}race_results.json"),
            "log": self.export_log(log, f"{prefix}race_log.txt"),
        }
