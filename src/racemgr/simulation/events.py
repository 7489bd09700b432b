"""Race log and structured race events."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class EventType(str, Enum):
    """Types of race events."""

    MINOR_ERROR = "minor_error"
    MAJOR_ERROR = "major_error"
    OVERTAKE = "overtake"
    FAILED_OVERTAKE = "failed_overtake"
    LAP_COMPLETED = "lap_completed"
    FINISHED = "finished"


@dataclass
class RaceEvent:
    """Represents a race event."""

    event_type: EventType
    time: float
    participants_involved: list[int] = field(default_factory=list)
    damage: float = 0.0
    lap_time: float | None = None
    description: str = ""


class RaceLog:
    """Append-only, human-readable race log.

    Debug entries are only recorded when ``debug_mode`` is set.
    """

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode
        self._entries: list[str] = []

    def add(self, message: str, debug: bool = False) -> None:
        """Append a message, dropping debug messages outside debug mode."""
        if debug and not self.debug_mode:
            return
        self._entries.append(message)

    @property
    def entries(self) -> tuple[str, ...]:
        """Snapshot of all recorded entries."""
        return tuple(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)
