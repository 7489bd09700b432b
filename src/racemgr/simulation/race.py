"""Tick-based race simulation engine.

Every tick advances all racing participants by a fixed time step. Speeds
for the whole field are computed first and applied afterwards, so the
order in which participants are evaluated never changes who is ahead of
whom within a tick. Driver errors and overtake attempts are rolled after
the field has moved.

All randomness comes from one :class:`RacePRNG` owned by the simulator;
draws happen in a fixed order (lap-time noise in running order, then
error and overtake rolls in running order) so a seed fully determines
the race.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from racemgr.config import SimulationSettings
from racemgr.data.catalog import VEHICLE_AERO_CHARACTERISTICS
from racemgr.models import AeroCharacteristics, RaceConfiguration, RaceParticipant
from racemgr.simulation.aero import calculate_min_time_gap, calculate_track_dirty_air_factor
from racemgr.simulation.events import EventType, RaceEvent, RaceLog
from racemgr.simulation.overtaking import calculate_base_overtake_chance
from racemgr.simulation.rng import RacePRNG

logger = logging.getLogger(__name__)

LAP_TIME_NOISE = 0.1  # seconds either side of the effective lap time

# Following / overtaking-mode speed limits
OVERTAKE_MODE_SPEED_ADVANTAGE = 1.02
OVERTAKE_MODE_RANGE = 20.0  # meters
OVERTAKE_MODE_MIN_AGGRESSION = 2.0
SIDE_BY_SIDE_GAP = 5.0  # meters
SIDE_BY_SIDE_SPEED_FACTOR = 0.99
CLOSING_OWN_SPEED_WEIGHT = 0.98
FOLLOW_MIN_SPEED_FACTOR = 0.95
FOLLOW_SPEED_FACTOR_RANGE = 0.03
TIGHT_FOLLOW_GAP = 10.0  # meters
TIGHT_FOLLOW_SPEED_FACTOR = 0.98

# Overtake attempts
ATTEMPT_GAP_FACTOR = 1.2
ATTEMPT_SPEED_ADVANTAGE = 1.01
MAX_CLOSENESS_MULTIPLIER = 1.5
OVERTAKER_COOLDOWN = 5.0
OVERTAKEN_COOLDOWN = 3.0
FAILED_OVERTAKE_COOLDOWN = 4.0
FAILED_OVERTAKE_DAMAGE = (0.0, 0.5)

# Driver errors
AGGRESSION_ERROR_CHANCE = 0.002
MAJOR_ERROR_MIN_AGGRESSION = 3.0
MAJOR_ERROR_CHANCE = 0.15
MAJOR_ERROR_DAMAGE = (1.0, 3.0)
MINOR_ERROR_DAMAGE = (0.2, 1.0)


class ParticipantStatus(str, Enum):
    """Participant race status."""

    RACING = "racing"
    FINISHED = "finished"


class RaceStatus(str, Enum):
    """Overall race status."""

    ACTIVE = "active"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SpeedUpdate:
    """Movement computed for one participant during one tick."""

    participant: RaceParticipant
    new_position: float
    time_delta: float
    speed: float
    attempting_overtake: bool


@dataclass
class RaceResult:
    """Final race result for a participant."""

    participant_id: int
    driver_name: str
    position: int
    total_time: float
    best_lap: float | None
    damage: float
    time_delta: float  # behind the winner
    is_player: bool = False
    lap_times: list[float] = field(default_factory=list)


@dataclass
class ParticipantSnapshot:
    """Read-only view of a participant for live display."""

    participant_id: int
    driver_name: str
    position: int
    current_lap: int
    track_position: float
    total_time: float
    damage: float
    time_delta_to_ahead: float
    last_lap_time: float | None
    best_lap_time: float | None
    status: ParticipantStatus


@dataclass
class RaceState:
    """Pollable race state."""

    time: float
    status: RaceStatus
    positions: list[ParticipantSnapshot]
    log: tuple[str, ...] = ()


class RaceSimulator:
    """Simulates one race in fixed time steps."""

    def __init__(
        self,
        participants: list[RaceParticipant],
        config: RaceConfiguration,
        settings: SimulationSettings | None = None,
        rng: RacePRNG | None = None,
        aero: AeroCharacteristics | None = None,
    ):
        """Initialize the race.

        Args:
            participants: Entrants in starting order
            config: Race configuration
            settings: Engine tunables (defaults if None)
            rng: Random source (seeded from ``config.seed`` if None)
            aero: Aero characteristics (looked up by vehicle class if None)

        Raises:
            ValueError: If there are no participants, ids are not unique or a
                base lap time is not positive
            KeyError: If the vehicle class has no aero characteristics
        """
        if not participants:
            raise ValueError("A race needs at least one participant")
        ids = [p.id for p in participants]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Participant ids must be unique, got {ids}")
        for participant in participants:
            if participant.base_lap_time <= 0:
                raise ValueError(
                    f"{participant.name} has a non-positive base lap time: {participant.base_lap_time}"
                )

        self.config = config
        self.settings = settings if settings is not None else SimulationSettings()
        self.rng = rng if rng is not None else RacePRNG(config.seed)
        self.aero = aero if aero is not None else VEHICLE_AERO_CHARACTERISTICS[config.vehicle_class]

        # Canonical store keeps insertion order; running order is derived per tick
        self.participants = list(participants)
        self.track_length = config.track.length_meters
        self.num_laps = config.num_laps
        self.track_dirty_air_factor = calculate_track_dirty_air_factor(config.track)

        self.log = RaceLog(debug_mode=self.settings.debug)
        self.events: list[RaceEvent] = []
        self.simulation_time = 0.0
        self.ticks = 0

        # Ideal speeds drawn for the current tick, by participant id
        self._ideal_speeds: dict[int, float] = {}
        # Time between a lap-line crossing and the end of its tick
        self._carried_time: dict[int, float] = {}

        for participant in self.participants:
            participant.reset_race_state()

        logger.info(
            "Race set up: %s, %s, %d laps, %d participants",
            config.track.name,
            config.vehicle_class.value,
            self.num_laps,
            len(self.participants),
        )

    @property
    def dt(self) -> float:
        return self.settings.dt

    @property
    def is_complete(self) -> bool:
        return all(p.finished for p in self.participants)

    @property
    def status(self) -> RaceStatus:
        return RaceStatus.COMPLETE if self.is_complete else RaceStatus.ACTIVE

    def progress(self, participant: RaceParticipant) -> float:
        return participant.progress(self.track_length)

    def running_order(self) -> list[RaceParticipant]:
        """Participants sorted by total progress, leader first."""
        return sorted(self.participants, key=self.progress, reverse=True)

    # ------------------------------------------------------------------
    # Pace
    # ------------------------------------------------------------------

    def get_effective_lap_time(self, participant: RaceParticipant) -> float:
        """Lap time including damage and a fresh random variation."""
        damage_penalty = participant.damage * self.settings.damage_penalty
        random_factor = self.rng.uniform(-LAP_TIME_NOISE, LAP_TIME_NOISE)
        return participant.base_lap_time + damage_penalty + random_factor

    def get_ideal_speed(self, participant: RaceParticipant) -> float:
        """Free-air speed in m/s."""
        return self.track_length / self.get_effective_lap_time(participant)

    def _speed_of(self, participant: RaceParticipant) -> float:
        speed = self._ideal_speeds.get(participant.id)
        if speed is None:
            speed = self.get_ideal_speed(participant)
        return speed

    def _display_speed(self, participant: RaceParticipant) -> float:
        # No draw here: gaps are for display only
        speed = self._ideal_speeds.get(participant.id)
        if speed is None:
            lap_time = participant.base_lap_time + participant.damage * self.settings.damage_penalty
            speed = self.track_length / lap_time if lap_time > 0 else 0.0
        return speed

    # ------------------------------------------------------------------
    # Traffic
    # ------------------------------------------------------------------

    def find_driver_ahead(self, participant: RaceParticipant) -> RaceParticipant | None:
        """Closest racing participant with strictly greater progress."""
        own_progress = self.progress(participant)
        ahead = None
        ahead_progress = 0.0

        for other in self.participants:
            if other is participant or other.finished:
                continue
            other_progress = self.progress(other)
            if other_progress > own_progress and (ahead is None or other_progress < ahead_progress):
                ahead = other
                ahead_progress = other_progress

        return ahead

    def calculate_gap(self, participant: RaceParticipant, ahead: RaceParticipant) -> float:
        """Distance in meters from participant to the car ahead."""
        return self.progress(ahead) - self.progress(participant)

    def calculate_min_distance_gap(
        self,
        ahead: RaceParticipant,
        ideal_speed: float,
    ) -> tuple[float, float]:
        """Minimum following gap behind ``ahead`` as (seconds, meters)."""
        min_time_gap = calculate_min_time_gap(
            self.aero,
            ahead.racecraft.defense,
            self.track_dirty_air_factor,
        )
        return min_time_gap, min_time_gap * ideal_speed

    def _traffic_limited_speed(
        self,
        participant: RaceParticipant,
        ideal_speed: float,
        ahead: RaceParticipant | None,
        ahead_ideal_speed: float | None,
    ) -> tuple[float, bool]:
        """Speed after traffic, and whether the participant is in overtaking mode."""
        if ahead is None or ahead_ideal_speed is None:
            self.log.add(
                f"[DEBUG] {participant.name} - Pos: L{participant.current_lap}"
                f"@{participant.track_position:.1f}m - "
                f"Speed: {ideal_speed:.2f} m/s ({ideal_speed:.2f} m/s ideal) - "
                f"LEADER - Damage: {participant.damage:.1f} - "
                f"Time: {participant.total_time:.1f}s",
                debug=True,
            )
            return ideal_speed, False

        gap = self.calculate_gap(participant, ahead)
        min_time_gap, min_distance_gap = self.calculate_min_distance_gap(ahead, ideal_speed)
        actual_speed = ideal_speed

        has_speed_advantage = ideal_speed > ahead_ideal_speed * OVERTAKE_MODE_SPEED_ADVANTAGE
        is_in_overtaking_range = gap < OVERTAKE_MODE_RANGE
        is_aggressive_enough = participant.aggression > OVERTAKE_MODE_MIN_AGGRESSION

        if has_speed_advantage and is_in_overtaking_range and is_aggressive_enough:
            attempting = True
            if gap < SIDE_BY_SIDE_GAP:
                actual_speed = min(actual_speed, ahead_ideal_speed * SIDE_BY_SIDE_SPEED_FACTOR)
            else:
                actual_speed = min(
                    actual_speed,
                    ideal_speed * CLOSING_OWN_SPEED_WEIGHT
                    + ahead_ideal_speed * (1 - CLOSING_OWN_SPEED_WEIGHT),
                )
        else:
            attempting = False
            if gap < min_distance_gap:
                closeness_ratio = max(0.0, gap / min_distance_gap)
                speed_factor = FOLLOW_MIN_SPEED_FACTOR + FOLLOW_SPEED_FACTOR_RANGE * closeness_ratio
                if gap < TIGHT_FOLLOW_GAP:
                    actual_speed = min(actual_speed, ahead_ideal_speed * TIGHT_FOLLOW_SPEED_FACTOR)
                else:
                    actual_speed = min(actual_speed, ideal_speed * speed_factor)

        self.log.add(
            f"[DEBUG] {participant.name} - Pos: L{participant.current_lap}"
            f"@{participant.track_position:.1f}m - "
            f"Speed: {actual_speed:.2f} m/s ({ideal_speed:.2f} m/s ideal) - "
            f"Gap to {ahead.name}: {gap:.2f}m (Min: {min_distance_gap:.2f}m) - "
            f"Overtaking Mode: {attempting} - "
            f"Dirty Air Factor: {self.track_dirty_air_factor:.2f} - "
            f"Min Time Gap: {min_time_gap:.2f}s - "
            f"Damage: {participant.damage:.1f} - "
            f"Time: {participant.total_time:.1f}s",
            debug=True,
        )
        return actual_speed, attempting

    def calculate_actual_speed(
        self,
        participant: RaceParticipant,
        ideal_speed: float,
        ahead: RaceParticipant | None,
        ahead_ideal_speed: float | None = None,
    ) -> float:
        """Speed after following/blocking, flagging overtaking mode.

        Args:
            participant: Participant being moved
            ideal_speed: Participant's free-air speed this tick
            ahead: Car immediately ahead, if any
            ahead_ideal_speed: Free-air speed of ``ahead`` (drawn if omitted)

        Returns:
            Speed in m/s
        """
        if ahead is not None and ahead_ideal_speed is None:
            ahead_ideal_speed = self._speed_of(ahead)
        speed, attempting = self._traffic_limited_speed(
            participant, ideal_speed, ahead, ahead_ideal_speed
        )
        participant.is_attempting_overtake = attempting
        return speed

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def compute_speed_updates(self, order: list[RaceParticipant] | None = None) -> list[SpeedUpdate]:
        """Compute every racing participant's move without applying it."""
        if order is None:
            order = self.running_order()
        racing = [p for p in order if not p.finished]

        self._ideal_speeds = {p.id: self.get_ideal_speed(p) for p in racing}

        updates = []
        for participant in racing:
            ideal_speed = self._ideal_speeds[participant.id]
            ahead = self.find_driver_ahead(participant)
            ahead_speed = self._ideal_speeds[ahead.id] if ahead is not None else None
            speed, attempting = self._traffic_limited_speed(
                participant, ideal_speed, ahead, ahead_speed
            )
            updates.append(SpeedUpdate(
                participant=participant,
                new_position=participant.track_position + speed * self.dt,
                time_delta=self.dt,
                speed=speed,
                attempting_overtake=attempting,
            ))

        return updates

    def apply_speed_updates(self, updates: list[SpeedUpdate]) -> None:
        """Apply precomputed moves, then check lap completion."""
        for update in updates:
            participant = update.participant
            participant.track_position = update.new_position
            participant.total_time += update.time_delta + self._carried_time.pop(participant.id, 0.0)
            participant.is_attempting_overtake = update.attempting_overtake
            self.check_lap_completion(participant, update.speed)

    def check_lap_completion(self, participant: RaceParticipant, actual_speed: float) -> None:
        """Record a lap if the participant crossed the line this tick.

        ``total_time`` is set back to the moment the line was crossed; the
        remainder of the tick is credited again on the participant's next
        update so lap times always sum to the total time.
        """
        if participant.track_position < self.track_length:
            return

        overrun_distance = participant.track_position - self.track_length
        time_adjustment = overrun_distance / actual_speed if actual_speed > 0 else 0.0

        previous_laps_total = sum(participant.lap_times)
        lap_time = participant.total_time - previous_laps_total - time_adjustment

        participant.lap_times.append(lap_time)
        participant.last_lap_time = lap_time
        is_best = participant.best_lap_time is None or lap_time < participant.best_lap_time
        if is_best:
            participant.best_lap_time = lap_time

        participant.total_time -= time_adjustment

        best_lap_info = " (Best Lap!)" if is_best else ""
        self.log.add(f"{participant.name} sets lap time: {lap_time:.3f}s{best_lap_info}")
        self.log.add(
            f"{participant.name} completed lap {participant.current_lap} "
            f"(total time: {participant.total_time:.3f}s, lap time: {lap_time:.3f}s)"
        )
        self.events.append(RaceEvent(
            event_type=EventType.LAP_COMPLETED,
            time=self.simulation_time,
            participants_involved=[participant.id],
            lap_time=lap_time,
            description=f"{participant.name} completed lap {participant.current_lap}",
        ))

        if participant.current_lap >= self.num_laps:
            participant.finished = True
            self.log.add(
                f"{participant.name} finished the race in {participant.total_time:.3f} seconds."
            )
            self.events.append(RaceEvent(
                event_type=EventType.FINISHED,
                time=self.simulation_time,
                participants_involved=[participant.id],
                description=f"{participant.name} finished",
            ))
        else:
            participant.track_position = overrun_distance
            participant.current_lap += 1
            self._carried_time[participant.id] = time_adjustment

    def _split_progress(self, progress: float) -> tuple[int, float]:
        lap, position = divmod(progress, self.track_length)
        return int(lap), position

    def swap_positions(self, first: RaceParticipant, second: RaceParticipant) -> None:
        """Exchange the total progress of two participants."""
        first_progress = self.progress(first)
        second_progress = self.progress(second)

        first.current_lap, first.track_position = self._split_progress(second_progress)
        second.current_lap, second.track_position = self._split_progress(first_progress)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def process_events(self, participant: RaceParticipant, current_time: float) -> None:
        """Roll for a driver error, then for an overtake."""
        if participant.finished:
            return
        self.process_driver_error(participant, current_time)
        self.process_overtaking_attempt(participant, current_time)

    def calculate_error_chance(self, participant: RaceParticipant) -> float:
        return self.settings.error_base_chance_per_tick + AGGRESSION_ERROR_CHANCE * participant.aggression

    def is_major_error(self, participant: RaceParticipant) -> bool:
        """Only aggressive drivers risk a major error."""
        return (
            participant.aggression >= MAJOR_ERROR_MIN_AGGRESSION
            and self.rng.next() < MAJOR_ERROR_CHANCE
        )

    def process_driver_error(self, participant: RaceParticipant, current_time: float) -> None:
        if self.rng.next() < self.calculate_error_chance(participant):
            if self.is_major_error(participant):
                self.apply_major_error(participant, current_time)
            else:
                self.apply_minor_error(participant, current_time)

    def apply_major_error(self, participant: RaceParticipant, current_time: float) -> None:
        damage = self.rng.uniform(*MAJOR_ERROR_DAMAGE)
        participant.damage += damage
        message = (
            f"[{current_time:.1f}s] {participant.name} made a major mistake "
            f"and took damage +{damage:.1f}!"
        )
        self.log.add(message)
        self.events.append(RaceEvent(
            event_type=EventType.MAJOR_ERROR,
            time=current_time,
            participants_involved=[participant.id],
            damage=damage,
            description=message,
        ))

    def apply_minor_error(self, participant: RaceParticipant, current_time: float) -> None:
        damage = self.rng.uniform(*MINOR_ERROR_DAMAGE)
        participant.damage += damage
        message = (
            f"[{current_time:.1f}s] {participant.name} made a mistake "
            f"and lost some pace (damage +{damage:.1f})."
        )
        self.log.add(message)
        self.events.append(RaceEvent(
            event_type=EventType.MINOR_ERROR,
            time=current_time,
            participants_involved=[participant.id],
            damage=damage,
            description=message,
        ))

    def can_attempt_overtake(self, participant: RaceParticipant, ahead: RaceParticipant) -> bool:
        """Passes are only fought between cars on the same lap.

        A swap across the line would move lap counts without their lap times.
        """
        return participant.current_lap == ahead.current_lap

    def process_overtaking_attempt(self, participant: RaceParticipant, current_time: float) -> None:
        """Attempt a pass on the car ahead if conditions allow."""
        if participant.overtake_cooldown > 0:
            participant.overtake_cooldown = max(0.0, participant.overtake_cooldown - self.dt)
            return

        ahead = self.find_driver_ahead(participant)
        if ahead is None or not self.can_attempt_overtake(participant, ahead):
            return

        gap = self.calculate_gap(participant, ahead)
        ideal_speed = self._speed_of(participant)
        ahead_speed = self._speed_of(ahead)
        _, min_distance_gap = self.calculate_min_distance_gap(ahead, ideal_speed)

        is_close_enough = gap < min_distance_gap * ATTEMPT_GAP_FACTOR
        has_speed_advantage = ideal_speed > ahead_speed * ATTEMPT_SPEED_ADVANTAGE

        if not (is_close_enough and has_speed_advantage and participant.is_attempting_overtake):
            return

        base_chance = calculate_base_overtake_chance(
            participant,
            ahead,
            self.settings.overtake_base_chance_per_tick,
        )
        if gap > 0:
            closeness_multiplier = min(MAX_CLOSENESS_MULTIPLIER, min_distance_gap / gap)
        else:
            closeness_multiplier = MAX_CLOSENESS_MULTIPLIER
        overtake_chance = base_chance * closeness_multiplier

        self.log.add(
            f"[DEBUG] {participant.name} attempting to overtake {ahead.name} "
            f"with chance {overtake_chance:.2f} (closeness: {closeness_multiplier:.2f})",
            debug=True,
        )

        if self.rng.next() < overtake_chance:
            self.apply_successful_overtake(participant, ahead, current_time)
        else:
            self.apply_failed_overtake(participant, current_time)

    def apply_successful_overtake(
        self,
        participant: RaceParticipant,
        overtaken: RaceParticipant,
        current_time: float,
    ) -> None:
        self.swap_positions(participant, overtaken)
        participant.overtake_cooldown = OVERTAKER_COOLDOWN
        overtaken.overtake_cooldown = OVERTAKEN_COOLDOWN

        message = f"[{current_time:.1f}s] {participant.name} overtakes {overtaken.name}!"
        self.log.add(message)
        self.events.append(RaceEvent(
            event_type=EventType.OVERTAKE,
            time=current_time,
            participants_involved=[participant.id, overtaken.id],
            description=message,
        ))

    def apply_failed_overtake(self, participant: RaceParticipant, current_time: float) -> None:
        damage = self.rng.uniform(*FAILED_OVERTAKE_DAMAGE)
        participant.damage += damage
        participant.overtake_cooldown = FAILED_OVERTAKE_COOLDOWN

        message = (
            f"[{current_time:.1f}s] {participant.name} tries to overtake but fails "
            f"and loses time (damage +{damage:.1f})."
        )
        self.log.add(message)
        self.events.append(RaceEvent(
            event_type=EventType.FAILED_OVERTAKE,
            time=current_time,
            participants_involved=[participant.id],
            damage=damage,
            description=message,
        ))

    # ------------------------------------------------------------------
    # Ticks and results
    # ------------------------------------------------------------------

    def update_live_gaps(self, current_time: float) -> None:
        """Refresh each participant's time gap to the car ahead and log it."""
        order = self.running_order()
        entries = []

        for index, participant in enumerate(order):
            if index == 0:
                participant.time_delta_to_ahead = 0.0
                entries.append(f"{participant.name} (Leading)")
                continue

            meter_gap = self.progress(order[index - 1]) - self.progress(participant)
            speed = self._display_speed(participant)
            participant.time_delta_to_ahead = meter_gap / speed if speed > 0 else 0.0
            entries.append(f"{participant.name}: +{participant.time_delta_to_ahead:.1f}s")

        self.log.add(f"[{current_time:.1f}s] Live gaps: " + " | ".join(entries))

    def advance_tick(self, simulation_time: float | None = None) -> None:
        """Advance the race by one time step.

        Args:
            simulation_time: Clock value at the end of this tick
                (defaults to the previous value plus ``dt``)
        """
        if self.is_complete:
            return

        if simulation_time is None:
            simulation_time = self.simulation_time + self.dt
        self.simulation_time = simulation_time
        self.ticks += 1

        order = self.running_order()
        updates = self.compute_speed_updates(order)
        self.apply_speed_updates(updates)

        for participant in order:
            if not participant.finished:
                self.process_events(participant, simulation_time)

        self.update_live_gaps(simulation_time)

        logger.debug(
            "Tick %d at %.1fs: leader %s",
            self.ticks,
            simulation_time,
            self.running_order()[0].name,
        )

        if self.is_complete:
            self.log.add("--- Race finished ---")
            self.log_final_positions()
            logger.info("Race complete after %d ticks (%.1fs)", self.ticks, simulation_time)

    def simulate_race(self, max_ticks: int | None = None) -> list["RaceResult"]:
        """Run ticks until every participant has finished.

        Args:
            max_ticks: Safety limit on the number of ticks

        Returns:
            Final standings

        Raises:
            RuntimeError: If ``max_ticks`` is reached before the race ends
        """
        while not self.is_complete:
            if max_ticks is not None and self.ticks >= max_ticks:
                raise RuntimeError(
                    f"Race did not finish within {max_ticks} ticks "
                    f"({self.simulation_time:.1f}s simulated)"
                )
            self.advance_tick()

        return self.results()

    def results(self) -> list[RaceResult]:
        """Standings sorted by total time, with deltas to the winner."""
        standings = sorted(self.participants, key=lambda p: p.total_time)
        winner_time = standings[0].total_time

        return [
            RaceResult(
                participant_id=p.id,
                driver_name=p.name,
                position=position,
                total_time=p.total_time,
                best_lap=p.best_lap_time,
                damage=p.damage,
                time_delta=0.0 if position == 1 else p.total_time - winner_time,
                is_player=p.is_player,
                lap_times=list(p.lap_times),
            )
            for position, p in enumerate(standings, 1)
        ]

    def log_final_positions(self) -> None:
        self.log.add("Final standings:")
        for result in self.results():
            delta = "---" if result.position == 1 else f"+{result.time_delta:.1f}s"
            self.log.add(
                f"{result.position}. {result.driver_name} - "
                f"Total time: {result.total_time:.1f}s, "
                f"Damage: {result.damage:.1f}, Gap: {delta}"
            )

    def snapshot(self) -> RaceState:
        """Current race state for display."""
        positions = [
            ParticipantSnapshot(
                participant_id=p.id,
                driver_name=p.name,
                position=position,
                current_lap=p.current_lap,
                track_position=p.track_position,
                total_time=p.total_time,
                damage=p.damage,
                time_delta_to_ahead=p.time_delta_to_ahead,
                last_lap_time=p.last_lap_time,
                best_lap_time=p.best_lap_time,
                status=ParticipantStatus.FINISHED if p.finished else ParticipantStatus.RACING,
            )
            for position, p in enumerate(self.running_order(), 1)
        ]
        return RaceState(
            time=self.simulation_time,
            status=self.status,
            positions=positions,
            log=self.log.entries,
        )
