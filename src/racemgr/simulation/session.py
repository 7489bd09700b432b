"""Race session: sets up a race, ticks it and hands back results."""

import logging
from collections.abc import Callable

from racemgr.config import SimulationSettings
from racemgr.models import DriverProfile, RaceConfiguration
from racemgr.simulation.entrants import build_field
from racemgr.simulation.race import RaceResult, RaceSimulator, RaceState
from racemgr.simulation.rewards import RaceRewards, calculate_rewards
from racemgr.simulation.rng import RacePRNG

logger = logging.getLogger(__name__)


class RaceSession:
    """Drives one race for the player.

    The caller owns the clock: call :meth:`tick` at whatever cadence the
    display needs, or :meth:`run` to finish the race immediately.
    Cancelling simply stops the session; nothing needs releasing.
    """

    def __init__(
        self,
        config: RaceConfiguration,
        player: DriverProfile,
        settings: SimulationSettings | None = None,
        hardware_bonus: dict[str, float] | None = None,
        on_update: Callable[[RaceState], None] | None = None,
        on_complete: Callable[[list[RaceResult]], None] | None = None,
    ):
        self.config = config
        self.player = player
        self.settings = settings if settings is not None else SimulationSettings()
        self.hardware_bonus = hardware_bonus
        self.on_update = on_update
        self.on_complete = on_complete

        self.simulator: RaceSimulator | None = None
        self.is_active = False
        self.current_time = 0.0
        self.results: list[RaceResult] = []
        self.rewards: RaceRewards | None = None

    def start(self) -> None:
        """Build the field and set up the simulator.

        Does nothing while a race is already running.
        """
        if self.is_active:
            return

        race_rng = RacePRNG(self.config.seed)
        participants = build_field(
            self.player,
            self.config,
            race_rng.spawn("field"),
            self.hardware_bonus,
        )
        self.simulator = RaceSimulator(participants, self.config, self.settings, rng=race_rng)
        self.is_active = True
        self.current_time = 0.0
        self.results = []
        self.rewards = None

        logger.info(
            "Race session started for %s with %d opponents",
            self.player.name,
            self.config.opponents,
        )

    def tick(self) -> RaceState:
        """Advance one time step and return the new race state.

        Raises:
            RuntimeError: If the session was never started or was cancelled
        """
        if self.simulator is None:
            raise RuntimeError("Race session is not running")

        if self.is_active:
            self.current_time += self.settings.dt
            self.simulator.advance_tick(self.current_time)

        state = self.simulator.snapshot()
        if self.on_update is not None:
            self.on_update(state)

        if self.is_active and self.simulator.is_complete:
            self._complete()

        return state

    def run(self) -> list[RaceResult]:
        """Start if needed and tick until the race is over."""
        if self.simulator is None:
            self.start()
        while self.is_active:
            self.tick()
        return self.results

    def cancel(self) -> None:
        """Stop the race without producing results."""
        if self.is_active:
            logger.info("Race session cancelled at %.1fs", self.current_time)
        self.is_active = False
        self.simulator = None

    def state(self) -> RaceState | None:
        """Current race state, or None before the first start."""
        if self.simulator is None:
            return None
        return self.simulator.snapshot()

    def _complete(self) -> None:
        self.is_active = False
        self.results = self.simulator.results()
        self.rewards = calculate_rewards(self.results)

        if self.rewards is not None:
            logger.info(
                "Player finished P%d: +%d XP, +%d money",
                self.rewards.position,
                self.rewards.xp,
                self.rewards.money,
            )

        if self.on_complete is not None:
            self.on_complete(self.results)
