"""Monotonic simulation clock driving the fixed-step loop."""

from strategist import config
from strategist.types import DeltaTime, SimTime


class SimulationClock:
    """Simulation time that only moves forward.

    The decision core compares timestamps (next decision, next attack)
    against ``now()``. Time advances only through ``advance()`` or ``tick()``,
    so runs are independent of wall-clock speed.
    """

    def __init__(
        self, start: SimTime = 0.0, timestep: float = config.FIXED_TIMESTEP
    ) -> None:
        if timestep <= 0:
            raise ValueError(f"timestep must be positive, got {timestep}")
        self._now = float(start)
        self.timestep = timestep
        self.ticks = 0

    def now(self) -> SimTime:
        """Current simulation time in seconds."""
        return self._now

    def advance(self, dt: float) -> SimTime:
        """Move time forward by ``dt`` seconds and return the new time."""
        if dt < 0:
            raise ValueError(f"Simulation time cannot run backwards (dt={dt})")
        self._now += dt
        return self._now

    def tick(self) -> DeltaTime:
        """Advance by one fixed timestep and return it."""
        self.advance(self.timestep)
        self.ticks += 1
        return DeltaTime(self.timestep)
