"""Per-agent mutable decision state."""

from __future__ import annotations

from dataclasses import dataclass

from strategist.types import Heading, SimTime, WorldPos

from .actions import ActionType
from .goals import Goal
from .perception import ThreatReference


@dataclass(slots=True)
class AgentState:
    """Everything the decision loop knows about its own agent.

    Owned by one StrategistAI and mutated only during that agent's tick:
    perception fields and goal by the loop, timers by the loop and the
    executor.

    Attributes:
        health_fraction: Own health in [0, 1]; None without a health resource.
        ammo_fraction: Own ammunition in [0, 1]; None without an ammo resource.
        action: Active action. Holds the configured initial action until the
            first decision fires.
        next_decision_time: Simulation time of the next utility evaluation.
        next_attack_time: Simulation time before which no shot may be fired.
        threat: Hostile tracked this tick, if any.
    """

    position: WorldPos
    facing: Heading
    health_fraction: float | None
    ammo_fraction: float | None
    action: ActionType
    goal: Goal = Goal.NORMAL
    next_decision_time: SimTime = 0.0
    next_attack_time: SimTime = 0.0
    threat: ThreatReference | None = None
    decisions_made: int = 0

    @property
    def threat_distance(self) -> float:
        """Distance to the tracked threat, infinite when none is tracked."""
        return self.threat.distance if self.threat is not None else float("inf")
