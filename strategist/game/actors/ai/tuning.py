"""Per-agent designer settings for the strategist AI.

Defaults come from ``strategist.constants``. Every value is checked once,
when the config is built; a config that exists is a consistent config.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from strategist.constants import AIConstants, CombatConstants, MovementConstants
from strategist.environment.obstacles import SIGHT_BLOCKING
from strategist.errors import ConfigurationError
from strategist.types import FactionId, LayerMask

from .actions import ActionType


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigurationError(message)


def _fraction(name: str, value: float) -> None:
    _require(0.0 <= value <= 1.0, f"{name} must lie in [0, 1], got {value}")


def _non_negative(name: str, value: float) -> None:
    _require(
        math.isfinite(value) and value >= 0.0,
        f"{name} must be a finite non-negative number, got {value}",
    )


def _positive(name: str, value: float) -> None:
    _require(
        math.isfinite(value) and value > 0.0,
        f"{name} must be a finite positive number, got {value}",
    )


@dataclass(frozen=True, slots=True)
class StrategistConfig:
    """Designer-tunable constants for one strategist agent.

    Attributes:
        decision_interval: Seconds between utility re-evaluations.
        first_decision_delay: Seconds after creation before the first decision.
        critical_health_threshold: Health fraction at or below which the
            agent is always in Survival.
        critical_threat_distance: A visible threat this close (inclusive)
            triggers Survival when health is also at or below
            ``threatened_health_threshold``.
        view_radius: Perception range; also normalizes threat closeness.
        view_angle_degrees: Full width of the view cone.
        hostile_factions: Factions perception treats as hostile. Empty means
            "every faction but my own".
        obstacle_mask: Obstacle layers that block sight for this agent.
        sticky_threat: Keep the previously tracked threat while it stays
            visible and no other hostile is nearer by more than
            ``threat_switch_tolerance``.
        require_*_points: Reject an empty point set at construction.
    """

    decision_interval: float = AIConstants.DECISION_INTERVAL
    first_decision_delay: float = AIConstants.FIRST_DECISION_DELAY

    critical_health_threshold: float = AIConstants.CRITICAL_HEALTH_THRESHOLD
    critical_threat_distance: float = AIConstants.CRITICAL_THREAT_DISTANCE
    threatened_health_threshold: float = AIConstants.THREATENED_HEALTH_THRESHOLD

    view_radius: float = AIConstants.VIEW_RADIUS
    view_angle_degrees: float = AIConstants.VIEW_ANGLE_DEGREES
    hostile_factions: frozenset[FactionId] = field(default_factory=frozenset)
    obstacle_mask: LayerMask = SIGHT_BLOCKING
    sticky_threat: bool = True
    threat_switch_tolerance: float = AIConstants.THREAT_SWITCH_TOLERANCE

    normal_speed: float = MovementConstants.NORMAL_SPEED
    panic_speed: float = MovementConstants.PANIC_SPEED

    attack_range: float = CombatConstants.ATTACK_RANGE
    attack_cooldown: float = CombatConstants.ATTACK_COOLDOWN
    attack_damage: float = CombatConstants.ATTACK_DAMAGE
    shot_cost: int = CombatConstants.SHOT_COST
    standoff_distance: float = CombatConstants.STANDOFF_DISTANCE

    score_jitter: float = AIConstants.SCORE_JITTER
    cover_jitter: float = AIConstants.COVER_JITTER
    top_k: int = AIConstants.TOP_K
    selection_epsilon: float = AIConstants.SELECTION_EPSILON

    initial_action: ActionType = ActionType.GET_AMMO

    require_heal_points: bool = False
    require_ammo_points: bool = False
    require_cover_points: bool = False

    def __post_init__(self) -> None:
        _positive("decision_interval", self.decision_interval)
        _non_negative("first_decision_delay", self.first_decision_delay)

        _fraction("critical_health_threshold", self.critical_health_threshold)
        _fraction("threatened_health_threshold", self.threatened_health_threshold)
        _require(
            self.threatened_health_threshold >= self.critical_health_threshold,
            "threatened_health_threshold must be >= critical_health_threshold, "
            f"got {self.threatened_health_threshold} < "
            f"{self.critical_health_threshold}",
        )
        _non_negative("critical_threat_distance", self.critical_threat_distance)

        _positive("view_radius", self.view_radius)
        _non_negative("threat_switch_tolerance", self.threat_switch_tolerance)
        _require(
            0.0 < self.view_angle_degrees <= 360.0,
            f"view_angle_degrees must lie in (0, 360], got {self.view_angle_degrees}",
        )
        _require(self.obstacle_mask >= 0, "obstacle_mask must be a non-negative mask")

        _non_negative("normal_speed", self.normal_speed)
        _non_negative("panic_speed", self.panic_speed)

        _non_negative("attack_range", self.attack_range)
        _non_negative("attack_cooldown", self.attack_cooldown)
        _non_negative("attack_damage", self.attack_damage)
        _require(self.shot_cost >= 1, f"shot_cost must be >= 1, got {self.shot_cost}")
        _positive("standoff_distance", self.standoff_distance)

        _non_negative("score_jitter", self.score_jitter)
        _non_negative("cover_jitter", self.cover_jitter)
        _require(
            1 <= self.top_k <= len(ActionType),
            f"top_k must lie in 1..{len(ActionType)}, got {self.top_k}",
        )
        _positive("selection_epsilon", self.selection_epsilon)
        _require(
            isinstance(self.initial_action, ActionType),
            f"initial_action must be an ActionType, got {self.initial_action!r}",
        )

    @property
    def half_view_angle(self) -> float:
        return self.view_angle_degrees / 2.0
