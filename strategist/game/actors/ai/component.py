"""
StrategistAI: the per-tick decision loop of a strategist agent.

Every tick:
    1. Sense   - refresh own position, health/ammo fractions and the tracked
                 threat (PerceptionComponent).
    2. Goal    - recompute Normal/Survival from health and threat distance.
    3. Decide  - only when the decision timer has elapsed: score, select and
                 execute an action, then re-arm the timer.
    4. Attack  - while Fight is the active action, attempt a shot every tick,
                 regardless of the decision timer.

All collaborators are injected at construction. The component never looks up
other actors itself; it sees hostiles through the ``hostiles`` provider and
reaches a target only through ``resolve_target``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from strategist import config as app_config
from strategist.errors import ConfigurationError
from strategist.events import ActionChangedEvent, GoalChangedEvent, publish_event
from strategist.types import ActorId, SimTime

from .actions import ActionType
from .executor import ActionExecutor
from .goals import Goal, evaluate_goal
from .interfaces import (
    AmmoResource,
    Body,
    Clock,
    HealthResource,
    MovementController,
    OcclusionTest,
    PerceptionCandidate,
    RandomSource,
    TargetResolver,
)
from .locator import PointKind, ResourceLocator
from .perception import PerceptionComponent
from .selection import ActionSelector
from .state import AgentState
from .tuning import StrategistConfig
from .utility import ScoreBreakdown, UtilityContext, UtilityScorer

logger = logging.getLogger(__name__)


class StrategistAI:
    """Utility-driven decision loop for one agent.

    Args:
        actor_id: Identity of the agent, used for events and log lines.
        body: Source of the agent's own position and facing.
        clock: Monotonic simulation clock.
        rng: Random source for jitter and selection. Seed it for
            reproducible runs.
        occlusion_test: Sight-line predicate against world geometry.
        mover: Movement controller receiving speed and destination orders.
        locator: Heal, ammo and cover point sets.
        hostiles: Returns the perception candidates for this tick.
        resolve_target: Maps a tracked ActorId to its live position and
            health, or None once it is gone.
        health: Own health resource, if any.
        ammo: Own ammunition resource, if any.
        config: Designer settings; defaults when omitted.

    Raises:
        ConfigurationError: If a point set the config marks as required is
            empty.
    """

    def __init__(
        self,
        actor_id: ActorId,
        *,
        body: Body,
        clock: Clock,
        rng: RandomSource,
        occlusion_test: OcclusionTest,
        mover: MovementController,
        locator: ResourceLocator,
        hostiles: Callable[[], Sequence[PerceptionCandidate]],
        resolve_target: TargetResolver,
        health: HealthResource | None = None,
        ammo: AmmoResource | None = None,
        config: StrategistConfig | None = None,
    ) -> None:
        self.actor_id = actor_id
        self.config = config or StrategistConfig()
        self._check_point_sets(locator)

        self.body = body
        self.clock = clock
        self.health = health
        self.ammo = ammo
        self.locator = locator
        self.occlusion_test = occlusion_test
        self._hostiles = hostiles

        self.perception = PerceptionComponent(
            self.config.view_radius,
            self.config.half_view_angle,
            sticky=self.config.sticky_threat,
            switch_tolerance=self.config.threat_switch_tolerance,
        )
        self.scorer = UtilityScorer(
            self.config.view_radius, rng, jitter=self.config.score_jitter
        )
        self.selector = ActionSelector(
            rng, top_k=self.config.top_k, epsilon=self.config.selection_epsilon
        )
        self.executor = ActionExecutor(
            actor_id,
            self.config,
            mover,
            locator,
            occlusion_test,
            rng,
            resolve_target,
            ammo=ammo,
        )

        self.state = AgentState(
            position=body.position,
            facing=body.facing,
            health_fraction=health.percent() if health is not None else None,
            ammo_fraction=ammo.percent() if ammo is not None else None,
            action=self.config.initial_action,
            next_decision_time=clock.now() + self.config.first_decision_delay,
        )

        # Debug: results of the most recent decision.
        self.last_breakdown: ScoreBreakdown | None = None
        self.last_decision_time: SimTime | None = None

        self.executor.set_speed(self.config.normal_speed)

    def _check_point_sets(self, locator: ResourceLocator) -> None:
        required = (
            (self.config.require_heal_points, PointKind.HEAL),
            (self.config.require_ammo_points, PointKind.AMMO),
            (self.config.require_cover_points, PointKind.COVER),
        )
        for is_required, kind in required:
            if is_required and not locator.has_points(kind):
                raise ConfigurationError(
                    f"Actor {self.actor_id}: {kind.value} points are required "
                    f"but none were supplied"
                )

    # ------------------------------------------------------------------
    # Per-tick driver
    # ------------------------------------------------------------------

    @property
    def goal(self) -> Goal:
        return self.state.goal

    @property
    def current_action(self) -> ActionType:
        return self.state.action

    def update(self, now: SimTime | None = None) -> None:
        """Run one tick of the decision loop."""
        if not app_config.STRATEGIST_AI_ENABLED:
            return
        if self.health is not None and self.health.is_dead():
            return
        if now is None:
            now = self.clock.now()

        self._sense()
        self._update_goal(now)

        if now >= self.state.next_decision_time:
            self._decide(now)

        if self.state.action is ActionType.FIGHT:
            self.executor.try_attack(self.state, now)

    def _sense(self) -> None:
        state = self.state
        state.position = self.body.position
        state.facing = self.body.facing
        state.health_fraction = (
            self.health.percent() if self.health is not None else None
        )
        state.ammo_fraction = self.ammo.percent() if self.ammo is not None else None
        state.threat = self.perception.find_threat(
            state.position,
            state.facing,
            list(self._hostiles()),
            self.occlusion_test,
            tracked=state.threat,
        )

    def _update_goal(self, now: SimTime) -> None:
        state = self.state
        # Without a health resource the agent is treated as unhurt.
        health = state.health_fraction if state.health_fraction is not None else 1.0
        goal = evaluate_goal(
            health,
            state.threat_distance,
            self.config.critical_health_threshold,
            self.config.critical_threat_distance,
            self.config.threatened_health_threshold,
        )
        if goal is not state.goal:
            logger.debug(
                f"Actor {self.actor_id}: goal {state.goal.name} -> {goal.name}"
            )
            publish_event(
                GoalChangedEvent(
                    actor_id=self.actor_id,
                    previous=state.goal,
                    current=goal,
                    time=now,
                )
            )
            state.goal = goal

    def _decide(self, now: SimTime) -> None:
        state = self.state
        context = UtilityContext(
            health_fraction=state.health_fraction,
            ammo_fraction=state.ammo_fraction,
            threat=state.threat,
            distances=self.locator.distances(state.position),
        )
        breakdown = self.scorer.evaluate(state.goal, context)
        action = self.selector.select(breakdown.final)

        self.last_breakdown = breakdown
        self.last_decision_time = now
        state.decisions_made += 1

        if action is not state.action:
            logger.debug(
                f"Actor {self.actor_id}: {state.action.label} -> {action.label} "
                f"(goal={state.goal.name}, scores={breakdown.final})"
            )
            publish_event(
                ActionChangedEvent(
                    actor_id=self.actor_id,
                    previous=state.action,
                    current=action,
                    time=now,
                )
            )
        state.action = action
        self.executor.execute(action, state)

        # Re-arm from the scheduled time; after a stall, from now, so a long
        # pause does not trigger a burst of catch-up decisions.
        next_time = state.next_decision_time + self.config.decision_interval
        if next_time <= now:
            next_time = now + self.config.decision_interval
        state.next_decision_time = next_time
