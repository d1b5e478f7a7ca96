"""Turn a chosen action into movement orders and attack attempts."""

from __future__ import annotations

import logging

from strategist.constants import AIConstants as AI
from strategist.events import AttackEvent, publish_event
from strategist.game import ranges
from strategist.types import ActorId, Heading, SimTime, WorldPos

from .actions import ActionType
from .goals import Goal
from .interfaces import (
    AmmoResource,
    MovementController,
    OcclusionTest,
    RandomSource,
    TargetResolver,
)
from .locator import PointKind, ResourceLocator
from .perception import ThreatReference, is_occluded
from .state import AgentState
from .tuning import StrategistConfig

logger = logging.getLogger(__name__)


def standoff_point(
    threat_pos: WorldPos, self_pos: WorldPos, facing: Heading, distance: float
) -> WorldPos:
    """Point ``distance`` from the threat, on our side of it.

    When we stand exactly on the threat there is no "our side"; back off
    against our own facing instead (or along +x with no facing either).
    """
    point = ranges.offset_from(threat_pos, self_pos, distance)
    if point is not None:
        return point
    backward = ranges.normalize((-facing[0], -facing[1])) or (1.0, 0.0)
    return (
        threat_pos[0] + backward[0] * distance,
        threat_pos[1] + backward[1] * distance,
    )


class ActionExecutor:
    """Carries out actions for one agent.

    ``execute`` runs once per decision and only issues movement orders.
    ``try_attack`` runs every tick while Fight is active and is gated by its
    own cooldown, independent of the decision interval.
    """

    def __init__(
        self,
        actor_id: ActorId,
        config: StrategistConfig,
        mover: MovementController,
        locator: ResourceLocator,
        occlusion_test: OcclusionTest,
        rng: RandomSource,
        resolve_target: TargetResolver,
        ammo: AmmoResource | None = None,
    ) -> None:
        self.actor_id = actor_id
        self.config = config
        self.mover = mover
        self.locator = locator
        self.occlusion_test = occlusion_test
        self.ammo = ammo
        self._rng = rng
        self._resolve_target = resolve_target

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def execute(self, action: ActionType, state: AgentState) -> WorldPos | None:
        """Issue movement for ``action``. Returns the destination, if any."""
        match action:
            case ActionType.HEAL:
                return self._go_to_nearest(PointKind.HEAL, state)
            case ActionType.GET_AMMO:
                return self._go_to_nearest(PointKind.AMMO, state)
            case ActionType.HIDE:
                speed = (
                    self.config.panic_speed
                    if state.goal is Goal.SURVIVAL
                    else self.config.normal_speed
                )
                return self._move(speed, self.best_cover_point(state))
            case ActionType.FIGHT:
                destination = None
                if state.threat is not None:
                    destination = standoff_point(
                        state.threat.position,
                        state.position,
                        state.facing,
                        self.config.standoff_distance,
                    )
                return self._move(self.config.normal_speed, destination)
        return None

    def set_speed(self, speed: float) -> None:
        self._move(speed, None)

    def _go_to_nearest(self, kind: PointKind, state: AgentState) -> WorldPos | None:
        nearest = self.locator.nearest(kind, state.position)
        destination = nearest.position if nearest is not None else None
        return self._move(self.config.normal_speed, destination)

    def _move(self, speed: float, destination: WorldPos | None) -> WorldPos | None:
        """Send orders to the mover; a failing mover means no effect this tick."""
        try:
            self.mover.set_speed(speed)
            if destination is None:
                return None
            self.mover.set_destination(destination)
        except Exception:
            logger.warning(
                f"Actor {self.actor_id}: movement order to {destination} failed",
                exc_info=True,
            )
            return None
        return destination

    def best_cover_point(self, state: AgentState) -> WorldPos | None:
        """Rank cover points by proximity and concealment from the threat."""
        threat = state.threat
        jitter = self.config.cover_jitter
        best: WorldPos | None = None
        best_score = float("-inf")

        for point in self.locator.points(PointKind.COVER):
            if point is None:
                continue
            distance = ranges.calculate_distance(state.position, point)
            score = 1.0 / (1.0 + distance) + self._cover_score(threat, point)
            if jitter > 0.0:
                score += self._rng.uniform(-jitter, jitter)
            if score > best_score:
                best_score = score
                best = point

        return best

    def _cover_score(self, threat: ThreatReference | None, point: WorldPos) -> float:
        if threat is None:
            return AI.COVER_SCORE_UNKNOWN
        try:
            occluded = self.occlusion_test(threat.position, point)
        except Exception:
            logger.warning(
                f"Occlusion test failed for cover point {point}, scoring it exposed",
                exc_info=True,
            )
            return AI.COVER_SCORE_EXPOSED
        # Good cover: the threat's sight line to the point is blocked.
        return AI.COVER_SCORE_OCCLUDED if occluded else AI.COVER_SCORE_EXPOSED

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------

    def try_attack(self, state: AgentState, now: SimTime) -> bool:
        """Fire at the tracked threat if every gate passes.

        Gates, in order: a threat is tracked, the cooldown has elapsed, the
        target still exists, it is within attack range, the sight line is
        clear, and the ammo resource can pay the shot cost. A failed gate
        changes nothing.
        """
        threat = state.threat
        if threat is None:
            return False
        if now < state.next_attack_time:
            return False

        resolved = self._resolve_target(threat.actor_id)
        if resolved is None:
            return False
        target_pos, target_health = resolved

        distance = ranges.calculate_distance(state.position, target_pos)
        if distance > self.config.attack_range:
            return False
        if is_occluded(self.occlusion_test, state.position, target_pos):
            return False
        if self.ammo is None or not self.ammo.use(self.config.shot_cost):
            return False

        state.next_attack_time = now + self.config.attack_cooldown
        target_health.take_damage(self.config.attack_damage)
        logger.debug(
            f"Actor {self.actor_id} hit {threat.actor_id} "
            f"for {self.config.attack_damage:g}"
        )
        publish_event(
            AttackEvent(
                attacker_id=self.actor_id,
                target_id=threat.actor_id,
                damage=self.config.attack_damage,
                time=now,
            )
        )
        return True
