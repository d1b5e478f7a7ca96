"""Perception system for strategist awareness.

Answers one question per tick: "which hostile should I be worried about?"
A candidate is perceived when it is

1. within ``view_radius`` (Euclidean, inclusive),
2. inside the view cone: the angle between the facing direction and the
   direction to the candidate is at most ``half_angle_degrees`` (inclusive),
3. not occluded: the occlusion test reports no obstacle on the segment.

Among the perceived candidates the nearest wins; equal distances resolve to
the earliest candidate in input order.

The result is a ThreatReference: identity plus a cached position. It never
owns the hostile and is rebuilt every tick, so a dead or removed hostile
simply stops being referenced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from strategist.constants import AIConstants as AI
from strategist.game import ranges
from strategist.types import ActorId, Heading, WorldPos

from .interfaces import OcclusionTest, PerceptionCandidate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ThreatReference:
    """Non-owning handle to the hostile currently being tracked.

    Attributes:
        actor_id: Registry identity of the hostile.
        position: Hostile position when it was last perceived.
        distance: Distance from the perceiver at that moment.
        has_line_of_sight: Whether the sight line was clear at that moment.
    """

    actor_id: ActorId
    position: WorldPos
    distance: float
    has_line_of_sight: bool = True


def is_occluded(
    occlusion_test: OcclusionTest, from_pos: WorldPos, to_pos: WorldPos
) -> bool:
    """Run ``occlusion_test``; a failing test counts as blocked for this tick."""
    try:
        return bool(occlusion_test(from_pos, to_pos))
    except Exception:
        logger.warning(
            f"Occlusion test failed for {from_pos} -> {to_pos}; treating as blocked",
            exc_info=True,
        )
        return True


def find_nearest_visible_threat(
    origin: WorldPos,
    facing: Heading,
    radius: float,
    half_angle_degrees: float,
    candidates: Iterable[PerceptionCandidate],
    occlusion_test: OcclusionTest,
) -> ThreatReference | None:
    """Return the nearest candidate inside range, cone and clear sight.

    Args:
        origin: Perceiver position.
        facing: Perceiver forward vector.
        radius: Maximum perception distance (inclusive).
        half_angle_degrees: Half width of the view cone (inclusive).
        candidates: Potential hostiles, in priority order for ties.
        occlusion_test: Returns True when the segment is blocked.

    Returns:
        A ThreatReference for the winner, or None when nothing is visible.
    """
    best: ThreatReference | None = None

    for candidate in candidates:
        position = candidate.position
        distance = ranges.calculate_distance(origin, position)
        if distance > radius:
            continue
        if not ranges.is_within_cone(origin, facing, position, half_angle_degrees):
            continue
        # Cheapest filters first; the occlusion query is the expensive one.
        if best is not None and distance >= best.distance:
            continue
        if is_occluded(occlusion_test, origin, position):
            continue
        best = ThreatReference(
            actor_id=candidate.actor_id, position=position, distance=distance
        )

    return best


class PerceptionComponent:
    """Field-of-view perception with optional threat persistence.

    With ``sticky`` enabled, a previously tracked hostile that is still
    visible is kept as long as no other visible hostile is nearer by more
    than ``switch_tolerance``. This stops the agent flicking its attention
    between two similarly close threats from one tick to the next, while a
    clearly nearer hostile still takes over at once.

    Attributes:
        view_radius: Maximum perception distance.
        half_angle_degrees: Half width of the view cone.
    """

    def __init__(
        self,
        view_radius: float,
        half_angle_degrees: float,
        *,
        sticky: bool = True,
        switch_tolerance: float = AI.THREAT_SWITCH_TOLERANCE,
    ) -> None:
        self.view_radius = view_radius
        self.half_angle_degrees = half_angle_degrees
        self.sticky = sticky
        self.switch_tolerance = switch_tolerance

    def can_see(
        self,
        origin: WorldPos,
        facing: Heading,
        position: WorldPos,
        occlusion_test: OcclusionTest,
    ) -> bool:
        """Apply range, cone and occlusion checks to a single position."""
        if ranges.calculate_distance(origin, position) > self.view_radius:
            return False
        if not ranges.is_within_cone(origin, facing, position, self.half_angle_degrees):
            return False
        return not is_occluded(occlusion_test, origin, position)

    def find_threat(
        self,
        origin: WorldPos,
        facing: Heading,
        candidates: list[PerceptionCandidate],
        occlusion_test: OcclusionTest,
        tracked: ThreatReference | None = None,
    ) -> ThreatReference | None:
        """Refresh the tracked threat for this tick."""
        nearest = find_nearest_visible_threat(
            origin,
            facing,
            self.view_radius,
            self.half_angle_degrees,
            candidates,
            occlusion_test,
        )
        if not self.sticky or tracked is None or nearest is None:
            return nearest
        if nearest.actor_id == tracked.actor_id:
            return nearest

        for candidate in candidates:
            if candidate.actor_id != tracked.actor_id:
                continue
            position = candidate.position
            distance = ranges.calculate_distance(origin, position)
            if distance > nearest.distance + self.switch_tolerance:
                break
            if self.can_see(origin, facing, position, occlusion_test):
                return ThreatReference(
                    actor_id=candidate.actor_id, position=position, distance=distance
                )
            break

        return nearest
