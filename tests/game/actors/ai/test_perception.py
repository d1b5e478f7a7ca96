"""Tests for field-of-view threat perception."""

from __future__ import annotations

import logging

import pytest

from strategist.game.actors.ai import (
    PerceptionComponent,
    ThreatReference,
    find_nearest_visible_threat,
)
from strategist.types import ActorId, WorldPos
from tests.helpers import Hostile, always_blocked, open_sky

ORIGIN = (0.0, 0.0)
EAST = (1.0, 0.0)


def _hostile(actor_id: int, position: WorldPos) -> Hostile:
    return Hostile(ActorId(actor_id), position)


def _find(candidates, occlusion_test=open_sky, half_angle=60.0, radius=14.0):
    return find_nearest_visible_threat(
        ORIGIN, EAST, radius, half_angle, candidates, occlusion_test
    )


def test_no_candidates_means_no_threat() -> None:
    assert _find([]) is None


def test_nearest_visible_candidate_wins() -> None:
    far = _hostile(1, (9.0, 0.0))
    near = _hostile(2, (5.0, 1.0))
    threat = _find([far, near])
    assert threat is not None
    assert threat.actor_id == near.actor_id
    assert threat.position == near.position
    assert threat.distance == pytest.approx(26.0**0.5)


def test_candidates_beyond_radius_are_ignored() -> None:
    assert _find([_hostile(1, (14.5, 0.0))]) is None


def test_radius_boundary_is_inclusive() -> None:
    threat = _find([_hostile(1, (14.0, 0.0))])
    assert threat is not None
    assert threat.distance == 14.0


def test_candidates_outside_the_cone_are_ignored() -> None:
    behind = _hostile(1, (-3.0, 0.0))
    beside = _hostile(2, (0.0, 5.0))
    assert _find([behind, beside]) is None


def test_cone_boundary_is_inclusive() -> None:
    """A target exactly at the half angle counts as inside the cone."""
    beside = _hostile(1, (0.0, 5.0))
    threat = _find([beside], half_angle=90.0)
    assert threat is not None
    assert threat.actor_id == beside.actor_id


def test_occluded_candidate_yields_to_next_nearest() -> None:
    hidden = _hostile(1, (2.0, 0.0))
    exposed = _hostile(2, (6.0, 0.0))

    def walls_near(from_pos: WorldPos, to_pos: WorldPos) -> bool:
        return to_pos == hidden.position

    threat = _find([hidden, exposed], occlusion_test=walls_near)
    assert threat is not None
    assert threat.actor_id == exposed.actor_id


def test_everything_occluded_means_no_threat() -> None:
    assert _find([_hostile(1, (3.0, 0.0))], occlusion_test=always_blocked) is None


def test_equal_distances_resolve_to_first_candidate() -> None:
    first = _hostile(7, (3.0, 4.0))
    second = _hostile(3, (3.0, -4.0))
    threat = _find([first, second])
    assert threat is not None
    assert threat.actor_id == first.actor_id


def test_candidate_on_top_of_observer_is_seen() -> None:
    threat = _find([_hostile(1, ORIGIN)])
    assert threat is not None
    assert threat.distance == 0.0


def test_failing_occlusion_test_counts_as_blocked(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """An exception from the occlusion test hides the candidate and is logged."""

    def broken(from_pos: WorldPos, to_pos: WorldPos) -> bool:
        raise RuntimeError("physics offline")

    with caplog.at_level(logging.WARNING):
        assert _find([_hostile(1, (3.0, 0.0))], occlusion_test=broken) is None
    assert "treating as blocked" in caplog.text


# ---------------------------------------------------------------------------
# PerceptionComponent
# ---------------------------------------------------------------------------


def test_sticky_perception_keeps_visible_tracked_threat() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True)
    tracked = _hostile(1, (8.0, 0.0))
    slightly_closer = _hostile(2, (7.8, 0.0))
    previous = ThreatReference(tracked.actor_id, (9.0, 0.0), 9.0)

    threat = perception.find_threat(
        ORIGIN, EAST, [slightly_closer, tracked], open_sky, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == tracked.actor_id
    # Position and distance are refreshed, not copied from last tick.
    assert threat.position == tracked.position
    assert threat.distance == 8.0


def test_sticky_perception_switches_to_much_nearer_hostile() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True, switch_tolerance=0.5)
    tracked = _hostile(1, (10.0, 0.0))
    closer = _hostile(2, (2.0, 0.0))
    previous = ThreatReference(tracked.actor_id, tracked.position, 10.0)

    threat = perception.find_threat(
        ORIGIN, EAST, [tracked, closer], open_sky, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == closer.actor_id
    assert threat.distance == 2.0


def test_zero_switch_tolerance_only_keeps_tracked_on_ties() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True, switch_tolerance=0.0)
    first = _hostile(1, (0.0, 5.0))
    tracked = _hostile(2, (5.0, 0.0))
    previous = ThreatReference(tracked.actor_id, tracked.position, 5.0)

    threat = perception.find_threat(
        ORIGIN, (1.0, 1.0), [first, tracked], open_sky, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == tracked.actor_id


def test_sticky_perception_drops_occluded_tracked_threat() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True)
    tracked = _hostile(1, (8.0, 0.0))
    other = _hostile(2, (7.9, 1.0))
    previous = ThreatReference(tracked.actor_id, tracked.position, 8.0)

    def blocks_tracked(a: WorldPos, b: WorldPos) -> bool:
        return b == tracked.position

    threat = perception.find_threat(
        ORIGIN, EAST, [tracked, other], blocks_tracked, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == other.actor_id


def test_sticky_perception_drops_threat_that_left_view() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True)
    gone = _hostile(1, (-8.0, 0.0))
    other = _hostile(2, (6.0, 0.0))
    previous = ThreatReference(gone.actor_id, (8.0, 0.0), 8.0)

    threat = perception.find_threat(
        ORIGIN, EAST, [gone, other], open_sky, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == other.actor_id


def test_sticky_perception_forgets_removed_threat() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=True)
    previous = ThreatReference(ActorId(99), (5.0, 0.0), 5.0)
    assert perception.find_threat(ORIGIN, EAST, [], open_sky, previous) is None


def test_non_sticky_perception_always_picks_nearest() -> None:
    perception = PerceptionComponent(14.0, 60.0, sticky=False)
    tracked = _hostile(1, (8.0, 0.0))
    closer = _hostile(2, (4.0, 0.0))
    previous = ThreatReference(tracked.actor_id, tracked.position, 8.0)

    threat = perception.find_threat(
        ORIGIN, EAST, [tracked, closer], open_sky, tracked=previous
    )

    assert threat is not None
    assert threat.actor_id == closer.actor_id


def test_can_see_applies_all_three_checks() -> None:
    perception = PerceptionComponent(10.0, 45.0)
    assert perception.can_see(ORIGIN, EAST, (5.0, 1.0), open_sky)
    assert not perception.can_see(ORIGIN, EAST, (11.0, 0.0), open_sky)
    assert not perception.can_see(ORIGIN, EAST, (1.0, 5.0), open_sky)
    assert not perception.can_see(ORIGIN, EAST, (5.0, 0.0), always_blocked)
