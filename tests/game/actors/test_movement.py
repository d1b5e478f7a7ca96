"""Tests for the straight-line DirectMover."""

from __future__ import annotations

import pytest

from strategist.environment.obstacles import ObstacleLayer, ObstacleMap
from strategist.game.actors import Actor, DirectMover
from strategist.game.actors.ai.interfaces import MovementController
from strategist.types import ActorId


def _actor(position=(0.0, 0.0), speed: float = 2.0) -> Actor:
    return Actor(ActorId(1), "Mover", "red", position, mover=DirectMover(speed))


def test_mover_is_a_movement_controller() -> None:
    assert isinstance(DirectMover(), MovementController)


def test_step_moves_toward_destination_and_turns() -> None:
    actor = _actor()
    actor.mover.set_destination((0.0, 5.0))

    actor.mover.step(actor, 0.5, None)

    assert actor.position == pytest.approx((0.0, 1.0))
    assert actor.facing == pytest.approx((0.0, 5.0))
    assert actor.mover.destination == (0.0, 5.0)


def test_step_does_not_overshoot_and_clears_destination() -> None:
    actor = _actor(speed=10.0)
    actor.mover.set_destination((0.5, 0.0))

    actor.mover.step(actor, 1.0, None)

    assert actor.position == pytest.approx((0.5, 0.0))
    assert actor.mover.destination is None


def test_step_is_refused_by_blocking_cell() -> None:
    obstacles = ObstacleMap(10, 10)
    obstacles.add_box(3, 0, 3, 9, ObstacleLayer.WALL)
    actor = _actor(position=(2.5, 5.5), speed=1.0)
    actor.mover.set_destination((8.5, 5.5))

    actor.mover.step(actor, 0.6, obstacles)

    assert actor.position == (2.5, 5.5)
    assert actor.mover.blocked_ticks == 1


def test_idle_or_stopped_mover_does_nothing() -> None:
    actor = _actor()
    actor.mover.step(actor, 1.0, None)
    assert actor.position == (0.0, 0.0)

    actor.mover.set_destination((3.0, 0.0))
    actor.mover.set_speed(-4.0)
    assert actor.mover.speed == 0.0
    actor.mover.step(actor, 1.0, None)
    assert actor.position == (0.0, 0.0)

    actor.mover.stop()
    assert actor.mover.destination is None
