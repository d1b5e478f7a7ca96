"""Straight-line movement controller.

DirectMover accepts speed and destination orders and walks the actor
straight toward the destination. It has no path-finding: if the next step
would enter a movement-blocking cell, the actor simply waits that tick.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from strategist.constants import MovementConstants as Movement
from strategist.game import ranges
from strategist.types import WorldPos

if TYPE_CHECKING:
    from strategist.environment.obstacles import ObstacleMap

    from .core import Actor


class DirectMover:
    """MovementController that steps an actor toward its destination.

    Attributes:
        speed: World units per second.
        destination: Current target point, or None when idle.
        blocked_ticks: Consecutive ticks the last step was refused.
    """

    def __init__(self, speed: float = Movement.NORMAL_SPEED) -> None:
        self.speed = speed
        self.destination: WorldPos | None = None
        self.blocked_ticks = 0

    def set_speed(self, speed: float) -> None:
        self.speed = max(0.0, speed)

    def set_destination(self, destination: WorldPos) -> None:
        self.destination = destination

    def stop(self) -> None:
        self.destination = None

    def step(self, actor: Actor, dt: float, obstacles: ObstacleMap | None) -> None:
        """Advance ``actor`` toward the destination for ``dt`` seconds."""
        if self.destination is None or self.speed <= 0.0 or dt <= 0.0:
            return

        position = actor.position
        remaining = ranges.calculate_distance(position, self.destination)
        if remaining <= Movement.ARRIVAL_TOLERANCE:
            self.destination = None
            return

        travel = min(self.speed * dt, remaining)
        next_pos = ranges.offset_from(position, self.destination, travel)
        if next_pos is None:
            self.destination = None
            return

        actor.facing = (
            self.destination[0] - position[0],
            self.destination[1] - position[1],
        )
        if obstacles is not None and not obstacles.is_walkable(next_pos):
            self.blocked_ticks += 1
            return

        self.blocked_ticks = 0
        actor.position = next_pos
        if travel >= remaining:
            self.destination = None
