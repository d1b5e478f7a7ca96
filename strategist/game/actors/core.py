"""Actor: a body in the world composed of resource and movement components."""

from __future__ import annotations

from typing import TYPE_CHECKING

from strategist.types import ActorId, FactionId, Heading, WorldPos

from .components import AmmoComponent, HealthComponent
from .movement import DirectMover

if TYPE_CHECKING:
    from strategist.game.actors.ai import StrategistAI


class Actor:
    """A participant in the simulation.

    The actor owns its components; its AI (if any) is attached afterwards by
    the world, which knows how to wire the collaborators the AI needs.
    """

    def __init__(
        self,
        actor_id: ActorId,
        name: str,
        faction: FactionId,
        position: WorldPos,
        facing: Heading = (1.0, 0.0),
        health: HealthComponent | None = None,
        ammo: AmmoComponent | None = None,
        mover: DirectMover | None = None,
    ) -> None:
        self.actor_id = actor_id
        self.name = name
        self.faction = faction
        self.position = position
        self.facing = facing
        self.health = health if health is not None else HealthComponent()
        self.ammo = ammo
        self.mover = mover if mover is not None else DirectMover()
        self.ai: StrategistAI | None = None

    def is_alive(self) -> bool:
        return self.health.is_alive()

    def __repr__(self) -> str:
        x, y = self.position
        return (
            f"Actor({self.actor_id}, {self.name!r}, {self.faction}, "
            f"({x:.1f}, {y:.1f}))"
        )
