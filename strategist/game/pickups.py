"""Respawning pickups placed at heal and ammo points.

A pickup is either available or waiting to respawn. Availability is a plain
flag plus a respawn timestamp, checked once per tick by ``update()``; there
is no scheduler involved.
"""

from __future__ import annotations

import abc
import logging
from typing import TYPE_CHECKING, ClassVar

from strategist.constants import MovementConstants as Movement
from strategist.events import PickupCollectedEvent, publish_event
from strategist.game import ranges
from strategist.types import SimTime, WorldPos

if TYPE_CHECKING:
    from strategist.game.actors import Actor

logger = logging.getLogger(__name__)


class Pickup(abc.ABC):
    """Base class for collectable, respawning pickups.

    Attributes:
        position: Where the pickup sits.
        radius: How close an actor must be to collect it.
        respawn_time: Seconds between collection and availability.
        available: Whether the pickup can currently be collected.
        respawn_at: When an unavailable pickup comes back, else None.
    """

    kind: ClassVar[str]

    def __init__(
        self,
        position: WorldPos,
        *,
        radius: float = Movement.PICKUP_RADIUS,
        respawn_time: float = Movement.PICKUP_RESPAWN_TIME,
    ) -> None:
        self.position = position
        self.radius = radius
        self.respawn_time = respawn_time
        self.available = True
        self.respawn_at: SimTime | None = None

    def update(self, now: SimTime) -> None:
        """Restore availability once the respawn timer has run out."""
        if self.available or self.respawn_at is None:
            return
        if now >= self.respawn_at:
            self.available = True
            self.respawn_at = None

    def try_collect(self, actor: Actor, now: SimTime) -> bool:
        """Apply the pickup to ``actor`` if it is available and in reach."""
        if not self.available:
            return False
        if ranges.calculate_distance(actor.position, self.position) > self.radius:
            return False
        if not self._apply(actor):
            return False

        self.available = False
        self.respawn_at = now + self.respawn_time
        logger.debug(f"{actor.name} collected {self.kind} pickup at {self.position}")
        publish_event(
            PickupCollectedEvent(
                actor_id=actor.actor_id,
                kind=self.kind,
                position=self.position,
                time=now,
            )
        )
        return True

    @abc.abstractmethod
    def _apply(self, actor: Actor) -> bool:
        """Give the pickup's effect to ``actor``. False if it cannot benefit."""
        ...


class HealthPickup(Pickup):
    kind = "health"

    def __init__(
        self,
        position: WorldPos,
        amount: float = Movement.HEALTH_PICKUP_AMOUNT,
        **kwargs,
    ) -> None:
        super().__init__(position, **kwargs)
        self.amount = amount

    def _apply(self, actor: Actor) -> bool:
        actor.health.heal(self.amount)
        return True


class AmmoPickup(Pickup):
    kind = "ammo"

    def __init__(
        self,
        position: WorldPos,
        amount: int = Movement.AMMO_PICKUP_AMOUNT,
        **kwargs,
    ) -> None:
        super().__init__(position, **kwargs)
        self.amount = amount

    def _apply(self, actor: Actor) -> bool:
        if actor.ammo is None:
            return False
        actor.ammo.add(self.amount)
        return True
