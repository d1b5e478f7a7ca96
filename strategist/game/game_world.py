"""
GameWorld: the registry of actors and the sequential tick driver.

The world owns every actor, the obstacle grid, the points of interest and
the pickups. It is also the only place that knows how to resolve an
``ActorId`` back to a living actor, which is what keeps threat references
non-owning: agents remember ids, and the world answers "is that one still
around, and where?".

Agents are advanced one at a time in ascending id order, so damage applied
by one agent is fully visible to the next and no update is ever lost.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from strategist.events import ActorDeathEvent, publish_event
from strategist.game.actors import Actor, AmmoComponent, HealthComponent
from strategist.game.actors.ai import ResourceLocator, StrategistAI, StrategistConfig
from strategist.game.actors.ai.interfaces import HealthResource, RandomSource
from strategist.types import ActorId, DeltaTime, FactionId, Heading, WorldPos
from strategist.util import rng as rng_module
from strategist.util.clock import SimulationClock

from .pickups import AmmoPickup, HealthPickup, Pickup

if TYPE_CHECKING:
    from strategist.environment.obstacles import ObstacleMap

logger = logging.getLogger(__name__)


class GameWorld:
    """Container and tick driver for a strategist simulation."""

    def __init__(
        self,
        obstacles: ObstacleMap,
        heal_points: Sequence[WorldPos] = (),
        ammo_points: Sequence[WorldPos] = (),
        cover_points: Sequence[WorldPos] = (),
        *,
        clock: SimulationClock | None = None,
        spawn_pickups: bool = True,
    ) -> None:
        self.obstacles = obstacles
        self.clock = clock if clock is not None else SimulationClock()
        self.locator = ResourceLocator(heal_points, ammo_points, cover_points)
        self.actors: dict[ActorId, Actor] = {}
        self.pickups: list[Pickup] = []
        if spawn_pickups:
            self.pickups.extend(HealthPickup(p) for p in heal_points)
            self.pickups.extend(AmmoPickup(p) for p in ammo_points)
        self._next_actor_id = 1
        self._announced_dead: set[ActorId] = set()

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def spawn_actor(
        self,
        name: str,
        faction: FactionId,
        position: WorldPos,
        facing: Heading = (1.0, 0.0),
        *,
        health: HealthComponent | None = None,
        ammo: AmmoComponent | None = None,
    ) -> Actor:
        """Create an actor with the next free id and register it."""
        actor_id = ActorId(self._next_actor_id)
        self._next_actor_id += 1
        actor = Actor(
            actor_id,
            name,
            faction,
            position,
            facing,
            health=health,
            ammo=ammo if ammo is not None else AmmoComponent(),
        )
        self.actors[actor_id] = actor
        return actor

    def remove_actor(self, actor_id: ActorId) -> None:
        self.actors.pop(actor_id, None)

    def attach_ai(
        self,
        actor: Actor,
        config: StrategistConfig | None = None,
        rng: RandomSource | None = None,
    ) -> StrategistAI:
        """Wire a StrategistAI to ``actor`` using this world's collaborators."""
        config = config or StrategistConfig()
        hostile_factions = config.hostile_factions
        if rng is None:
            rng = rng_module.get(f"ai.strategist.{actor.actor_id}")
        actor.ai = StrategistAI(
            actor.actor_id,
            body=actor,
            clock=self.clock,
            rng=rng,
            occlusion_test=self.obstacles.occlusion_test(config.obstacle_mask),
            mover=actor.mover,
            locator=self.locator,
            hostiles=lambda: self.hostile_candidates(actor, hostile_factions),
            resolve_target=self.resolve_target,
            health=actor.health,
            ammo=actor.ammo,
            config=config,
        )
        return actor.ai

    def get_actor(self, actor_id: ActorId) -> Actor | None:
        """Return the actor if it is registered and alive."""
        actor = self.actors.get(actor_id)
        if actor is None or not actor.is_alive():
            return None
        return actor

    def resolve_target(
        self, actor_id: ActorId
    ) -> tuple[WorldPos, HealthResource] | None:
        actor = self.get_actor(actor_id)
        if actor is None:
            return None
        return actor.position, actor.health

    def living_actors(self) -> list[Actor]:
        return [a for _, a in sorted(self.actors.items()) if a.is_alive()]

    def hostile_candidates(
        self, actor: Actor, factions: frozenset[FactionId] = frozenset()
    ) -> list[Actor]:
        """Living actors ``actor`` should treat as hostile.

        With an explicit faction set, only those factions count; otherwise
        every faction other than the actor's own does.
        """
        candidates = []
        for other in self.living_actors():
            if other is actor:
                continue
            if factions:
                if other.faction not in factions:
                    continue
            elif other.faction == actor.faction:
                continue
            candidates.append(other)
        return candidates

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, dt: float | None = None) -> DeltaTime:
        """Advance the world by one step (the clock's fixed step by default)."""
        if dt is None:
            step = self.clock.tick()
        else:
            self.clock.advance(dt)
            step = DeltaTime(dt)
        now = self.clock.now()

        for pickup in self.pickups:
            pickup.update(now)

        for actor_id in sorted(self.actors):
            actor = self.actors.get(actor_id)
            if actor is None or not actor.is_alive():
                continue
            if actor.ai is not None:
                actor.ai.update(now)
            actor.mover.step(actor, step, self.obstacles)
            for pickup in self.pickups:
                pickup.try_collect(actor, now)

        self._announce_deaths(now)
        return step

    def _announce_deaths(self, now: float) -> None:
        for actor_id, actor in sorted(self.actors.items()):
            if actor.is_alive() or actor_id in self._announced_dead:
                continue
            self._announced_dead.add(actor_id)
            actor.mover.stop()
            logger.info(f"{actor.name} (#{actor_id}) died at t={now:.2f}s")
            publish_event(ActorDeathEvent(actor_id=actor_id, time=now))
