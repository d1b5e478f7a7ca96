"""Observation events published by agents and the world.

Agents publish goal and action transitions, shots, deaths and pickups to a
process-wide bus so overlays, recorders and tests can watch a simulation
without being wired into it. Dispatch is synchronous and fire-and-forget:
nothing published here feeds back into a decision.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from strategist.types import ActorId, SimTime, WorldPos

logger = logging.getLogger(__name__)


@dataclass
class GameEvent:
    """Base class for all game events."""

    pass


@dataclass
class GoalChangedEvent(GameEvent):
    """An agent's goal switched between Normal and Survival."""

    actor_id: ActorId
    previous: Any  # Goal; avoid importing the AI package here
    current: Any
    time: SimTime


@dataclass
class ActionChangedEvent(GameEvent):
    """A decision picked a different action than the one already active."""

    actor_id: ActorId
    previous: Any  # ActionType
    current: Any
    time: SimTime


@dataclass
class AttackEvent(GameEvent):
    """An agent fired at its tracked threat and applied damage."""

    attacker_id: ActorId
    target_id: ActorId
    damage: float
    time: SimTime


@dataclass
class ActorDeathEvent(GameEvent):
    """An actor's health reached zero."""

    actor_id: ActorId
    time: SimTime


@dataclass
class PickupCollectedEvent(GameEvent):
    """A pickup applied its effect to an actor and started respawning."""

    actor_id: ActorId
    kind: str  # "health" or "ammo"
    position: WorldPos
    time: SimTime


EventHandler: TypeAlias = Callable[[Any], None]


class EventBus:
    """Synchronous publish/subscribe keyed on the exact event class."""

    def __init__(self) -> None:
        self._handlers: defaultdict[type[GameEvent], list[EventHandler]] = (
            defaultdict(list)
        )

    def subscribe(self, event_type: type[GameEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[GameEvent], handler: EventHandler) -> None:
        """Remove ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event: GameEvent) -> None:
        """Deliver ``event`` to a snapshot of its subscribers.

        A failing handler is logged and the remaining handlers still run.
        """
        event_type = type(event)
        for handler in tuple(self._handlers.get(event_type, ())):
            try:
                handler(event)
            except Exception:
                logger.exception(f"Error handling event {event_type.__name__}")

    def clear(self) -> None:
        self._handlers.clear()


_bus = EventBus()


def subscribe_to_event(event_type: type[GameEvent], handler: EventHandler) -> None:
    _bus.subscribe(event_type, handler)


def unsubscribe_from_event(
    event_type: type[GameEvent], handler: EventHandler
) -> None:
    _bus.unsubscribe(event_type, handler)


def publish_event(event: GameEvent) -> None:
    _bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Drop every subscription on the process-wide bus."""
    _bus.clear()
