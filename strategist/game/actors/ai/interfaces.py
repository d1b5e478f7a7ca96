"""Collaborator contracts consumed by the strategist decision core.

The core never looks collaborators up at runtime. Each agent is constructed
with concrete objects satisfying these protocols; the game world supplies
the real ones, tests supply scripted doubles.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, TypeAlias, runtime_checkable

from strategist.types import ActorId, Heading, SimTime, WorldPos

# Returns True when obstacle geometry intersects the segment from -> to.
OcclusionTest: TypeAlias = Callable[[WorldPos, WorldPos], bool]


@runtime_checkable
class Clock(Protocol):
    """Monotonically non-decreasing simulation time."""

    def now(self) -> SimTime: ...


@runtime_checkable
class RandomSource(Protocol):
    """Source of uniform draws for jitter and weighted selection."""

    def uniform(self, a: float, b: float) -> float: ...


@runtime_checkable
class MovementController(Protocol):
    """Fire-and-forget movement. Path following happens elsewhere."""

    def set_speed(self, speed: float) -> None: ...

    def set_destination(self, destination: WorldPos) -> None: ...


@runtime_checkable
class HealthResource(Protocol):
    def percent(self) -> float: ...

    def is_dead(self) -> bool: ...

    def take_damage(self, amount: float) -> None: ...

    def heal(self, amount: float) -> None: ...


@runtime_checkable
class AmmoResource(Protocol):
    def percent(self) -> float: ...

    def use(self, amount: int) -> bool: ...

    def add(self, amount: int) -> None: ...


class Body(Protocol):
    """Where the agent itself is and which way it faces."""

    @property
    def position(self) -> WorldPos: ...

    @property
    def facing(self) -> Heading: ...


class PerceptionCandidate(Protocol):
    """Anything perception can consider as a potential hostile."""

    @property
    def actor_id(self) -> ActorId: ...

    @property
    def position(self) -> WorldPos: ...


class TargetResolver(Protocol):
    """Maps a remembered ActorId back to a live target, if it still exists.

    Returns the target's current position and health resource, or None when
    the actor is gone or dead.
    """

    def __call__(
        self, actor_id: ActorId
    ) -> tuple[WorldPos, HealthResource] | None: ...
