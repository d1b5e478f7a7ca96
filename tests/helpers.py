"""Scripted collaborators and builders shared by the strategist tests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from strategist.game.actors.ai import (
    ResourceLocator,
    StrategistAI,
    StrategistConfig,
)
from strategist.game.actors.ai.interfaces import HealthResource, OcclusionTest
from strategist.game.actors.components import AmmoComponent, HealthComponent
from strategist.types import ActorId, Heading, WorldPos


class ScriptedRandom:
    """RandomSource returning scripted positions inside each requested range.

    Each queued value is a fraction in [0, 1]: 0.0 maps to ``a``, 1.0 to
    ``b``. Once the queue is empty ``default`` is used. Every call is logged.
    """

    def __init__(self, fractions: Iterable[float] = (), default: float = 0.5) -> None:
        self._queue = deque(fractions)
        self.default = default
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        fraction = self._queue.popleft() if self._queue else self.default
        return a + (b - a) * fraction


class ManualClock:
    def __init__(self, now: float = 0.0) -> None:
        self.time = now

    def now(self) -> float:
        return self.time


class RecordingMover:
    """MovementController that only records the orders it receives."""

    def __init__(self, *, fail: bool = False) -> None:
        self.speeds: list[float] = []
        self.destinations: list[WorldPos] = []
        self.fail = fail

    def set_speed(self, speed: float) -> None:
        if self.fail:
            raise RuntimeError("navigation unavailable")
        self.speeds.append(speed)

    def set_destination(self, destination: WorldPos) -> None:
        if self.fail:
            raise RuntimeError("navigation unavailable")
        self.destinations.append(destination)

    @property
    def speed(self) -> float | None:
        return self.speeds[-1] if self.speeds else None

    @property
    def destination(self) -> WorldPos | None:
        return self.destinations[-1] if self.destinations else None


@dataclass
class Body:
    position: WorldPos = (0.0, 0.0)
    facing: Heading = (1.0, 0.0)


@dataclass
class Hostile:
    """Perception candidate with its own health, resolvable by id."""

    actor_id: ActorId
    position: WorldPos
    health: HealthComponent = field(default_factory=HealthComponent)


def open_sky(from_pos: WorldPos, to_pos: WorldPos) -> bool:
    """Occlusion test for a world without obstacles."""
    return False


def always_blocked(from_pos: WorldPos, to_pos: WorldPos) -> bool:
    return True


def resolver_for(hostiles: Sequence[Hostile]):
    """TargetResolver over a fixed list of hostiles; dead ones are gone."""

    def _resolve(actor_id: ActorId) -> tuple[WorldPos, HealthResource] | None:
        for hostile in hostiles:
            if hostile.actor_id == actor_id and hostile.health.is_alive():
                return hostile.position, hostile.health
        return None

    return _resolve


@dataclass
class AIHarness:
    """A StrategistAI together with every scripted collaborator it uses."""

    ai: StrategistAI
    body: Body
    clock: ManualClock
    rng: ScriptedRandom
    mover: RecordingMover
    health: HealthComponent
    ammo: AmmoComponent
    hostiles: list[Hostile]

    def tick(self, now: float) -> None:
        self.clock.time = now
        self.ai.update()


def make_ai(
    *,
    position: WorldPos = (0.0, 0.0),
    facing: Heading = (1.0, 0.0),
    health: float = 100.0,
    ammo: int = 15,
    hostiles: Sequence[Hostile] = (),
    heal_points: Sequence[WorldPos] = ((10.0, 0.0),),
    ammo_points: Sequence[WorldPos] = ((0.0, 10.0),),
    cover_points: Sequence[WorldPos] = ((-5.0, 0.0),),
    occlusion_test: OcclusionTest = open_sky,
    rng: ScriptedRandom | None = None,
    config: StrategistConfig | None = None,
    now: float = 0.0,
) -> AIHarness:
    """Build a StrategistAI with jitter disabled unless a config says otherwise."""
    body = Body(position, facing)
    clock = ManualClock(now)
    rng = rng if rng is not None else ScriptedRandom()
    mover = RecordingMover()
    health_component = HealthComponent(max_hp=100.0, hp=health)
    ammo_component = AmmoComponent(max_ammo=30, current=ammo)
    hostile_list = list(hostiles)
    config = config or StrategistConfig(score_jitter=0.0, cover_jitter=0.0)

    ai = StrategistAI(
        ActorId(1),
        body=body,
        clock=clock,
        rng=rng,
        occlusion_test=occlusion_test,
        mover=mover,
        locator=ResourceLocator(heal_points, ammo_points, cover_points),
        hostiles=lambda: hostile_list,
        resolve_target=resolver_for(hostile_list),
        health=health_component,
        ammo=ammo_component,
        config=config,
    )
    return AIHarness(
        ai=ai,
        body=body,
        clock=clock,
        rng=rng,
        mover=mover,
        health=health_component,
        ammo=ammo_component,
        hostiles=hostile_list,
    )
