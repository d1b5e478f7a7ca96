"""Headless strategist simulation.

Spawns two opposing strategist agents in the reference arena and runs the
fixed-step loop until one of them dies or the time limit is reached.

Usage:
    python -m strategist.main
    python -m strategist.main --seed 7 --duration 120 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from collections.abc import Sequence

from strategist import config
from strategist.environment.arena import build_arena
from strategist.events import (
    ActionChangedEvent,
    AttackEvent,
    PickupCollectedEvent,
    subscribe_to_event,
    unsubscribe_from_event,
)
from strategist.game.actors.ai import StrategistConfig
from strategist.game.game_world import GameWorld
from strategist.util import rng
from strategist.util.clock import SimulationClock

logger = logging.getLogger("strategist.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strategist-sim",
        description="Run a headless duel between two strategist agents.",
    )
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        help="Master random seed (default: %(default)s)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=config.DEFAULT_SIMULATION_SECONDS,
        help="Simulated seconds before the run is stopped (default: %(default)s)",
    )
    parser.add_argument(
        "--timestep",
        type=float,
        default=config.FIXED_TIMESTEP,
        help="Fixed simulation step in seconds (default: %(default).4f)",
    )
    parser.add_argument(
        "--log-level",
        default=config.DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: %(default)s)",
    )
    return parser


def build_duel(timestep: float = config.FIXED_TIMESTEP) -> GameWorld:
    """Reference arena with a red and a blue strategist facing each other."""
    arena = build_arena()
    world = GameWorld(
        arena.obstacles,
        arena.heal_points,
        arena.ammo_points,
        arena.cover_points,
        clock=SimulationClock(timestep=timestep),
    )
    red = world.spawn_actor("Red", "red", arena.spawn_points["red"], (1.0, 0.0))
    blue = world.spawn_actor("Blue", "blue", arena.spawn_points["blue"], (-1.0, 0.0))
    ai_config = StrategistConfig(require_cover_points=True)
    world.attach_ai(red, ai_config)
    world.attach_ai(blue, ai_config)
    return world


def run(world: GameWorld, duration: float) -> dict[str, object]:
    """Step ``world`` until one side is left standing or time runs out."""
    action_counts: Counter[str] = Counter()
    shots: Counter[int] = Counter()
    pickups: Counter[str] = Counter()

    handlers = [
        (ActionChangedEvent, lambda e: action_counts.update([e.current.label])),
        (AttackEvent, lambda e: shots.update([e.attacker_id])),
        (PickupCollectedEvent, lambda e: pickups.update([e.kind])),
    ]
    for event_type, handler in handlers:
        subscribe_to_event(event_type, handler)

    try:
        while world.clock.now() < duration:
            world.update()
            if len(world.living_actors()) <= 1:
                break
    finally:
        for event_type, handler in handlers:
            unsubscribe_from_event(event_type, handler)

    survivors = [a.name for a in world.living_actors()]
    return {
        "time": world.clock.now(),
        "survivors": survivors,
        "action_switches": dict(action_counts),
        "shots": {world.actors[k].name: v for k, v in shots.items()},
        "pickups": dict(pickups),
    }


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    rng.init(args.seed)
    world = build_duel(args.timestep)
    logger.info(f"Starting duel (seed={args.seed!r}, duration={args.duration}s)")

    summary = run(world, args.duration)
    for actor in world.actors.values():
        hp = actor.health.hp
        ammo = actor.ammo.current if actor.ammo is not None else 0
        logger.info(f"{actor.name}: hp={hp:.0f} ammo={ammo}")
    logger.info(
        f"Finished at t={summary['time']:.2f}s; survivors={summary['survivors']}; "
        f"shots={summary['shots']}; pickups={summary['pickups']}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
