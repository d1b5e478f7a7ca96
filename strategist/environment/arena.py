"""Reference arena used by the headless simulation and integration tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from strategist.types import WorldPos

from .obstacles import ObstacleLayer, ObstacleMap


@dataclass(slots=True)
class Arena:
    """Obstacle geometry plus the designer-placed points of interest."""

    obstacles: ObstacleMap
    heal_points: tuple[WorldPos, ...] = ()
    ammo_points: tuple[WorldPos, ...] = ()
    cover_points: tuple[WorldPos, ...] = ()
    spawn_points: dict[str, WorldPos] = field(default_factory=dict)


def build_arena(width: int = 40, height: int = 30) -> Arena:
    """Build a walled arena with four pillars, a hedge and resource points.

    Layout (not to scale)::

        +--------------------------------------+
        | A   H             C            H   B |
        |        [##]    ~~~~~~    [##]        |
        |      C                        C      |
        |        [##]              [##]        |
        | A                                  B |
        +--------------------------------------+

    ``[##]`` are wall pillars, ``~~`` a sight-blocking hedge, ``H`` heal
    points, ``A``/``B`` ammo points and spawns, ``C`` cover points tucked
    behind pillars.
    """
    if width < 20 or height < 16:
        raise ValueError(f"Arena too small for the reference layout: {width}x{height}")

    obstacles = ObstacleMap(width, height)
    obstacles.add_border()

    cx, cy = width // 2, height // 2
    left, right = width // 4, (3 * width) // 4
    top, bottom = height // 3, (2 * height) // 3

    for px, py in ((left, top), (right, top), (left, bottom), (right, bottom)):
        obstacles.add_box(px - 1, py - 1, px + 1, py + 1, ObstacleLayer.WALL)
    obstacles.add_box(cx - 3, cy, cx + 3, cy, ObstacleLayer.FOLIAGE)

    heal_points = ((4.5, height - 3.5), (width - 4.5, height - 3.5))
    ammo_points = ((3.5, 3.5), (width - 3.5, 3.5))
    cover_points = (
        (left + 0.5, top - 2.5),
        (right + 0.5, top - 2.5),
        (left + 0.5, bottom + 3.5),
        (right + 0.5, bottom + 3.5),
        (cx + 0.5, cy + 2.5),
    )
    spawn_points = {
        "red": (3.5, cy + 0.5),
        "blue": (width - 3.5, cy + 0.5),
    }
    return Arena(
        obstacles=obstacles,
        heal_points=heal_points,
        ammo_points=ammo_points,
        cover_points=cover_points,
        spawn_points=spawn_points,
    )
