"""Obstacle grid backing movement and line-of-sight queries.

The world is continuous, but obstacles are stored on a uniform grid of
``cell_size`` world units. Each cell holds a bitmask of ``ObstacleLayer``
flags so that different queries can care about different geometry: walls
block both sight and movement, foliage blocks sight only, low walls block
movement only.

Sight lines are rasterized with tcod's Bresenham implementation and tested
against the cells strictly between the two endpoints, so an actor standing
next to a wall can still see past its own cell.
"""

from __future__ import annotations

import math
from enum import IntFlag
from typing import TYPE_CHECKING

import numpy as np
import tcod.los

from strategist.types import GridCell, LayerMask, WorldPos

if TYPE_CHECKING:
    from strategist.game.actors.ai.interfaces import OcclusionTest


class ObstacleLayer(IntFlag):
    """Bit flags describing what an obstacle cell interferes with."""

    NONE = 0
    WALL = 1  # Blocks sight and movement
    FOLIAGE = 2  # Blocks sight only
    LOW_WALL = 4  # Blocks movement only


# Layers that block a line of sight unless a caller asks otherwise.
SIGHT_BLOCKING: LayerMask = ObstacleLayer.WALL | ObstacleLayer.FOLIAGE

# Layers an actor cannot walk through.
MOVEMENT_BLOCKING: LayerMask = ObstacleLayer.WALL | ObstacleLayer.LOW_WALL


class ObstacleMap:
    """A ``width`` x ``height`` grid of obstacle layer bits.

    Attributes:
        layers: uint8 array indexed ``[x, y]`` holding ObstacleLayer bits.
        cell_size: World units covered by one cell along each axis.
    """

    def __init__(self, width: int, height: int, cell_size: float = 1.0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be non-empty, got {width}x{height}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.layers = np.zeros((width, height), dtype=np.uint8, order="F")

    @property
    def world_size(self) -> tuple[float, float]:
        return (self.width * self.cell_size, self.height * self.cell_size)

    def to_cell(self, pos: WorldPos) -> GridCell:
        """Return the grid cell containing a world position."""
        return (
            math.floor(pos[0] / self.cell_size),
            math.floor(pos[1] / self.cell_size),
        )

    def cell_center(self, cell: GridCell) -> WorldPos:
        return ((cell[0] + 0.5) * self.cell_size, (cell[1] + 0.5) * self.cell_size)

    def in_bounds(self, cell: GridCell) -> bool:
        return 0 <= cell[0] < self.width and 0 <= cell[1] < self.height

    def add_box(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        layer: ObstacleLayer = ObstacleLayer.WALL,
    ) -> None:
        """Mark the inclusive cell rectangle (x1, y1)-(x2, y2) with ``layer``."""
        x_lo, x_hi = sorted((max(0, x1), min(self.width - 1, x2)))
        y_lo, y_hi = sorted((max(0, y1), min(self.height - 1, y2)))
        self.layers[x_lo : x_hi + 1, y_lo : y_hi + 1] |= np.uint8(layer)

    def add_border(self, layer: ObstacleLayer = ObstacleLayer.WALL) -> None:
        """Surround the grid with a one-cell ring of ``layer``."""
        self.add_box(0, 0, self.width - 1, 0, layer)
        self.add_box(0, self.height - 1, self.width - 1, self.height - 1, layer)
        self.add_box(0, 0, 0, self.height - 1, layer)
        self.add_box(self.width - 1, 0, self.width - 1, self.height - 1, layer)

    def is_walkable(self, pos: WorldPos) -> bool:
        cell = self.to_cell(pos)
        if not self.in_bounds(cell):
            return False
        return not self.layers[cell] & MOVEMENT_BLOCKING

    def blocked(
        self, from_pos: WorldPos, to_pos: WorldPos, mask: LayerMask = SIGHT_BLOCKING
    ) -> bool:
        """Return True if any cell between the endpoints carries ``mask`` bits.

        Endpoints outside the grid are treated as blocked.
        """
        start = self.to_cell(from_pos)
        end = self.to_cell(to_pos)
        if not (self.in_bounds(start) and self.in_bounds(end)):
            return True
        line = tcod.los.bresenham(start, end)
        interior = line[1:-1]
        if len(interior) == 0:
            return False
        hits = self.layers[interior[:, 0], interior[:, 1]] & np.uint8(mask)
        return bool(hits.any())

    def occlusion_test(self, mask: LayerMask = SIGHT_BLOCKING) -> OcclusionTest:
        """Return a two-argument occlusion predicate bound to ``mask``."""

        def _blocked(from_pos: WorldPos, to_pos: WorldPos) -> bool:
            return self.blocked(from_pos, to_pos, mask)

        return _blocked
