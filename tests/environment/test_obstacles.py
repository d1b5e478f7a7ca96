"""Tests for the obstacle grid and its line-of-sight queries."""

from __future__ import annotations

import pytest

from strategist.environment.obstacles import (
    MOVEMENT_BLOCKING,
    SIGHT_BLOCKING,
    ObstacleLayer,
    ObstacleMap,
)


def _map_with_column(layer: ObstacleLayer, x: int = 5) -> ObstacleMap:
    obstacles = ObstacleMap(10, 10)
    obstacles.add_box(x, 0, x, 9, layer)
    return obstacles


def test_invalid_dimensions_are_rejected() -> None:
    with pytest.raises(ValueError):
        ObstacleMap(0, 5)
    with pytest.raises(ValueError):
        ObstacleMap(5, 5, cell_size=0.0)


def test_cell_conversion_respects_cell_size() -> None:
    obstacles = ObstacleMap(8, 8, cell_size=2.0)
    assert obstacles.to_cell((3.9, 4.1)) == (1, 2)
    assert obstacles.to_cell((-0.1, 0.0)) == (-1, 0)
    assert obstacles.cell_center((1, 2)) == (3.0, 5.0)
    assert obstacles.world_size == (16.0, 16.0)


def test_add_box_is_inclusive_and_clipped() -> None:
    obstacles = ObstacleMap(6, 6)
    obstacles.add_box(-5, -5, 2, 2, ObstacleLayer.LOW_WALL)
    assert int(obstacles.layers[0, 0]) == ObstacleLayer.LOW_WALL
    assert int(obstacles.layers[2, 2]) == ObstacleLayer.LOW_WALL
    assert int(obstacles.layers[3, 3]) == ObstacleLayer.NONE


def test_layers_combine_as_bit_flags() -> None:
    obstacles = ObstacleMap(4, 4)
    obstacles.add_box(1, 1, 1, 1, ObstacleLayer.FOLIAGE)
    obstacles.add_box(1, 1, 1, 1, ObstacleLayer.LOW_WALL)
    assert int(obstacles.layers[1, 1]) == ObstacleLayer.FOLIAGE | ObstacleLayer.LOW_WALL


def test_wall_blocks_sight_line() -> None:
    obstacles = _map_with_column(ObstacleLayer.WALL)
    assert obstacles.blocked((1.5, 5.5), (8.5, 5.5))
    assert obstacles.blocked((8.5, 2.5), (1.5, 7.5))


def test_clear_sight_line_is_not_blocked() -> None:
    obstacles = _map_with_column(ObstacleLayer.WALL)
    assert not obstacles.blocked((1.5, 1.5), (3.5, 8.5))


def test_endpoint_cells_are_not_tested() -> None:
    """Standing inside an obstacle cell does not block your own view."""
    obstacles = _map_with_column(ObstacleLayer.WALL)
    assert not obstacles.blocked((5.5, 5.5), (8.5, 5.5))
    assert not obstacles.blocked((4.5, 5.5), (5.5, 5.5))
    assert not obstacles.blocked((2.5, 2.5), (2.5, 2.5))


def test_foliage_blocks_sight_but_not_movement() -> None:
    obstacles = _map_with_column(ObstacleLayer.FOLIAGE)
    assert obstacles.blocked((1.5, 5.5), (8.5, 5.5), SIGHT_BLOCKING)
    assert not obstacles.blocked((1.5, 5.5), (8.5, 5.5), MOVEMENT_BLOCKING)
    assert obstacles.is_walkable((5.5, 5.5))


def test_low_wall_blocks_movement_but_not_sight() -> None:
    obstacles = _map_with_column(ObstacleLayer.LOW_WALL)
    assert not obstacles.blocked((1.5, 5.5), (8.5, 5.5))
    assert not obstacles.is_walkable((5.5, 5.5))


def test_out_of_bounds_counts_as_blocked() -> None:
    obstacles = ObstacleMap(10, 10)
    assert obstacles.blocked((-1.0, 0.5), (3.5, 3.5))
    assert obstacles.blocked((3.5, 3.5), (3.5, 12.0))
    assert not obstacles.is_walkable((10.5, 1.0))


def test_occlusion_test_is_bound_to_its_mask() -> None:
    obstacles = _map_with_column(ObstacleLayer.FOLIAGE)
    sight = obstacles.occlusion_test()
    walls_only = obstacles.occlusion_test(ObstacleLayer.WALL)
    assert sight((1.5, 5.5), (8.5, 5.5))
    assert not walls_only((1.5, 5.5), (8.5, 5.5))


def test_border_surrounds_the_grid() -> None:
    obstacles = ObstacleMap(5, 4)
    obstacles.add_border()
    assert not obstacles.is_walkable((0.5, 2.5))
    assert not obstacles.is_walkable((4.5, 2.5))
    assert not obstacles.is_walkable((2.5, 0.5))
    assert not obstacles.is_walkable((2.5, 3.5))
    assert obstacles.is_walkable((2.5, 2.5))
