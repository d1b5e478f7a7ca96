"""Planar distance and angle helpers shared by perception and combat."""

from __future__ import annotations

import math

from strategist.types import Heading, WorldPos


def calculate_distance(a: WorldPos, b: WorldPos) -> float:
    """Euclidean distance between two world positions."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def normalize(vec: Heading) -> Heading | None:
    """Return ``vec`` scaled to unit length, or None for a zero vector."""
    length = math.hypot(vec[0], vec[1])
    if length == 0.0:
        return None
    return (vec[0] / length, vec[1] / length)


def angle_between(forward: Heading, direction: Heading) -> float:
    """Unsigned angle in degrees between two vectors.

    A zero-length ``direction`` (target on top of the observer) is treated
    as dead ahead. A zero-length ``forward`` has no cone, so everything is
    considered straight ahead as well.
    """
    f = normalize(forward)
    d = normalize(direction)
    if f is None or d is None:
        return 0.0
    dot = max(-1.0, min(1.0, f[0] * d[0] + f[1] * d[1]))
    return math.degrees(math.acos(dot))


def is_within_cone(
    origin: WorldPos, facing: Heading, target: WorldPos, half_angle_degrees: float
) -> bool:
    """True if ``target`` lies inside the view cone (boundary inclusive)."""
    direction = (target[0] - origin[0], target[1] - origin[1])
    return angle_between(facing, direction) <= half_angle_degrees


def offset_from(anchor: WorldPos, toward: WorldPos, distance: float) -> WorldPos | None:
    """Point ``distance`` away from ``anchor`` in the direction of ``toward``.

    Returns None when the two points coincide and no direction exists.
    """
    direction = normalize((toward[0] - anchor[0], toward[1] - anchor[1]))
    if direction is None:
        return None
    return (anchor[0] + direction[0] * distance, anchor[1] + direction[1] * distance)
