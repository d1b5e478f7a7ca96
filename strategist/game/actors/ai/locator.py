"""Nearest-of-set queries over designer-placed points of interest."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from strategist.types import WorldPos


class PointKind(Enum):
    HEAL = "heal"
    AMMO = "ammo"
    COVER = "cover"


@dataclass(frozen=True, slots=True)
class NearestPoint:
    """Result of a nearest-point query.

    Attributes:
        index: Position of the winner in the original point sequence.
        position: The winning point.
        distance: Euclidean distance from the query origin.
    """

    index: int
    position: WorldPos
    distance: float


@dataclass(frozen=True, slots=True)
class ResourceDistances:
    """Distance from the agent to the nearest point of each kind.

    ``None`` means the set has no usable points at all.
    """

    heal: float | None = None
    ammo: float | None = None
    cover: float | None = None


def _as_array(points: Sequence[WorldPos | None]) -> tuple[np.ndarray, np.ndarray]:
    """Return (indices, coords) for entries that are present and finite."""
    indices = [i for i, p in enumerate(points) if p is not None]
    if not indices:
        return np.empty(0, dtype=np.intp), np.empty((0, 2), dtype=np.float64)
    coords = np.asarray([points[i] for i in indices], dtype=np.float64).reshape(-1, 2)
    finite = np.isfinite(coords).all(axis=1)
    return np.asarray(indices, dtype=np.intp)[finite], coords[finite]


def nearest_point(
    origin: WorldPos, points: Sequence[WorldPos | None]
) -> NearestPoint | None:
    """Return the point closest to ``origin``, skipping missing entries.

    Missing (``None``) or non-finite entries stand for points that are
    currently unreachable. Equal distances resolve to the earliest entry.
    """
    indices, coords = _as_array(points)
    if len(indices) == 0:
        return None
    distances = np.hypot(coords[:, 0] - origin[0], coords[:, 1] - origin[1])
    best = int(np.argmin(distances))  # argmin returns the first minimum
    return NearestPoint(
        index=int(indices[best]),
        position=(float(coords[best, 0]), float(coords[best, 1])),
        distance=float(distances[best]),
    )


class ResourceLocator:
    """Read-only view over the heal, ammo and cover point sets.

    The sets are copied into tuples at construction; the locator never
    mutates them and may share them between agents.
    """

    def __init__(
        self,
        heal_points: Sequence[WorldPos | None] = (),
        ammo_points: Sequence[WorldPos | None] = (),
        cover_points: Sequence[WorldPos | None] = (),
    ) -> None:
        self._points: dict[PointKind, tuple[WorldPos | None, ...]] = {
            PointKind.HEAL: tuple(heal_points),
            PointKind.AMMO: tuple(ammo_points),
            PointKind.COVER: tuple(cover_points),
        }

    def points(self, kind: PointKind) -> tuple[WorldPos | None, ...]:
        return self._points[kind]

    def has_points(self, kind: PointKind) -> bool:
        return any(p is not None for p in self._points[kind])

    def nearest(self, kind: PointKind, origin: WorldPos) -> NearestPoint | None:
        return nearest_point(origin, self._points[kind])

    def distances(self, origin: WorldPos) -> ResourceDistances:
        """Distances to the nearest heal, ammo and cover point."""

        def _distance(kind: PointKind) -> float | None:
            hit = self.nearest(kind, origin)
            return hit.distance if hit is not None else None

        return ResourceDistances(
            heal=_distance(PointKind.HEAL),
            ammo=_distance(PointKind.AMMO),
            cover=_distance(PointKind.COVER),
        )
