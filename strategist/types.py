from __future__ import annotations

from typing import NewType, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

# Continuous world coordinates. The simulation is planar; there is no
# vertical axis and no eye-height offset for sight lines.
WorldCoord: TypeAlias = float
WorldPos: TypeAlias = tuple[WorldCoord, WorldCoord]  # Example: (4.5, 12.0)

# Facing / travel direction. Need not be normalized.
Heading: TypeAlias = tuple[float, float]  # Example: (0.0, 1.0) = facing +y

# Integer cell on the obstacle grid.
GridCell: TypeAlias = tuple[int, int]

# =============================================================================
# TIME-RELATED TYPES
# =============================================================================

# Simulation seconds elapsed between two ticks of the fixed-step loop.
DeltaTime = NewType("DeltaTime", float)

# Absolute simulation time in seconds, read from a monotonic clock.
SimTime: TypeAlias = float

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# Unique identifier for an Actor in the game world. Assigned sequentially
# and used as the key of the world registry and of threat references.
ActorId = NewType("ActorId", int)

# Faction name used to decide who counts as a hostile (e.g. "red", "blue").
FactionId: TypeAlias = str

# Random seed for deterministic simulation runs.
# Can be an int for numeric seeds or a descriptive string like "arena1".
RandomSeed: TypeAlias = int | str | None

# Bitmask selecting obstacle layers (see environment.obstacles).
LayerMask: TypeAlias = int
