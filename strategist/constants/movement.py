"""Constants for movement and pickups."""


class MovementConstants:
    """Constants for movement and pickups."""

    NORMAL_SPEED = 3.5
    PANIC_SPEED = 5.5

    # Distance at which a mover considers its destination reached.
    ARRIVAL_TOLERANCE = 0.05

    # --- Pickups ---
    PICKUP_RADIUS = 0.75
    PICKUP_RESPAWN_TIME = 8.0
    HEALTH_PICKUP_AMOUNT = 40.0
    AMMO_PICKUP_AMOUNT = 12
