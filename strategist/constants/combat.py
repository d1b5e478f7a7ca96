"""Constants for combat mechanics."""


class CombatConstants:
    """Constants for combat mechanics."""

    ATTACK_RANGE = 10.0
    ATTACK_COOLDOWN = 0.5  # Seconds between shots
    ATTACK_DAMAGE = 10.0
    SHOT_COST = 1  # Ammunition consumed per shot

    # Distance kept from the target while fighting so the agent never
    # walks onto the target's position.
    STANDOFF_DISTANCE = 3.0

    # --- Resource pools ---
    DEFAULT_MAX_HP = 100.0
    DEFAULT_MAX_AMMO = 30
    DEFAULT_STARTING_AMMO = 15
