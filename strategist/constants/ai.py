"""Constants for strategist decision-making and utility scoring."""


class AIConstants:
    """Constants for strategist decision-making and utility scoring."""

    # --- Decision timing (seconds) ---
    DECISION_INTERVAL = 0.7
    # Delay before the very first decision after an agent is created.
    FIRST_DECISION_DELAY = 0.2

    # --- Survival override ---
    CRITICAL_HEALTH_THRESHOLD = 0.30  # health <= this -> Survival
    CRITICAL_THREAT_DISTANCE = 4.0  # threat this close ...
    THREATENED_HEALTH_THRESHOLD = 0.55  # ... and health <= this -> Survival

    # --- Vision ---
    VIEW_RADIUS = 14.0
    VIEW_ANGLE_DEGREES = 120.0  # Full cone; half angle is used for the test.
    # A tracked threat is kept over a nearer one only within this margin.
    THREAT_SWITCH_TOLERANCE = 0.5

    # --- Utility scoring ---
    # Threat dampening on resource runs while a hostile is visible.
    HEAL_THREAT_FACTOR = 0.75
    AMMO_THREAT_FACTOR = 0.9
    # Hide is always mildly attractive, more so when hurt or threatened.
    HIDE_BASELINE = 0.2
    HIDE_THREAT_WEIGHT = 0.5
    HIDE_INJURY_WEIGHT = 0.7
    # Fight confidence blend.
    FIGHT_HEALTH_WEIGHT = 0.7
    FIGHT_AMMO_WEIGHT = 0.6
    FIGHT_NO_LOS_FACTOR = 0.2

    # --- Survival goal reweighting ---
    SURVIVAL_FIGHT_MULTIPLIER = 0.15
    SURVIVAL_HEAL_MULTIPLIER = 1.35
    SURVIVAL_HIDE_MULTIPLIER = 1.25

    # --- Stochastic selection ---
    SCORE_JITTER = 0.05
    COVER_JITTER = 0.03
    TOP_K = 3
    SELECTION_EPSILON = 0.001

    # --- Cover point ranking ---
    COVER_SCORE_OCCLUDED = 1.2  # threat cannot see the cover point
    COVER_SCORE_EXPOSED = 0.2  # threat can see the cover point
    COVER_SCORE_UNKNOWN = 0.5  # no threat tracked
