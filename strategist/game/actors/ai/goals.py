"""
Goal hierarchy for strategist agents.

A Goal is the agent's behavioral posture. It does not pick actions by
itself; it reshapes the utility scores (see utility.py) so that survival
behaviors dominate when the agent is in danger.

The goal is recomputed from scratch every tick. There is no hysteresis: the
same health and threat distance always produce the same goal, and Survival
can only be entered through the two conditions in ``evaluate_goal``.
"""

from __future__ import annotations

import math
from enum import Enum, auto


class Goal(Enum):
    """High-level posture that reweights utility scoring."""

    NORMAL = auto()
    SURVIVAL = auto()


def evaluate_goal(
    health_fraction: float,
    threat_distance: float,
    critical_health_threshold: float,
    critical_threat_distance: float,
    threatened_health_threshold: float,
) -> Goal:
    """Map health and threat proximity to a Goal.

    Rules, first match wins:
        1. health <= critical threshold -> SURVIVAL
        2. a threat within the critical distance and health <= the threatened
           threshold -> SURVIVAL
        3. otherwise -> NORMAL

    Args:
        health_fraction: Current health in [0, 1].
        threat_distance: Distance to the tracked threat, or ``math.inf``
            when no threat is visible.
        critical_health_threshold: Unconditional survival threshold.
        critical_threat_distance: Proximity that counts as "threat close".
        threatened_health_threshold: Health ceiling for the proximity rule.
    """
    if health_fraction <= critical_health_threshold:
        return Goal.SURVIVAL
    threat_close = math.isfinite(threat_distance) and (
        threat_distance <= critical_threat_distance
    )
    if threat_close and health_fraction <= threatened_health_threshold:
        return Goal.SURVIVAL
    return Goal.NORMAL
