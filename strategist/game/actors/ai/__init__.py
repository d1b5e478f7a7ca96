"""
Strategist AI: utility-based tactical decisions for autonomous agents.

The system scores four competing actions (heal, resupply, hide, fight) at a
fixed decision interval, reweights them by a Normal/Survival goal, and picks
one by weighted random draw among the best-ranked candidates.

Package structure:
    interfaces  - Protocols for injected collaborators (clock, rng, mover...).
    perception  - Field-of-view + occlusion threat detection, ThreatReference.
    locator     - Nearest-of-set queries over heal/ammo/cover points.
    goals       - Goal enum and the survival override rule.
    actions     - ActionType enum.
    utility     - Per-action scoring, goal reweighting, jitter.
    selection   - Top-K weighted random ActionSelector.
    executor    - Movement orders and the per-tick attack attempt.
    state       - AgentState owned by each decision loop.
    tuning      - StrategistConfig, validated designer settings.
    component   - StrategistAI, the per-tick decision loop.
"""

from .actions import ActionType
from .component import StrategistAI
from .executor import ActionExecutor, standoff_point
from .goals import Goal, evaluate_goal
from .locator import NearestPoint, PointKind, ResourceDistances, ResourceLocator
from .perception import (
    PerceptionComponent,
    ThreatReference,
    find_nearest_visible_threat,
)
from .selection import FALLBACK_ACTION, ActionSelector
from .state import AgentState
from .tuning import StrategistConfig
from .utility import ScoreBreakdown, UtilityContext, UtilityScorer, UtilityScores

__all__ = [
    "FALLBACK_ACTION",
    "ActionExecutor",
    "ActionSelector",
    "ActionType",
    "AgentState",
    "Goal",
    "NearestPoint",
    "PerceptionComponent",
    "PointKind",
    "ResourceDistances",
    "ResourceLocator",
    "ScoreBreakdown",
    "StrategistAI",
    "StrategistConfig",
    "ThreatReference",
    "UtilityContext",
    "UtilityScorer",
    "UtilityScores",
    "evaluate_goal",
    "find_nearest_visible_threat",
    "standoff_point",
]
