"""Utility scoring for strategist decision-making.

Each of the four actions gets an independent desirability score built from
need, distance and risk. The active Goal then reweights the scores, a small
random jitter breaks ties between otherwise identical situations, and the
results are clamped to be non-negative before they reach the selector.

Scoring pipeline per decision:
    raw scores -> goal reweighting -> jitter -> clamp to >= 0
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from strategist.constants import AIConstants as AI

from .actions import ActionType
from .goals import Goal
from .interfaces import RandomSource
from .locator import ResourceDistances
from .perception import ThreatReference


def _clamp(value: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    return max(min_value, min(max_value, value))


@dataclass(frozen=True, slots=True)
class UtilityScores:
    """One scalar per action. Higher is more desirable."""

    heal: float = 0.0
    ammo: float = 0.0
    hide: float = 0.0
    fight: float = 0.0

    def get(self, action: ActionType) -> float:
        match action:
            case ActionType.HEAL:
                return self.heal
            case ActionType.GET_AMMO:
                return self.ammo
            case ActionType.HIDE:
                return self.hide
            case ActionType.FIGHT:
                return self.fight
        raise KeyError(action)

    def items(self) -> Iterator[tuple[ActionType, float]]:
        """Yield (action, score) pairs in declaration order."""
        for action in ActionType:
            yield action, self.get(action)

    def clamped(self) -> UtilityScores:
        return UtilityScores(
            heal=max(0.0, self.heal),
            ammo=max(0.0, self.ammo),
            hide=max(0.0, self.hide),
            fight=max(0.0, self.fight),
        )


@dataclass(frozen=True, slots=True)
class UtilityContext:
    """Read-only inputs for one scoring pass.

    Attributes:
        health_fraction: Own health in [0, 1], or None without a health
            resource.
        ammo_fraction: Own ammunition in [0, 1], or None without an ammo
            resource.
        threat: The hostile tracked this tick, if any.
        distances: Distance to the nearest heal/ammo/cover point; None for
            an empty set.
    """

    health_fraction: float | None
    ammo_fraction: float | None
    threat: ThreatReference | None
    distances: ResourceDistances


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Debug snapshot of one scoring pass."""

    raw: UtilityScores
    weighted: UtilityScores
    final: UtilityScores


# ---------------------------------------------------------------------------
# Individual scores
# ---------------------------------------------------------------------------


def threat_closeness(threat: ThreatReference | None, view_radius: float) -> float:
    """1.0 for a threat on top of us, falling to 0.0 at the view radius."""
    if threat is None:
        return 0.0
    return _clamp(1.0 - threat.distance / view_radius)


def score_heal(context: UtilityContext) -> float:
    """Convex in missing health: urgency explodes as health nears zero."""
    if context.health_fraction is None or context.distances.heal is None:
        return 0.0
    need = 1.0 - context.health_fraction
    dist_factor = 1.0 / (1.0 + context.distances.heal)
    threat_factor = 1.0 if context.threat is None else AI.HEAL_THREAT_FACTOR
    return need * need * dist_factor * threat_factor


def score_ammo(context: UtilityContext) -> float:
    if context.ammo_fraction is None or context.distances.ammo is None:
        return 0.0
    need = 1.0 - context.ammo_fraction
    dist_factor = 1.0 / (1.0 + context.distances.ammo)
    threat_factor = 1.0 if context.threat is None else AI.AMMO_THREAT_FACTOR
    return need * dist_factor * threat_factor


def score_hide(context: UtilityContext, view_radius: float) -> float:
    if context.distances.cover is None:
        return AI.HIDE_BASELINE
    injury = 0.0 if context.health_fraction is None else 1.0 - context.health_fraction
    return (
        AI.HIDE_BASELINE
        + AI.HIDE_THREAT_WEIGHT * threat_closeness(context.threat, view_radius)
        + AI.HIDE_INJURY_WEIGHT * injury
    )


def score_fight(context: UtilityContext, view_radius: float) -> float:
    """Zero unless there is a threat, health to risk and ammunition to shoot."""
    threat = context.threat
    if threat is None or context.health_fraction is None:
        return 0.0
    if context.ammo_fraction is None or context.ammo_fraction <= 0.0:
        return 0.0
    confidence = (
        AI.FIGHT_HEALTH_WEIGHT * context.health_fraction
        + AI.FIGHT_AMMO_WEIGHT * context.ammo_fraction
    )
    distance_factor = threat_closeness(threat, view_radius)
    los_factor = 1.0 if threat.has_line_of_sight else AI.FIGHT_NO_LOS_FACTOR
    return confidence * distance_factor * los_factor


def apply_goal(scores: UtilityScores, goal: Goal) -> UtilityScores:
    """Reweight scores for the active goal. Normal leaves them untouched."""
    if goal is not Goal.SURVIVAL:
        return scores
    return UtilityScores(
        heal=scores.heal * AI.SURVIVAL_HEAL_MULTIPLIER,
        ammo=scores.ammo,
        hide=scores.hide * AI.SURVIVAL_HIDE_MULTIPLIER,
        fight=scores.fight * AI.SURVIVAL_FIGHT_MULTIPLIER,
    )


class UtilityScorer:
    """Compute the four action scores for a strategist agent.

    Attributes:
        view_radius: Normalizes threat distance into closeness.
        jitter: Half width of the uniform perturbation added to each score.
            Zero disables jitter and consumes no random draws.
    """

    def __init__(
        self,
        view_radius: float,
        rng: RandomSource,
        jitter: float = AI.SCORE_JITTER,
    ) -> None:
        self.view_radius = view_radius
        self.jitter = jitter
        self._rng = rng

    def raw_scores(self, context: UtilityContext) -> UtilityScores:
        return UtilityScores(
            heal=score_heal(context),
            ammo=score_ammo(context),
            hide=score_hide(context, self.view_radius),
            fight=score_fight(context, self.view_radius),
        )

    def _jittered(self, scores: UtilityScores) -> UtilityScores:
        if self.jitter <= 0.0:
            return scores
        j = self.jitter
        return UtilityScores(
            heal=scores.heal + self._rng.uniform(-j, j),
            ammo=scores.ammo + self._rng.uniform(-j, j),
            hide=scores.hide + self._rng.uniform(-j, j),
            fight=scores.fight + self._rng.uniform(-j, j),
        )

    def evaluate(self, goal: Goal, context: UtilityContext) -> ScoreBreakdown:
        raw = self.raw_scores(context)
        weighted = apply_goal(raw, goal)
        final = self._jittered(weighted).clamped()
        return ScoreBreakdown(raw=raw, weighted=weighted, final=final)

    def score(self, goal: Goal, context: UtilityContext) -> UtilityScores:
        """Final, non-negative scores ready for the selector."""
        return self.evaluate(goal, context).final
