"""Top-K weighted random selection over utility scores.

Always taking the best score makes agents predictable and prone to loops
between two near-equal options. Picking proportionally over *every* option
lets hopeless actions win too often. The compromise: rank, keep the K best,
then pick among those proportionally to their score.
"""

from __future__ import annotations

import logging

from strategist.constants import AIConstants as AI

from .actions import ActionType
from .interfaces import RandomSource
from .utility import UtilityScores

logger = logging.getLogger(__name__)

# Chosen when every drive is exhausted so the agent never idles.
FALLBACK_ACTION = ActionType.HIDE


class ActionSelector:
    """Pick an action from clamped utility scores.

    Attributes:
        top_k: How many of the best-ranked actions stay in the draw.
        epsilon: Retained totals below this select FALLBACK_ACTION.
    """

    def __init__(
        self,
        rng: RandomSource,
        top_k: int = AI.TOP_K,
        epsilon: float = AI.SELECTION_EPSILON,
    ) -> None:
        self.top_k = top_k
        self.epsilon = epsilon
        self._rng = rng

    def ranked(self, scores: UtilityScores) -> list[tuple[ActionType, float]]:
        """The retained (action, score) pairs, best first.

        ``sorted`` is stable, so equal scores keep declaration order.
        """
        ordered = sorted(scores.items(), key=lambda pair: pair[1], reverse=True)
        return ordered[: self.top_k]

    def select(self, scores: UtilityScores) -> ActionType:
        retained = self.ranked(scores)
        total = sum(score for _, score in retained)
        if total < self.epsilon:
            logger.debug(f"All drives exhausted (total={total:.4f}); falling back")
            return FALLBACK_ACTION

        draw = self._rng.uniform(0.0, total)
        cumulative = 0.0
        for action, score in retained:
            cumulative += score
            if cumulative >= draw:
                return action

        # Float rounding can leave the running sum a hair under the draw.
        return retained[0][0]
