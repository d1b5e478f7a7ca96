"""The four competing behaviors a strategist agent can commit to."""

from __future__ import annotations

from enum import Enum


class ActionType(Enum):
    """Candidate behaviors, in the order they are scored and reported."""

    HEAL = "heal"
    GET_AMMO = "get_ammo"
    HIDE = "hide"
    FIGHT = "fight"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()
