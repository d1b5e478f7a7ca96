"""
Resource components for actors.

Actors are composed of small components rather than one large class. The
decision core only sees these through the HealthResource and AmmoResource
protocols, so any object with the same methods can stand in for them.

Components:
    HealthComponent: Hit points, damage, healing, death.
    AmmoComponent: Ammunition pool with all-or-nothing spending.
"""

from strategist.constants import CombatConstants as Combat


class HealthComponent:
    """Handles physical integrity - HP, damage from any source, healing."""

    def __init__(
        self, max_hp: float = Combat.DEFAULT_MAX_HP, hp: float | None = None
    ) -> None:
        if max_hp <= 0:
            raise ValueError(f"max_hp must be positive, got {max_hp}")
        self.max_hp = max_hp
        self.hp = max_hp if hp is None else max(0.0, min(max_hp, hp))

    def percent(self) -> float:
        """Fraction of max HP remaining, clamped to [0, 1]."""
        return max(0.0, min(1.0, self.hp / self.max_hp))

    def take_damage(self, amount: float) -> None:
        """Reduce HP by ``amount``, never below zero."""
        self.hp = max(0.0, self.hp - amount)

    def heal(self, amount: float) -> None:
        """Restore HP by ``amount``, never above max_hp."""
        self.hp = min(self.max_hp, self.hp + amount)

    def is_dead(self) -> bool:
        return self.hp <= 0

    def is_alive(self) -> bool:
        """Return True if the actor is alive (HP > 0)."""
        return self.hp > 0


class AmmoComponent:
    """Ammunition carried by an actor."""

    def __init__(
        self,
        max_ammo: int = Combat.DEFAULT_MAX_AMMO,
        current: int = Combat.DEFAULT_STARTING_AMMO,
    ) -> None:
        self.max_ammo = max_ammo
        self.current = max(0, min(max_ammo, current)) if max_ammo > 0 else 0

    def percent(self) -> float:
        if self.max_ammo <= 0:
            return 0.0
        return max(0.0, min(1.0, self.current / self.max_ammo))

    def use(self, amount: int) -> bool:
        """Spend ``amount`` rounds. Spends nothing and returns False if short."""
        if self.current < amount:
            return False
        self.current -= amount
        return True

    def add(self, amount: int) -> None:
        self.current = min(self.max_ammo, self.current + amount)
