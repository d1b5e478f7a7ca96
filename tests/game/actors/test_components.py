"""Tests for the health and ammunition components."""

from __future__ import annotations

import pytest

from strategist.game.actors import AmmoComponent, HealthComponent
from strategist.game.actors.ai.interfaces import AmmoResource, HealthResource


def test_health_defaults_to_full() -> None:
    health = HealthComponent(max_hp=80.0)
    assert health.hp == 80.0
    assert health.percent() == 1.0
    assert health.is_alive()


def test_health_damage_floors_at_zero() -> None:
    health = HealthComponent(max_hp=100.0, hp=15.0)
    health.take_damage(40.0)
    assert health.hp == 0.0
    assert health.is_dead()
    assert not health.is_alive()


def test_health_heal_caps_at_max() -> None:
    health = HealthComponent(max_hp=100.0, hp=90.0)
    health.heal(40.0)
    assert health.hp == 100.0


def test_health_initial_value_is_clamped() -> None:
    assert HealthComponent(max_hp=50.0, hp=70.0).hp == 50.0
    assert HealthComponent(max_hp=50.0, hp=-5.0).hp == 0.0


def test_health_requires_positive_max() -> None:
    with pytest.raises(ValueError):
        HealthComponent(max_hp=0.0)


def test_ammo_use_is_all_or_nothing() -> None:
    ammo = AmmoComponent(max_ammo=30, current=2)
    assert ammo.use(2)
    assert ammo.current == 0
    assert not ammo.use(1)
    assert ammo.current == 0


def test_ammo_add_caps_at_max() -> None:
    ammo = AmmoComponent(max_ammo=30, current=25)
    ammo.add(12)
    assert ammo.current == 30
    assert ammo.percent() == 1.0


def test_ammo_without_capacity_reports_empty() -> None:
    ammo = AmmoComponent(max_ammo=0, current=10)
    assert ammo.current == 0
    assert ammo.percent() == 0.0


def test_components_satisfy_resource_protocols() -> None:
    assert isinstance(HealthComponent(), HealthResource)
    assert isinstance(AmmoComponent(), AmmoResource)
