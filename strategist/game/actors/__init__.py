"""Actors and the components they are composed of."""

from .components import AmmoComponent, HealthComponent
from .core import Actor
from .movement import DirectMover

__all__ = ["Actor", "AmmoComponent", "DirectMover", "HealthComponent"]
