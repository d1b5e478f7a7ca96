"""Deterministic random streams for agent decision-making.

Every agent draws its score jitter, cover jitter and weighted selections
from its own stream derived from a master seed. This keeps a simulation
reproducible from one seed, and stops one agent's random consumption from
shifting the choices of every other agent.

Usage:
    # At simulation startup
    from strategist.util import rng
    rng.init(config.RANDOM_SEED)

    # Per agent - cache the stream reference
    stream = rng.get(f"ai.strategist.{actor_id}")
    jitter = stream.uniform(-0.05, 0.05)

    # After rng.reset(), cached references automatically use the new stream

Streams satisfy the ``RandomSource`` protocol used by the AI core, so any
stream can be injected where a ``random.Random`` would otherwise be used.

Domain naming convention (hierarchical):
    - "ai.strategist.<actor_id>"
    - "world.spawns"
"""

from __future__ import annotations

import zlib
from collections.abc import Sequence
from random import Random
from typing import TypeAlias, TypeVar

from strategist.types import RandomSeed

T = TypeVar("T")


class RNGStream:
    """Proxy that delegates to the current RNG for a domain.

    Callers may hold on to a stream across ``reset()``: each call looks up the
    provider's current ``Random`` for the domain.
    """

    def __init__(self, provider: RNGProvider, domain: str) -> None:
        self._provider = provider
        self._domain = domain

    @property
    def domain(self) -> str:
        return self._domain

    def _rng(self) -> Random:
        return self._provider._get_raw(self._domain)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng().random()

    def uniform(self, a: float, b: float) -> float:
        """Return random float N such that a <= N <= b."""
        return self._rng().uniform(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """Return random element from non-empty sequence."""
        return self._rng().choice(seq)


# Anything that can stand in for a RandomSource in the AI core.
RNG: TypeAlias = Random | RNGStream


class RNGProvider:
    """Hands out isolated, reproducible streams keyed by domain name."""

    def __init__(self, master_seed: RandomSeed = None) -> None:
        self._master_seed = master_seed
        self._streams: dict[str, Random] = {}
        self._proxies: dict[str, RNGStream] = {}

    @property
    def master_seed(self) -> RandomSeed:
        return self._master_seed

    def get(self, domain: str) -> RNGStream:
        """Return the (cached) stream proxy for ``domain``."""
        if domain not in self._proxies:
            self._proxies[domain] = RNGStream(self, domain)
        return self._proxies[domain]

    def _get_raw(self, domain: str) -> Random:
        if domain not in self._streams:
            if self._master_seed is None:
                # No seed: system entropy, non-deterministic behavior
                self._streams[domain] = Random()
            else:
                # crc32 rather than hash(): hash() is salted per interpreter
                # session via PYTHONHASHSEED.
                derived_seed = zlib.crc32(f"{self._master_seed}:{domain}".encode())
                self._streams[domain] = Random(derived_seed)
        return self._streams[domain]

    def reset(self, master_seed: RandomSeed = None) -> None:
        """Reseed every stream. Existing proxies stay valid."""
        self._master_seed = master_seed
        self._streams.clear()


# =============================================================================
# Module-level API
# =============================================================================

_provider: RNGProvider | None = None


def init(master_seed: RandomSeed = None) -> None:
    """Initialize the global provider, or reseed it if it already exists."""
    global _provider
    if _provider is not None:
        _provider.reset(master_seed)
    else:
        _provider = RNGProvider(master_seed)


def get(domain: str) -> RNGStream:
    """Get a stream for ``domain`` from the global provider.

    Auto-initializes an unseeded provider when ``init()`` was never called.
    """
    global _provider
    if _provider is None:
        _provider = RNGProvider(None)
    return _provider.get(domain)


def reset(master_seed: RandomSeed = None) -> None:
    """Reseed all global streams.

    Raises:
        RuntimeError: If ``init()`` has not been called yet.
    """
    if _provider is None:
        raise RuntimeError("RNG not initialized - call rng.init() first")
    _provider.reset(master_seed)
