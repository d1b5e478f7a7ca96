from __future__ import annotations

from collections.abc import Iterator

import pytest

from strategist import config
from strategist.events import reset_event_bus_for_testing


@pytest.fixture(autouse=True)
def reset_event_bus() -> Iterator[None]:
    """Give every test a fresh global event bus."""
    reset_event_bus_for_testing()
    yield
    reset_event_bus_for_testing()


@pytest.fixture(autouse=True)
def strategist_ai_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the global AI kill switch is on unless a test flips it."""
    monkeypatch.setattr(config, "STRATEGIST_AI_ENABLED", True)
