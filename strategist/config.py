"""
Configuration constants.

Process-wide settings for the simulation harness. Designer-tunable agent
behavior lives in ``strategist.constants`` (defaults) and
``strategist.game.actors.ai.tuning.StrategistConfig`` (per-agent values).
"""

import sys
from pathlib import Path

from strategist.types import RandomSeed

# =============================================================================
# GENERAL
# =============================================================================

PROJECT_ROOT_PATH = Path(__file__).resolve().parent.parent

# RANDOM_SEED = None
RANDOM_SEED: RandomSeed = "arena1"

# Test environment detection
IS_TEST_ENVIRONMENT = "pytest" in sys.modules

# =============================================================================
# SIMULATION
# =============================================================================

# Fixed simulation step in seconds (60 ticks per simulated second).
FIXED_TIMESTEP = 1.0 / 60.0

# Default length of a headless run started from the command line.
DEFAULT_SIMULATION_SECONDS = 90.0

# Set to False to freeze every strategist agent (useful when debugging scenes).
STRATEGIST_AI_ENABLED = True

# =============================================================================
# LOGGING
# =============================================================================

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
