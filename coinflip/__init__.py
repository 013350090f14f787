#!/usr/bin/env python3
from __future__ import annotations
__version__ = "1.0.0"

# --------------------------------------------------------------------------- #
#                                Logging                                      #
# --------------------------------------------------------------------------- #
from coinflip.core.setup import (
    logger, setup_logging, info, debug, trace
)

# --------------------------------------------------------------------------- #
#                            Flips & statistics                               #
# --------------------------------------------------------------------------- #
from coinflip.core.types import FlipSequence, Outcome, outcome_label
from coinflip.core.flips import generate
from coinflip.core.streaks import FlipStats, compute_stats

# --------------------------------------------------------------------------- #
#                               Application                                   #
# --------------------------------------------------------------------------- #
from coinflip.config import ConfigError, SimulatorConfig, load_config
from coinflip.app import AppState, MenuLoop
