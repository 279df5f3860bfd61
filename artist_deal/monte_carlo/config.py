"""
PURPOSE: Simulation configuration and model constants for the deal Monte Carlo engine.

RESPONSIBILITIES:
- Define simulation hyperparameters (number of runs, random seed, iteration cap)
- Revenue model constants (payout per stream, ancillary income)
- Reach and viral model constants
- Percentile and chart output parameters
- Single responsibility: configuration only, no simulation logic
"""

import os


def _get_env_int(name, default):
    value = os.environ.get(name)
    if not value:
        return default
    return int(value)


# Simulation Parameters
NUM_RUNS = _get_env_int("ARTIST_DEAL_NUM_RUNS", 5000)  # Default iteration count
RANDOM_SEED = _get_env_int("ARTIST_DEAL_RANDOM_SEED", None)  # Set to int for reproducibility, None for random
MAX_ITERATIONS = _get_env_int("ARTIST_DEAL_MAX_ITERATIONS", 1_000_000)  # Caps latency of a single request
LOG_LEVEL = os.environ.get("ARTIST_DEAL_LOG_LEVEL", "INFO").upper()

# Revenue Model
AVG_REVENUE_PER_STREAM = 0.004  # Blended payout per stream (currency units)
ANCILLARY_RATE_MEAN = 0.10  # Merch/sync income as a fraction of stream revenue
ANCILLARY_RATE_STD = 0.05

# Reach Model
FALLBACK_STREAMS_PER_FOLLOWER = 20  # Used when the artist has no followers yet
MARKETING_EFFICIENCY_STD = 5
ORGANIC_REACH_MEAN = 1.0
ORGANIC_REACH_STD = 0.2

# Viral Spike Event
VIRAL_MULTIPLIER_MEAN = 5
VIRAL_MULTIPLIER_STD = 1

# Percentile Outputs
MEDIAN_PERCENTILE = 0.5
VAR_PERCENTILE = 0.05  # Value-at-Risk: 5th percentile profit
UPSIDE_PERCENTILE = 0.99

# Chart Data
HISTOGRAM_BIN_COUNT = 40
SCATTER_TARGET_POINTS = 300

# Output Configuration
ROUND_CURRENCY = 2
ROUND_PERCENT = 1
DEFAULT_GENRE = "custom"


def get_percentile_levels():
    """Return the percentile fractions reported by the analyzer."""
    return {
        "median": MEDIAN_PERCENTILE,
        "var": VAR_PERCENTILE,
        "upside": UPSIDE_PERCENTILE,
    }
