"""Default constants for adaptive TDEE estimation.

These are the values the engine uses unless an EngineConfig overrides them.
Most are common clinical heuristics rather than fitted parameters.
"""

from __future__ import annotations

# Calories per kg of body mass change (mix of fat and lean tissue)
KCAL_PER_KG = 7700

# EWMA smoothing factor for daily weigh-ins. Lower = more smoothing.
# Day-to-day swings from water, sodium and gut contents are large compared
# with true tissue change, so this is smoother than a typical trend line.
DEFAULT_SMOOTHING = 0.15

# Trailing window (days) for the weight regression
REGRESSION_WINDOW = 14

# Minimum paired days before observed data is used at all
MIN_DATA_POINTS = 7

# Paired days at which data density is fully trusted
FULL_CONFIDENCE_DATA_POINTS = 28

# Rolling window for trend chart points
TREND_WINDOW = 7

# Upper bound on the weight given to the observed estimate
MAX_OBSERVED_WEIGHT = 0.95

# Observed TDEE this fraction below formula flags adaptation (strict >)
METABOLIC_ADAPTATION_THRESHOLD = 0.10
ADAPTATION_MIN_CONFIDENCE = 0.3

# Weight change below this (kg/week) for PLATEAU_MIN_DAYS counts as a plateau
PLATEAU_THRESHOLD_KG_PER_WEEK = 0.1
PLATEAU_MIN_DAYS = 14

# Weekly change within +/- this (kg/week) is reported as a stable trend
TREND_DEAD_ZONE_KG_PER_WEEK = 0.1

# Sanity range for any TDEE value returned
TDEE_MIN = 800
TDEE_MAX = 6000

# Recommended intake never goes below this, whatever the goal
MIN_RECOMMENDED_INTAKE = 1200

# Confidence reported when only the formula is available
FORMULA_ONLY_CONFIDENCE = 0.15


def clamp_tdee(value: float, low: float = TDEE_MIN, high: float = TDEE_MAX) -> float:
    """Clamp a TDEE value to the sane range."""
    return max(low, min(high, value))
