"""Weight tracking and adaptive TDEE estimation.

This module implements EWMA smoothing of daily weigh-ins, a least-squares
weight trend, and an energy-balance estimate of TDEE that is blended with
the Mifflin-St Jeor prior according to how much (and how clean) the data is.

Key components:
- EWMA trend calculation (15% smoothing, ~1 week time constant)
- Observed TDEE from intake and regression slope (7700 kcal/kg)
- Confidence scoring and Bayesian-style blending
- Metabolic adaptation and plateau detection
- Rolling TDEE trend for charts

The orchestrator lives in tdeetrack.tracking.engine.
"""

from __future__ import annotations

from tdeetrack.tracking.blend import bayesian_blend
from tdeetrack.tracking.confidence import compute_confidence
from tdeetrack.tracking.detectors import detect_metabolic_adaptation, detect_plateau
from tdeetrack.tracking.ema import calculate_trend_from_scratch, update_trend
from tdeetrack.tracking.models import (
    AdaptiveEstimate,
    AdaptiveTDEEResult,
    BlendResult,
    EngineConfig,
    EstimateSource,
    FormulaResult,
    IntakeEntry,
    ObservedResult,
    TDEEInsight,
    TrendPoint,
    UserBiometrics,
    WeightEntry,
    WeightTrend,
)
from tdeetrack.tracking.observed import compute_observed_tdee
from tdeetrack.tracking.regression import RegressionResult, linear_regression
from tdeetrack.tracking.trend import compute_tdee_trend

__all__ = [
    "AdaptiveEstimate",
    "AdaptiveTDEEResult",
    "BlendResult",
    "EngineConfig",
    "EstimateSource",
    "FormulaResult",
    "IntakeEntry",
    "ObservedResult",
    "RegressionResult",
    "TDEEInsight",
    "TrendPoint",
    "UserBiometrics",
    "WeightEntry",
    "WeightTrend",
    "bayesian_blend",
    "calculate_trend_from_scratch",
    "compute_confidence",
    "compute_observed_tdee",
    "compute_tdee_trend",
    "detect_metabolic_adaptation",
    "detect_plateau",
    "linear_regression",
    "update_trend",
]
