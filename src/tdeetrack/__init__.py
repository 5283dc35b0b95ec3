"""Adaptive TDEE estimation from weight and calorie logs."""

from __future__ import annotations

from tdeetrack.profiles.body_calc import formula_tdee, inches_to_cm, lbs_to_kg
from tdeetrack.tracking.engine import compute_adaptive_tdee
from tdeetrack.tracking.models import (
    AdaptiveTDEEResult,
    EngineConfig,
    IntakeEntry,
    UserBiometrics,
    WeightEntry,
)

__version__ = "0.1.0"

__all__ = [
    "AdaptiveTDEEResult",
    "EngineConfig",
    "IntakeEntry",
    "UserBiometrics",
    "WeightEntry",
    "compute_adaptive_tdee",
    "formula_tdee",
    "inches_to_cm",
    "lbs_to_kg",
]
