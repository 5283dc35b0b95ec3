"""Metabolic adaptation and plateau detection."""

from __future__ import annotations

from collections.abc import Sequence

from tdeetrack.tracking.constants import (
    ADAPTATION_MIN_CONFIDENCE,
    METABOLIC_ADAPTATION_THRESHOLD,
    PLATEAU_MIN_DAYS,
    PLATEAU_THRESHOLD_KG_PER_WEEK,
)
from tdeetrack.tracking.regression import linear_regression


def detect_metabolic_adaptation(
    formula_tdee: float,
    observed_tdee: float,
    confidence: float,
    threshold: float = METABOLIC_ADAPTATION_THRESHOLD,
    min_confidence: float = ADAPTATION_MIN_CONFIDENCE,
) -> bool:
    """
    Detect expenditure running well below the formula prediction.

    BMR naturally falls as weight comes off, but the formula already accounts
    for that. An observed TDEE more than `threshold` below formula suggests
    adaptive thermogenesis. Thin evidence (confidence below min_confidence)
    never fires, and exactly `threshold` below does not fire either.
    """
    if confidence < min_confidence:
        return False
    if formula_tdee <= 0 or observed_tdee >= formula_tdee:
        return False

    shortfall = (formula_tdee - observed_tdee) / formula_tdee
    return shortfall > threshold


def detect_plateau(
    smoothed_weights: Sequence[float],
    weekly_weight_change: float,
    goal_type: str,
    avg_intake: float,
    estimated_tdee: float,
    threshold_kg_per_week: float = PLATEAU_THRESHOLD_KG_PER_WEEK,
    min_days: int = PLATEAU_MIN_DAYS,
) -> bool:
    """
    Detect a weight-loss plateau: flat weight despite an intended deficit.

    All of these must hold:
        1. The goal is a cut
        2. Average intake is below estimated TDEE (nominally in deficit)
        3. Weekly weight change is within the threshold of zero
        4. At least min_days of smoothed weights exist, and the regression
           over the last min_days is flat

    Not being in a deficit at all is a goal problem, not a plateau.

    Args:
        smoothed_weights: EWMA-smoothed weights, oldest first
        weekly_weight_change: Recent kg/week from the observed estimate
        goal_type: 'cut', 'maintain' or 'bulk'
        avg_intake: Average daily intake (kcal)
        estimated_tdee: Current TDEE estimate (kcal)

    Returns:
        True if a plateau is detected
    """
    if goal_type != "cut":
        return False

    if avg_intake >= estimated_tdee:
        return False

    if abs(weekly_weight_change) > threshold_kg_per_week:
        return False

    if len(smoothed_weights) < min_days:
        return False

    recent = list(smoothed_weights)[-min_days:]
    reg = linear_regression(recent)
    return abs(reg.slope) < threshold_kg_per_week / 7
