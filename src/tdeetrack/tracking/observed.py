"""Observed TDEE from logged intake and weight change.

Energy balance says intake minus expenditure shows up as a change in body
mass. Rearranged:

    TDEE = avg_intake - daily_weight_change_kg × KCAL_PER_KG

Losing weight (negative slope) therefore means expenditure is above intake;
gaining means it is below. The weight slope comes from a regression on the
EWMA-smoothed series rather than first/last differences, so a single
salty dinner doesn't swing the estimate by hundreds of calories.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, Optional

import numpy as np

from tdeetrack.tracking.constants import (
    DEFAULT_SMOOTHING,
    KCAL_PER_KG,
    MIN_DATA_POINTS,
    REGRESSION_WINDOW,
    TDEE_MAX,
    TDEE_MIN,
    clamp_tdee,
)
from tdeetrack.tracking.ema import calculate_trend_from_scratch
from tdeetrack.tracking.models import AlignedSeries, IntakeEntry, ObservedResult, WeightEntry
from tdeetrack.tracking.regression import linear_regression


class WindowEstimate(NamedTuple):
    """Energy-balance estimate for one window of smoothed data."""

    tdee: float
    avg_intake: float
    slope: float  # kg/day
    r2: float


def align_logs(
    weights: Sequence[WeightEntry],
    intakes: Sequence[IntakeEntry],
) -> AlignedSeries:
    """
    Merge weight and intake logs into a day-aligned dataset.

    Only days that have both a weigh-in and an intake entry are kept; the
    result is sorted by date. The input sequences are not modified.

    Args:
        weights: Weight log (one entry per day)
        intakes: Intake log (one entry per day)

    Returns:
        AlignedSeries over the intersection of dates
    """
    weight_by_date = {w.date: w.weight for w in weights}
    intake_by_date = {i.date: i.calories for i in intakes}

    dates = sorted(weight_by_date.keys() & intake_by_date.keys())
    return AlignedSeries(
        dates=dates,
        weights=np.array([weight_by_date[d] for d in dates], dtype=float),
        intakes=np.array([intake_by_date[d] for d in dates], dtype=float),
    )


def estimate_window(
    smoothed: np.ndarray,
    intakes: np.ndarray,
    kcal_per_kg: float = KCAL_PER_KG,
) -> WindowEstimate:
    """
    Back-calculate TDEE over one window.

    Args:
        smoothed: Smoothed weights for the window (kg), one per day
        intakes: Raw intakes for the same days (kcal)
        kcal_per_kg: Energy density of body mass change

    Returns:
        WindowEstimate (unrounded)
    """
    reg = linear_regression(smoothed)
    avg_intake = float(np.mean(intakes)) if intakes.size else 0.0
    # Positive slope (gaining) means part of intake was stored, not burned
    tdee = avg_intake - reg.slope * kcal_per_kg
    return WindowEstimate(tdee=tdee, avg_intake=avg_intake, slope=reg.slope, r2=reg.r2)


def compute_observed_tdee(
    weights: Sequence[WeightEntry],
    intakes: Sequence[IntakeEntry],
    smoothing: float = DEFAULT_SMOOTHING,
    kcal_per_kg: float = KCAL_PER_KG,
    min_data_points: int = MIN_DATA_POINTS,
    regression_window: int = REGRESSION_WINDOW,
    tdee_min: float = TDEE_MIN,
    tdee_max: float = TDEE_MAX,
) -> Optional[ObservedResult]:
    """
    Compute observed TDEE from weight and intake logs.

    Returns None when fewer than min_data_points days have both a weigh-in
    and an intake entry. That signals insufficient data, not an error.

    Args:
        weights: Weight log ascending by date
        intakes: Intake log ascending by date
        smoothing: EWMA factor for the weight series
        kcal_per_kg: Energy density of body mass change
        min_data_points: Paired days required
        regression_window: Trailing days used for slope and average intake
        tdee_min: Lower bound for the reported observed TDEE
        tdee_max: Upper bound for the reported observed TDEE

    Returns:
        ObservedResult, or None if there isn't enough data
    """
    aligned = align_logs(weights, intakes)
    if len(aligned) < min_data_points:
        return None

    smoothed = np.array(calculate_trend_from_scratch(aligned.weights, smoothing))

    window = min(regression_window, len(aligned))
    est = estimate_window(smoothed[-window:], aligned.intakes[-window:], kcal_per_kg)

    return ObservedResult(
        observed_tdee=round(clamp_tdee(est.tdee, tdee_min, tdee_max)),
        avg_intake=round(est.avg_intake),
        data_points=len(aligned),
        smoothed_weights=smoothed.tolist(),
        regression_slope=est.slope,
        r2=est.r2,
        weekly_weight_change=est.slope * 7,
        dates=list(aligned.dates),
    )
